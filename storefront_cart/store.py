"""CartStore - the single owner of cart state.

The store runs each command through its handler, applies the resulting
event to CartState, records it in the in-memory event log and republishes
a fresh CartSnapshot to every subscriber before returning to the caller.

Usage:
    store = CartStore()
    unsubscribe = store.subscribe(lambda snapshot: render(snapshot))
    store.add_item(product)
    store.set_quantity(product.id, 3)
    store.total_price()
    store.close()
"""

from __future__ import annotations

import uuid
from collections import deque
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Hashable, Optional

import structlog

from .commands import AddItem, ClearCart, RemoveItem, SetQuantity
from .errors import NoActiveStoreError, errmsg
from .events import EventPage
from .handlers import COMMAND_HANDLERS
from .models import LineItem, Product
from .state import CartState, cart_state_router

Observer = Callable[["CartSnapshot"], None]


@dataclass(frozen=True)
class CartSnapshot:
    """Immutable view of the cart after a given number of events."""

    items: tuple[LineItem, ...] = ()
    total_price: Decimal = Decimal("0")
    item_count: int = 0
    sequence: int = 0

    @classmethod
    def from_state(cls, state: CartState, sequence: int) -> CartSnapshot:
        items = tuple(state.items.values())
        return cls(
            items=items,
            total_price=sum((item.subtotal for item in items), Decimal("0")),
            item_count=sum(item.quantity for item in items),
            sequence=sequence,
        )

    @property
    def is_empty(self) -> bool:
        return not self.items

    def line_item(self, product_id: Hashable) -> Optional[LineItem]:
        if isinstance(product_id, bool):
            return None
        for item in self.items:
            if item.id == product_id:
                return item
        return None


class CartStore:
    """Authoritative, single-writer cart state container.

    All operations are synchronous. A closed store rejects every read and
    write with NoActiveStoreError.
    """

    def __init__(self, store_id: Optional[str] = None, logger=None):
        self.store_id = store_id or uuid.uuid4().hex
        self._log = (logger or structlog.get_logger()).bind(store_id=self.store_id)
        self._state = cart_state_router.new_state()
        self._pages: list[EventPage] = []
        self._subscribers: list[Observer] = []
        self._snapshot = CartSnapshot()
        self._closed = False
        self._pending: deque[CartSnapshot] = deque()
        self._publishing = False

    # -- lifecycle ---------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Drop all subscribers and refuse further operations."""
        if self._closed:
            return
        self._subscribers.clear()
        self._closed = True
        self._log.info("store_closed", sequence=self._snapshot.sequence)

    def _require_active(self) -> None:
        if self._closed:
            raise NoActiveStoreError(errmsg.STORE_CLOSED)

    # -- observers ---------------------------------------------------------

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register an observer called with each new snapshot.

        Returns:
            A callable that removes the observer. Calling it twice is harmless.
        """
        self._require_active()
        self._subscribers.append(observer)

        def unsubscribe() -> None:
            if observer in self._subscribers:
                self._subscribers.remove(observer)

        return unsubscribe

    def _publish(self, snapshot: CartSnapshot) -> None:
        """Deliver a snapshot to every subscriber, in mutation order.

        A mutation made by an observer while a snapshot is being delivered
        only queues its snapshot; the outermost call delivers the queue so
        every observer sees snapshots in sequence order. Each observer gets
        each snapshot even when another observer raises; the first error is
        re-raised once the queue is drained.
        """
        self._pending.append(snapshot)
        if self._publishing:
            return
        self._publishing = True
        errors: list[Exception] = []
        try:
            while self._pending:
                current = self._pending.popleft()
                for observer in list(self._subscribers):
                    try:
                        observer(current)
                    except Exception as e:
                        self._log.error(
                            "observer_failed",
                            observer=getattr(observer, "name", repr(observer)),
                            sequence=current.sequence,
                            error=str(e),
                        )
                        errors.append(e)
        finally:
            self._publishing = False
            self._pending.clear()
        if errors:
            raise errors[0]

    # -- commands ----------------------------------------------------------

    def execute(self, cmd) -> CartSnapshot:
        """Run a command and return the resulting snapshot.

        Raises:
            NoActiveStoreError: If the store is closed.
            CommandRejectedError: If the command carries malformed input.
            ValueError: If no handler is registered for the command type.
        """
        self._require_active()
        handler = COMMAND_HANDLERS.get(type(cmd))
        if handler is None:
            raise ValueError(f"{errmsg.UNKNOWN_COMMAND}: {type(cmd).__name__}")

        event = handler(cmd, self._state, self._log)
        if event is None:
            return self._snapshot

        cart_state_router.apply(self._state, event)
        page = EventPage(sequence=len(self._pages), event=event)
        self._pages.append(page)
        self._snapshot = CartSnapshot.from_state(self._state, sequence=len(self._pages))
        snapshot = self._snapshot
        self._publish(snapshot)
        return snapshot

    def add_item(self, product: Product) -> CartSnapshot:
        return self.execute(AddItem(product=product))

    def remove_item(self, product_id: Hashable) -> CartSnapshot:
        return self.execute(RemoveItem(product_id=product_id))

    def set_quantity(self, product_id: Hashable, quantity: int) -> CartSnapshot:
        return self.execute(SetQuantity(product_id=product_id, quantity=quantity))

    def clear(self) -> CartSnapshot:
        return self.execute(ClearCart())

    # -- queries -----------------------------------------------------------

    def snapshot(self) -> CartSnapshot:
        self._require_active()
        return self._snapshot

    def items(self) -> tuple[LineItem, ...]:
        return self.snapshot().items

    def line_item(self, product_id: Hashable) -> Optional[LineItem]:
        self._require_active()
        return self._state.get(product_id)

    def total_price(self) -> Decimal:
        return self.snapshot().total_price

    def item_count(self) -> int:
        return self.snapshot().item_count

    def events(self) -> tuple[EventPage, ...]:
        self._require_active()
        return tuple(self._pages)
