"""Cart state and event replay.

StateRouter replaces manual if/elif chains over event types: appliers are
registered per event class and dispatched on the event's exact type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Generic, Iterable, TypeVar

from .events import (
    CartCleared,
    EventPage,
    ItemAdded,
    ItemRemoved,
    QuantityIncremented,
    QuantityUpdated,
)

S = TypeVar("S")

StateApplier = Callable[[S, object], None]
StateFactory = Callable[[], S]


class StateRouter(Generic[S]):
    """Fluent state reconstruction router.

    Example::

        router = (
            StateRouter(CartState)
            .on(ItemAdded, apply_item_added)
            .on(ItemRemoved, apply_item_removed)
        )

        state = router.with_events(pages)
    """

    def __init__(self, state_factory: StateFactory[S]) -> None:
        """Create a StateRouter for state type S.

        Args:
            state_factory: Callable that returns a default/zero state.
        """
        self._state_factory = state_factory
        self._handlers: dict[type, StateApplier[S]] = {}

    def on(self, event_type: type, handler: StateApplier[S]) -> StateRouter[S]:
        """Register a handler for an event type.

        Raises:
            TypeError: If a handler is already registered for event_type.
        """
        if event_type in self._handlers:
            raise TypeError(f"duplicate applier for {event_type.__name__}")
        self._handlers[event_type] = handler
        return self

    def new_state(self) -> S:
        return self._state_factory()

    def apply(self, state: S, event: object) -> None:
        """Apply a single event to existing state.

        Unknown event types are ignored.
        """
        if event is None:
            return
        handler = self._handlers.get(type(event))
        if handler is not None:
            handler(state, event)

    def with_events(self, events: Iterable[object]) -> S:
        """Create fresh state, apply events in order, return final state.

        Accepts bare events or EventPages.
        """
        state = self._state_factory()
        for event in events:
            if isinstance(event, EventPage):
                event = event.event
            self.apply(state, event)
        return state


@dataclass
class CartState:
    items: dict = field(default_factory=dict)  # product_id -> LineItem, insertion ordered

    def get(self, product_id):
        """Return the line item for an id, or None.

        Boolean ids never match, so True does not find the item with id 1.
        """
        if isinstance(product_id, bool):
            return None
        return self.items.get(product_id)


def apply_item_added(state: CartState, event: ItemAdded) -> None:
    state.items[event.item.id] = event.item


def apply_quantity_incremented(state: CartState, event: QuantityIncremented) -> None:
    # Reassigning an existing key keeps its position in the dict.
    state.items[event.product_id] = state.items[event.product_id].with_quantity(event.new_quantity)


def apply_quantity_updated(state: CartState, event: QuantityUpdated) -> None:
    state.items[event.product_id] = state.items[event.product_id].with_quantity(event.new_quantity)


def apply_item_removed(state: CartState, event: ItemRemoved) -> None:
    state.items.pop(event.product_id, None)


def apply_cart_cleared(state: CartState, event: CartCleared) -> None:
    state.items.clear()


cart_state_router = (
    StateRouter(CartState)
    .on(ItemAdded, apply_item_added)
    .on(QuantityIncremented, apply_quantity_incremented)
    .on(QuantityUpdated, apply_quantity_updated)
    .on(ItemRemoved, apply_item_removed)
    .on(CartCleared, apply_cart_cleared)
)


def rebuild_state(pages: Iterable[EventPage]) -> CartState:
    return cart_state_router.with_events(pages)
