"""Cart events and the in-memory event log page type.

Every accepted command produces exactly one event. Events are applied to
CartState by the state router and recorded as EventPages by the store.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Hashable, Union

from .models import LineItem


@dataclass(frozen=True)
class ItemAdded:
    item: LineItem


@dataclass(frozen=True)
class QuantityIncremented:
    product_id: Hashable
    new_quantity: int


@dataclass(frozen=True)
class QuantityUpdated:
    product_id: Hashable
    old_quantity: int
    new_quantity: int


@dataclass(frozen=True)
class ItemRemoved:
    product_id: Hashable
    quantity: int


@dataclass(frozen=True)
class CartCleared:
    item_count: int


CartEvent = Union[ItemAdded, QuantityIncremented, QuantityUpdated, ItemRemoved, CartCleared]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class EventPage:
    sequence: int
    event: CartEvent
    created_at: datetime = field(default_factory=_utcnow)

    @property
    def type_name(self) -> str:
        return type(self.event).__name__
