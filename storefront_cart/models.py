"""Product and line item value types.

Products are the read-only input handed over by the catalog layer. A
LineItem is a by-value copy of a Product plus a quantity, so later catalog
changes never reach items already sitting in a cart.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from decimal import Decimal, InvalidOperation
from typing import Hashable, Optional


def to_decimal(value) -> Decimal:
    """Convert a price-like value to Decimal.

    Floats go through their string form so 109.95 stays 109.95.

    Raises:
        ValueError: If the value is not a finite number.
    """
    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, bool):
        raise ValueError(f"not a price: {value!r}")
    else:
        try:
            amount = Decimal(str(value))
        except InvalidOperation as e:
            raise ValueError(f"not a price: {value!r}") from e
    if not amount.is_finite():
        raise ValueError(f"not a price: {value!r}")
    return amount


@dataclass(frozen=True)
class Rating:
    rate: Optional[Decimal] = None
    count: int = 0


@dataclass(frozen=True)
class Product:
    """A catalog product as seen by the cart."""

    id: Hashable
    name: str
    price: Decimal
    description: Optional[str] = None
    image: Optional[str] = None
    category: Optional[str] = None
    rating: Optional[Rating] = None

    def __post_init__(self):
        object.__setattr__(self, "price", to_decimal(self.price))

    def short_description(self, max_length: int = 100) -> str:
        """Return the description cut to max_length characters plus "..."."""
        if not self.description:
            return ""
        if len(self.description) <= max_length:
            return self.description
        return self.description[:max_length] + "..."


_PRODUCT_FIELDS = tuple(f.name for f in fields(Product))


@dataclass(frozen=True)
class LineItem(Product):
    """A Product's fields at add time plus a quantity >= 1."""

    quantity: int = 1

    @classmethod
    def from_product(cls, product: Product, quantity: int = 1) -> LineItem:
        values = {name: getattr(product, name) for name in _PRODUCT_FIELDS}
        return cls(quantity=quantity, **values)

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity

    def with_quantity(self, quantity: int) -> LineItem:
        return replace(self, quantity=quantity)
