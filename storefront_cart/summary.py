"""Order summary shown next to the cart.

Display-only arithmetic over the cart total: free shipping and a flat
percentage discount. Nothing here is stored in the cart.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from .config import DEFAULT_DISCOUNT_RATE
from .models import to_decimal
from .store import CartSnapshot

CENTS = Decimal("0.01")


def _cents(amount: Decimal) -> Decimal:
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class OrderSummary:
    subtotal: Decimal
    discount: Decimal
    shipping: Decimal
    total: Decimal


def order_summary(subtotal, discount_rate: Optional[Decimal] = None) -> OrderSummary:
    """Compute the summary rows for a cart subtotal.

    Raises:
        ValueError: If discount_rate is outside [0, 1].
    """
    rate = DEFAULT_DISCOUNT_RATE if discount_rate is None else to_decimal(discount_rate)
    if rate < 0 or rate > 1:
        raise ValueError(f"discount rate must be between 0 and 1: {rate}")

    amount = to_decimal(subtotal)
    discount = _cents(amount * rate)
    subtotal_cents = _cents(amount)
    return OrderSummary(
        subtotal=subtotal_cents,
        discount=discount,
        shipping=_cents(Decimal("0")),
        total=subtotal_cents - discount,
    )


def summarize(snapshot: CartSnapshot, discount_rate: Optional[Decimal] = None) -> OrderSummary:
    return order_summary(snapshot.total_price, discount_rate)
