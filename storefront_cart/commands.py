"""Cart commands: requests to change the cart."""

from dataclasses import dataclass
from typing import Hashable

from .models import Product


@dataclass(frozen=True)
class AddItem:
    product: Product


@dataclass(frozen=True)
class RemoveItem:
    product_id: Hashable


@dataclass(frozen=True)
class SetQuantity:
    product_id: Hashable
    quantity: int


@dataclass(frozen=True)
class ClearCart:
    pass
