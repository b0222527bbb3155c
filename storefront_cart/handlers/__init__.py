"""Cart command handlers.

Each handler receives (command, current state, bound logger) and returns
the event the command produces, or None when the command is a no-op.
"""

from ..commands import AddItem, ClearCart, RemoveItem, SetQuantity
from .add_item import handle_add_item
from .clear_cart import handle_clear_cart
from .remove_item import handle_remove_item
from .set_quantity import handle_set_quantity

COMMAND_HANDLERS = {
    AddItem: handle_add_item,
    RemoveItem: handle_remove_item,
    SetQuantity: handle_set_quantity,
    ClearCart: handle_clear_cart,
}

__all__ = [
    "COMMAND_HANDLERS",
    "handle_add_item",
    "handle_remove_item",
    "handle_set_quantity",
    "handle_clear_cart",
]
