"""SetQuantity command handler.

A quantity of zero or less removes the item, exactly like RemoveItem.
A positive quantity only updates an item already in the cart; it never
creates one.
"""

from ..commands import RemoveItem, SetQuantity
from ..errors import errmsg
from ..events import QuantityUpdated
from ..state import CartState
from ..validation import require_int
from .remove_item import handle_remove_item


def handle_set_quantity(cmd: SetQuantity, state: CartState, log):
    require_int(cmd.quantity, errmsg.QUANTITY_INTEGER)

    if cmd.quantity <= 0:
        return handle_remove_item(RemoveItem(product_id=cmd.product_id), state, log)

    item = state.get(cmd.product_id)
    if item is None:
        log.debug("set_quantity_skipped", product_id=cmd.product_id)
        return None
    if item.quantity == cmd.quantity:
        return None

    log.info("updating_quantity", product_id=cmd.product_id, new_quantity=cmd.quantity)
    return QuantityUpdated(
        product_id=cmd.product_id,
        old_quantity=item.quantity,
        new_quantity=cmd.quantity,
    )
