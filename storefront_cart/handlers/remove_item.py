"""RemoveItem command handler."""

from ..commands import RemoveItem
from ..events import ItemRemoved
from ..state import CartState


def handle_remove_item(cmd: RemoveItem, state: CartState, log):
    item = state.get(cmd.product_id)
    if item is None:
        log.debug("remove_skipped", product_id=cmd.product_id)
        return None

    log.info("removing_item", product_id=cmd.product_id, quantity=item.quantity)
    return ItemRemoved(product_id=cmd.product_id, quantity=item.quantity)
