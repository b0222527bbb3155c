"""ClearCart command handler."""

from ..commands import ClearCart
from ..events import CartCleared
from ..state import CartState


def handle_clear_cart(cmd: ClearCart, state: CartState, log):
    item_count = sum(item.quantity for item in state.items.values())
    log.info("clearing_cart", item_count=item_count)
    return CartCleared(item_count=item_count)
