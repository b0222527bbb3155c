"""AddItem command handler."""

from ..commands import AddItem
from ..errors import errmsg
from ..events import ItemAdded, QuantityIncremented
from ..models import LineItem
from ..state import CartState
from ..validation import require_id, require_non_negative


def handle_add_item(cmd: AddItem, state: CartState, log):
    product = cmd.product
    require_id(product.id, errmsg.PRODUCT_ID_REQUIRED)
    require_non_negative(product.price, errmsg.PRICE_NON_NEGATIVE)

    existing = state.get(product.id)
    if existing is not None:
        new_quantity = existing.quantity + 1
        log.info("incrementing_item", product_id=product.id, new_quantity=new_quantity)
        return QuantityIncremented(product_id=product.id, new_quantity=new_quantity)

    log.info("adding_item", product_id=product.id, price=str(product.price))
    return ItemAdded(item=LineItem.from_product(product))
