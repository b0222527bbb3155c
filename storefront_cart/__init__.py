"""In-memory shopping cart state engine for the storefront."""

from .catalog import product_from_record, products_from_records
from .commands import AddItem, ClearCart, RemoveItem, SetQuantity
from .config import CartConfig, configure_logging, setup
from .errors import (
    CartError,
    CatalogRecordError,
    CommandRejectedError,
    NoActiveStoreError,
    errmsg,
)
from .events import (
    CartCleared,
    EventPage,
    ItemAdded,
    ItemRemoved,
    QuantityIncremented,
    QuantityUpdated,
)
from .models import LineItem, Product, Rating
from .observers import LatestSnapshot, LogObserver
from .session import CartSession, use_cart
from .state import CartState, StateRouter, cart_state_router, rebuild_state
from .store import CartSnapshot, CartStore, Observer
from .summary import OrderSummary, order_summary, summarize

__all__ = [
    # Store
    "CartStore",
    "CartSnapshot",
    "Observer",
    # Session
    "CartSession",
    "use_cart",
    # Models
    "Product",
    "Rating",
    "LineItem",
    # Commands
    "AddItem",
    "RemoveItem",
    "SetQuantity",
    "ClearCart",
    # Events
    "ItemAdded",
    "QuantityIncremented",
    "QuantityUpdated",
    "ItemRemoved",
    "CartCleared",
    "EventPage",
    # State
    "CartState",
    "StateRouter",
    "cart_state_router",
    "rebuild_state",
    # Errors
    "CartError",
    "NoActiveStoreError",
    "CatalogRecordError",
    "CommandRejectedError",
    "errmsg",
    # Observers
    "LogObserver",
    "LatestSnapshot",
    # Catalog
    "product_from_record",
    "products_from_records",
    # Summary
    "OrderSummary",
    "order_summary",
    "summarize",
    # Config
    "CartConfig",
    "configure_logging",
    "setup",
]
