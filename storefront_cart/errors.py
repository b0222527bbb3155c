"""Error types for the storefront cart engine."""

from typing import Optional


class errmsg:
    """Error message constants for the cart domain."""

    NO_ACTIVE_STORE = "No active cart store; use_cart() must be called inside a CartSession"
    SESSION_NOT_ENTERED = "Cart session has not been entered"
    SESSION_ALREADY_ACTIVE = "Cart session is already active"
    STORE_CLOSED = "Cart store is closed"
    PRODUCT_ID_REQUIRED = "Product ID is required"
    PRICE_NON_NEGATIVE = "Price must not be negative"
    QUANTITY_INTEGER = "Quantity must be an integer"
    UNKNOWN_COMMAND = "Unknown command type"
    RECORD_ID_REQUIRED = "Catalog record has no id"
    RECORD_PRICE_REQUIRED = "Catalog record has no price"
    RECORD_PRICE_INVALID = "Catalog record price is not a valid amount"
    RECORD_PRICE_NEGATIVE = "Catalog record price is negative"
    RECORD_ID_INVALID = "Catalog record id must not be a boolean"
    RECORD_RATING_INVALID = "Catalog record rating is not valid"
    RECORD_RATING_COUNT_NEGATIVE = "Catalog record rating count is negative"


class CartError(Exception):
    """Base class for cart engine errors."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class NoActiveStoreError(CartError):
    """Cart state was requested outside an active store scope.

    This is a wiring bug in the caller, not a recoverable condition.
    """


class CatalogRecordError(CartError):
    """A raw catalog record could not be converted into a Product."""

    def __init__(self, message: str, record_id=None, cause: Optional[Exception] = None):
        super().__init__(message, cause)
        self.record_id = record_id


class CommandRejectedError(Exception):
    """Command was rejected due to business rule violation."""
