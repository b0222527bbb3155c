"""Session scope that owns the lifetime of a CartStore.

A CartSession creates its store on entry and disposes of it on exit. While
the session is active, use_cart() hands out the store to any consumer in the
same context; outside of one it raises NoActiveStoreError.

Example::

    with CartSession() as store:
        store.add_item(product)
        use_cart().item_count()   # same store
    use_cart()                    # raises NoActiveStoreError
"""

from __future__ import annotations

from contextvars import ContextVar, Token
from typing import Optional

import structlog

from .config import CartConfig
from .errors import CartError, NoActiveStoreError, errmsg
from .observers import LogObserver
from .store import CartStore

_active_store: ContextVar[Optional[CartStore]] = ContextVar("storefront_cart_active_store", default=None)

logger = structlog.get_logger()


class CartSession:
    """Application-root scope for one shopper's cart."""

    def __init__(self, config: Optional[CartConfig] = None, store_id: Optional[str] = None):
        self.config = config or CartConfig()
        self._store_id = store_id
        self._store: Optional[CartStore] = None
        self._token: Optional[Token] = None

    @property
    def store(self) -> CartStore:
        """The session's store.

        Raises:
            NoActiveStoreError: If the session is not currently entered.
        """
        if self._store is None or self._store.closed:
            raise NoActiveStoreError(errmsg.SESSION_NOT_ENTERED)
        return self._store

    @property
    def active(self) -> bool:
        return self._store is not None and not self._store.closed

    def __enter__(self) -> CartStore:
        if self._token is not None:
            raise CartError(errmsg.SESSION_ALREADY_ACTIVE)
        store = CartStore(store_id=self._store_id)
        if self.config.log_snapshots:
            store.subscribe(LogObserver())
        self._store = store
        self._token = _active_store.set(store)
        logger.info("cart_session_started", store_id=store.store_id)
        return store

    def __exit__(self, exc_type, exc, tb) -> None:
        store = self._store
        try:
            # Only a clean exit clears; an error exit just closes.
            if exc_type is None and store is not None and not store.closed:
                store.clear()
        finally:
            if store is not None:
                store.close()
            if self._token is not None:
                _active_store.reset(self._token)
                self._token = None
            self._store = None
            if store is not None:
                logger.info("cart_session_ended", store_id=store.store_id)


def use_cart() -> CartStore:
    """Return the store of the innermost active CartSession.

    Raises:
        NoActiveStoreError: If no CartSession is active in this context.
    """
    store = _active_store.get()
    if store is None or store.closed:
        raise NoActiveStoreError(errmsg.NO_ACTIVE_STORE)
    return store
