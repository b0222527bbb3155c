"""Shared pytest fixtures for cart tests."""

import pytest
import structlog

from storefront_cart import CartStore, LatestSnapshot

from .fixtures import make_product


@pytest.fixture
def store():
    """A fresh store, closed after the test."""
    cart = CartStore(store_id="test-store")
    yield cart
    cart.close()


@pytest.fixture
def latest(store):
    """Observer subscribed to the store fixture."""
    observer = LatestSnapshot()
    store.subscribe(observer)
    return observer


@pytest.fixture
def ten_and_five():
    """Two products priced 10 and 5."""
    return make_product(1, "10"), make_product(2, "5")


@pytest.fixture
def reset_structlog():
    yield
    structlog.reset_defaults()
