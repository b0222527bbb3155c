"""Snapshot observers.

Observers are plain callables taking a CartSnapshot. The classes here are
ready-made ones for logging and for views that only need the latest state.
"""

from __future__ import annotations

from typing import Optional

import structlog

from .store import CartSnapshot


class LogObserver:
    """Observer that logs every published snapshot."""

    name = "log-cart"

    def __init__(self, logger=None):
        self._log = logger or structlog.get_logger()

    def __call__(self, snapshot: CartSnapshot) -> None:
        self._log.info(
            "cart_updated",
            sequence=snapshot.sequence,
            distinct_items=len(snapshot.items),
            item_count=snapshot.item_count,
            total_price=str(snapshot.total_price),
        )


class LatestSnapshot:
    """Observer that keeps the most recent snapshot, e.g. for a cart badge."""

    def __init__(self):
        self.snapshot: Optional[CartSnapshot] = None
        self.updates = 0

    def __call__(self, snapshot: CartSnapshot) -> None:
        self.snapshot = snapshot
        self.updates += 1

    @property
    def item_count(self) -> int:
        return self.snapshot.item_count if self.snapshot else 0
