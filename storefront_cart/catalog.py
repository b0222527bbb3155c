"""Conversion of raw catalog records into Products.

The catalog endpoint returns records shaped like::

    {"id": 1, "title": "Backpack", "price": 109.95, "description": "...",
     "image": "https://...", "category": "men's clothing",
     "rating": {"rate": 3.9, "count": 120}}

Fetching them is the caller's job; this module only reshapes them.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from .errors import CatalogRecordError, errmsg
from .models import Product, Rating, to_decimal


def _rating_from_record(raw: Optional[Mapping[str, Any]], record_id: Any = None) -> Optional[Rating]:
    if not raw:
        return None
    if not isinstance(raw, Mapping):
        raise CatalogRecordError(errmsg.RECORD_RATING_INVALID, record_id=record_id)
    rate = raw.get("rate")
    count = raw.get("count") or 0
    if isinstance(count, bool):
        raise CatalogRecordError(errmsg.RECORD_RATING_INVALID, record_id=record_id)
    try:
        rating = Rating(
            rate=to_decimal(rate) if rate is not None else None,
            count=int(count),
        )
    except (TypeError, ValueError) as e:
        raise CatalogRecordError(errmsg.RECORD_RATING_INVALID, record_id=record_id, cause=e) from e
    if rating.count < 0:
        raise CatalogRecordError(errmsg.RECORD_RATING_COUNT_NEGATIVE, record_id=record_id)
    return rating


def product_from_record(record: Mapping[str, Any]) -> Product:
    """Build a Product from one catalog record.

    Raises:
        CatalogRecordError: If the record has no usable id, no usable price
            or a malformed rating.
    """
    record_id = record.get("id")
    if record_id is None or record_id == "":
        raise CatalogRecordError(errmsg.RECORD_ID_REQUIRED)
    if isinstance(record_id, bool):
        raise CatalogRecordError(errmsg.RECORD_ID_INVALID, record_id=record_id)

    raw_price = record.get("price")
    if raw_price is None:
        raise CatalogRecordError(errmsg.RECORD_PRICE_REQUIRED, record_id=record_id)
    try:
        price = to_decimal(raw_price)
    except ValueError as e:
        raise CatalogRecordError(errmsg.RECORD_PRICE_INVALID, record_id=record_id, cause=e) from e
    if price < 0:
        raise CatalogRecordError(errmsg.RECORD_PRICE_NEGATIVE, record_id=record_id)

    return Product(
        id=record_id,
        name=record.get("title") or record.get("name") or "",
        price=price,
        description=record.get("description"),
        image=record.get("image"),
        category=record.get("category"),
        rating=_rating_from_record(record.get("rating"), record_id),
    )


def products_from_records(records: Iterable[Mapping[str, Any]]) -> list[Product]:
    return [product_from_record(record) for record in records]
