"""Shared catalog data for cart tests.

Records mirror the shape returned by the storefront's catalog endpoint.
"""

from decimal import Decimal

from storefront_cart import Product, Rating

BACKPACK_RECORD = {
    "id": 1,
    "title": "Fjallraven Foldsack No. 1 Backpack",
    "price": 109.95,
    "description": "Your perfect pack for everyday use and walks in the forest.",
    "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
    "category": "men's clothing",
    "rating": {"rate": 3.9, "count": 120},
}

TSHIRT_RECORD = {
    "id": 2,
    "title": "Mens Casual Premium Slim Fit T-Shirts",
    "price": 22.3,
    "description": "Slim-fitting style, contrast raglan long sleeve.",
    "image": "https://fakestoreapi.com/img/71-3HjGNDUL._AC_SY879._SX._UX._SY._UY_.jpg",
    "category": "men's clothing",
    "rating": {"rate": 4.1, "count": 259},
}

JACKET_RECORD = {
    "id": 3,
    "title": "Mens Cotton Jacket",
    "price": 55.99,
    "description": "Great outerwear jackets for Spring/Autumn/Winter.",
    "image": "https://fakestoreapi.com/img/71li-ujtlUL._AC_UX679_.jpg",
    "category": "men's clothing",
    "rating": {"rate": 4.7, "count": 500},
}


def make_product(product_id=1, price="10", name=None, **kwargs) -> Product:
    """Build a Product with sensible defaults."""
    return Product(
        id=product_id,
        name=name or f"Product {product_id}",
        price=Decimal(str(price)),
        **kwargs,
    )


BACKPACK = Product(
    id=1,
    name="Fjallraven Foldsack No. 1 Backpack",
    price=Decimal("109.95"),
    description=BACKPACK_RECORD["description"],
    image=BACKPACK_RECORD["image"],
    category="men's clothing",
    rating=Rating(rate=Decimal("3.9"), count=120),
)
