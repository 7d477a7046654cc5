"""Catalog snapshot codec — Product aggregates to/from the persisted JSON shape.

The wire shape keeps the storefront's field names (``imageUrl``) so snapshots
written by earlier sessions stay readable.
"""

import json

from protean.exceptions import ValidationError

from catalogue.product.product import Product
from shared.errors import PersistenceError


def product_to_snapshot(product: Product) -> dict:
    data = {
        "id": str(product.id),
        "name": product.name,
        "description": product.description or "",
        "price": product.price,
        "category": product.category,
        "imageUrl": product.image_url,
    }
    if product.variants:
        data["variants"] = [{"id": str(v.id), "label": v.label, "price": v.price} for v in product.variants]
    return data


def product_from_snapshot(data: dict) -> Product:
    return Product.create(
        product_id=data["id"],
        name=data["name"],
        description=data.get("description"),
        price=data.get("price"),
        category=data.get("category"),
        image_url=data["imageUrl"],
        variants=[dict(v) for v in data.get("variants") or []],
    )


def dumps_catalog(products) -> str:
    return json.dumps([product_to_snapshot(p) for p in products], ensure_ascii=False)


def loads_catalog(payload: str) -> list[Product]:
    """Decode a persisted catalog.

    Raises PersistenceError when the payload is not a valid catalog.
    """
    try:
        raw = json.loads(payload)
        if not isinstance(raw, list):
            raise TypeError("catalog snapshot must be a list")
        return [product_from_snapshot(entry) for entry in raw]
    except (json.JSONDecodeError, TypeError, KeyError, AttributeError, ValidationError) as exc:
        raise PersistenceError(f"Corrupt catalog snapshot: {exc}", key="catalog") from exc
