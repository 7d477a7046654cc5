"""Product aggregate root with the ProductVariant entity.

A product is ordered either directly at its own price or, when it declares
variants, only through those variants. The ids the cart counts are exposed by
``Product.line_item_ids()``.
"""

import re
from uuid import uuid4

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Float, HasMany, String, Text

from catalogue.domain import catalogue
from shared.identifiers import LineItemId
from shared.money import MAX_PRICE, parse_price

DEFAULT_CATEGORY = "Geral"


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.strip().lower()).strip("-")


def _blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@catalogue.entity(part_of="Product")
class ProductVariant:
    """A priced option of a product (size, weight...). Its id is a line-item id."""

    label: String(required=True, max_length=40)
    price: Float(required=True, min_value=0.0, max_value=float(MAX_PRICE))


@catalogue.aggregate
class Product:
    """Product aggregate root."""

    name: String(required=True, max_length=255)
    description: Text(default="")
    price: Float(min_value=0.0, max_value=float(MAX_PRICE))
    category: String(max_length=100, default=DEFAULT_CATEGORY)
    image_url: Text(required=True)
    variants: HasMany(ProductVariant)

    @invariant.post
    def variant_ids_must_be_unique(self):
        ids = [str(v.id) for v in self.variants]
        if len(ids) != len(set(ids)):
            raise ValidationError({"variants": ["Variant ids must be unique"]})
        if str(self.id) in ids:
            raise ValidationError({"variants": [f"Variant id '{self.id}' collides with the product id"]})

    @classmethod
    def create(
        cls,
        name,
        image_url,
        price=None,
        description=None,
        category=None,
        variants=None,
        product_id=None,
    ):
        """Build a product from vendor input.

        ``price`` may be typed text ("12,50"); ``variants`` is a list of
        ProductVariant or of dicts with ``label``, ``price`` and optionally
        ``id`` (derived from the product id and label when missing).
        """
        errors = {}
        if _blank(name):
            errors["name"] = ["Name is required"]
        if _blank(image_url):
            errors["image_url"] = ["A product photo is required"]
        if not variants and _blank(price):
            errors["price"] = ["Price is required"]
        if errors:
            raise ValidationError(errors)

        product_id = product_id or uuid4().hex
        product = cls(
            id=product_id,
            name=name.strip(),
            description=(description or "").strip(),
            price=None if _blank(price) else parse_price(price),
            category=(category or "").strip() or DEFAULT_CATEGORY,
            image_url=image_url,
        )

        built = []
        for variant in variants or []:
            if not isinstance(variant, ProductVariant):
                variant = ProductVariant(
                    id=variant.get("id") or f"{product_id}-{_slug(variant.get('label') or '')}",
                    label=variant.get("label"),
                    price=parse_price(variant.get("price"), field="variants"),
                )
            built.append(variant)

        # Checked up front: HasMany merges children that share an id
        seen = set()
        for variant in built:
            variant_id = str(variant.id)
            if variant_id == str(product_id):
                raise ValidationError({"variants": [f"Variant id '{variant_id}' collides with the product id"]})
            if variant_id in seen:
                raise ValidationError({"variants": [f"Variant id '{variant_id}' is used more than once"]})
            seen.add(variant_id)

        for variant in built:
            product.add_variants(variant)

        product.ensure_orderable()
        return product

    @property
    def has_variants(self) -> bool:
        return bool(self.variants)

    @property
    def display_price(self) -> float | None:
        """Price shown on the card: own price, or the cheapest variant."""
        if self.variants:
            return min(v.price for v in self.variants)
        return self.price

    def ensure_orderable(self) -> None:
        """Exactly one order path: own price xor a non-empty variant list."""
        if self.variants and self.price is not None:
            raise ValidationError(
                {"price": ["A product with variants is ordered through its variants and cannot have its own price"]}
            )
        if not self.variants and self.price is None:
            raise ValidationError({"price": ["Price is required for a product without variants"]})

    def line_item_ids(self) -> tuple[LineItemId, ...]:
        if self.variants:
            return tuple(LineItemId(str(v.id)) for v in self.variants)
        return (LineItemId(str(self.id)),)

    def find_variant(self, variant_id):
        return next((v for v in self.variants if str(v.id) == str(variant_id)), None)
