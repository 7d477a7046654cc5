"""Cart derivation — catalog snapshot + cart snapshot → priced cart lines.

Pure and deterministic: lines follow catalog order and, within a product,
variant declaration order. Prices stay exact here and only the
order total is rounded to cents. Cart entries that name nothing in the catalog,
or whose quantity is not a positive whole number, are left out.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from decimal import Decimal

from catalogue.product.product import Product
from shared.identifiers import LineItemId, ProductId
from shared.money import to_decimal


@dataclass(frozen=True)
class CartLine:
    line_id: LineItemId
    product_id: ProductId
    display_name: str
    unit_price: Decimal
    quantity: int
    line_total: Decimal = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "line_total", self.unit_price * self.quantity)


def _quantity(quantities: Mapping, line_id: str) -> int:
    value = quantities.get(line_id, 0)
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return value


def derive_cart_lines(catalog: Iterable[Product], quantities: Mapping) -> list[CartLine]:
    lines = []
    for product in catalog:
        product_id = ProductId(str(product.id))
        if product.variants:
            for variant in product.variants:
                qty = _quantity(quantities, str(variant.id))
                if qty > 0:
                    lines.append(
                        CartLine(
                            line_id=LineItemId(str(variant.id)),
                            product_id=product_id,
                            display_name=f"{product.name} ({variant.label})",
                            unit_price=to_decimal(variant.price),
                            quantity=qty,
                        )
                    )
        else:
            qty = _quantity(quantities, product_id)
            if qty > 0 and product.price is not None:
                lines.append(
                    CartLine(
                        line_id=LineItemId(product_id),
                        product_id=product_id,
                        display_name=product.name,
                        unit_price=to_decimal(product.price),
                        quantity=qty,
                    )
                )
    return lines
