"""Identifier types shared by the catalogue and the cart.

Both are plain strings at runtime. A ``LineItemId`` is what the cart counts
(a product id for plain products, a variant id otherwise), so it must not be
confused with the id of the product that owns it.
"""

from typing import NewType

ProductId = NewType("ProductId", str)
LineItemId = NewType("LineItemId", str)
