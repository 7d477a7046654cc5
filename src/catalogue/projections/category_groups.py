"""Category groups — the browse view of the catalog, one section per category.

Two passes over the catalog: collect the distinct categories and sort them by
(priority index, label), then group products under each category in catalog
order. Unknown categories come after every known one, alphabetically.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from catalogue.product.product import Product
from shared.settings import DEFAULT_CATEGORY_PRIORITY


@dataclass(frozen=True)
class CategoryGroup:
    category: str
    products: tuple[Product, ...]


def _sort_key(priority: Sequence[str]):
    rank: dict[str, int] = {}
    for index, label in enumerate(priority):
        rank.setdefault(label, index)
    unknown = len(priority)

    def key(category: str) -> tuple[int, str]:
        return (rank.get(category, unknown), category)

    return key


def ordered_categories(catalog: Iterable[Product], priority: Sequence[str] = DEFAULT_CATEGORY_PRIORITY) -> list[str]:
    """Distinct category labels, known ones in priority order, then the rest A-Z."""
    distinct = list(dict.fromkeys(p.category for p in catalog))
    return sorted(distinct, key=_sort_key(priority))


def project(catalog: Iterable[Product], priority: Sequence[str] = DEFAULT_CATEGORY_PRIORITY) -> list[CategoryGroup]:
    products = tuple(catalog)
    return [
        CategoryGroup(category=category, products=tuple(p for p in products if p.category == category))
        for category in ordered_categories(products, priority)
    ]
