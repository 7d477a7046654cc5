"""Catalog store — owns the product list and writes it through to the blob store.

Every mutation swaps in a new tuple of products, so a snapshot taken before a
mutation is never changed by it. Reads hand out detached copies of the
products: editing one changes nothing until it is passed back to ``upsert``. Listeners registered with ``on_remove`` are
told which line-item ids stopped existing (the cart purges them).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping

import structlog
from protean.exceptions import ValidationError

from catalogue.product.product import Product
from catalogue.product.seed import build_seed_catalog
from catalogue.product.snapshot import (
    dumps_catalog,
    loads_catalog,
    product_from_snapshot,
    product_to_snapshot,
)
from shared.blob_store import CATALOG_KEY, BlobStore
from shared.errors import PersistenceError
from shared.identifiers import LineItemId

logger = structlog.get_logger(__name__)

RemovalListener = Callable[[frozenset[LineItemId]], None]

# Form/wire names accepted by upsert() when given a mapping
_FIELD_ALIASES = {"id": "product_id", "imageUrl": "image_url"}
_CREATE_FIELDS = {"product_id", "name", "description", "price", "category", "image_url", "variants"}


def _product_from_mapping(data: Mapping) -> Product:
    kwargs = {}
    for key, value in data.items():
        key = _FIELD_ALIASES.get(key, key)
        if key in _CREATE_FIELDS:
            kwargs[key] = value
    return Product.create(
        name=kwargs.pop("name", None),
        image_url=kwargs.pop("image_url", None),
        **kwargs,
    )


def _detached(product: Product) -> Product:
    return product_from_snapshot(product_to_snapshot(product))


def _check_line_item_ids(product: Product, others: Iterable[Product]) -> None:
    """A product's ids must not collide with any id owned by another product."""
    other_product_ids = set()
    other_variant_ids = set()
    for other in others:
        other_product_ids.add(str(other.id))
        other_variant_ids.update(str(v.id) for v in other.variants)

    if str(product.id) in other_variant_ids:
        raise ValidationError({"id": [f"Product id '{product.id}' is already used by a variant"]})

    clashes = [
        str(v.id) for v in product.variants if str(v.id) in other_variant_ids or str(v.id) in other_product_ids
    ]
    if clashes:
        raise ValidationError({"variants": [f"Variant id '{vid}' is already used in the catalog" for vid in clashes]})


class CatalogStore:
    def __init__(self, blob_store: BlobStore, seed_factory: Callable[[], list[Product]] = build_seed_catalog):
        self._blob_store = blob_store
        self._seed_factory = seed_factory
        self._products: tuple[Product, ...] = tuple(seed_factory())
        self._removal_listeners: list[RemovalListener] = []

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def list(self) -> list[Product]:
        """Products in insertion order (edits keep their position)."""
        return [_detached(p) for p in self._products]

    def snapshot(self) -> tuple[Product, ...]:
        return tuple(_detached(p) for p in self._products)

    def get(self, product_id) -> Product | None:
        product = self._find(product_id)
        return _detached(product) if product is not None else None

    def line_item_ids(self) -> frozenset[LineItemId]:
        return frozenset(line_id for p in self._products for line_id in p.line_item_ids())

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def load(self) -> None:
        """Restore the persisted catalog; fall back to the seed set on any failure."""
        try:
            payload = self._blob_store.get(CATALOG_KEY)
            if payload is None:
                logger.info("No persisted catalog, using seed catalog")
                self._products = tuple(self._seed_factory())
                return
            products = loads_catalog(payload)
            for index, product in enumerate(products):
                _check_line_item_ids(product, products[:index])
        except (PersistenceError, ValidationError) as exc:
            logger.warning("Could not restore catalog, using seed catalog", key=CATALOG_KEY, error=str(exc))
            self._products = tuple(self._seed_factory())
            return

        self._products = tuple(products)
        logger.info("Catalog restored", product_count=len(products))

    def on_remove(self, listener: RemovalListener) -> None:
        self._removal_listeners.append(listener)

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def upsert(self, product: Product | Mapping) -> Product:
        """Insert a product, or replace the one with the same id in place.

        The store keeps its own copy; the returned product is detached like
        any other read. Raises ValidationError (leaving the catalog untouched)
        when the product breaks an invariant or reuses an id owned by another
        product.
        """
        if not isinstance(product, Product):
            product = _product_from_mapping(product)
        product.ensure_orderable()

        product_id = str(product.id)
        _check_line_item_ids(product, (p for p in self._products if str(p.id) != product_id))
        stored = _detached(product)

        previous = self._find(product_id)
        if previous is None:
            self._products = (*self._products, stored)
            dropped = frozenset()
        else:
            self._products = tuple(stored if p is previous else p for p in self._products)
            dropped = frozenset(previous.line_item_ids()) - frozenset(stored.line_item_ids())

        logger.info("Product saved", product_id=product_id, created=previous is None)
        self._commit(dropped)
        return _detached(stored)

    def remove(self, product_id) -> None:
        """Delete a product. Removing an unknown id is a no-op."""
        product = self._find(product_id)
        if product is None:
            logger.debug("Product already absent", product_id=str(product_id))
            return

        self._products = tuple(p for p in self._products if p is not product)
        logger.info("Product removed", product_id=str(product_id))
        self._commit(frozenset(product.line_item_ids()))

    def reset_to_default(self) -> None:
        """Replace the whole catalog with the seed set, discarding custom edits."""
        previous_ids = self.line_item_ids()
        self._products = tuple(self._seed_factory())
        logger.info("Catalog reset to seed", product_count=len(self._products))
        self._commit(previous_ids - self.line_item_ids())

    # -------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------
    def _find(self, product_id) -> Product | None:
        return next((p for p in self._products if str(p.id) == str(product_id)), None)

    def _commit(self, removed_ids: frozenset[LineItemId]) -> None:
        """Write the catalog through, then tell listeners what stopped existing.

        Listeners run even when the write fails. A failed catalog write is the
        error the caller sees, whatever a listener raises afterwards.
        """
        try:
            self._blob_store.set(CATALOG_KEY, dumps_catalog(self._products))
        except PersistenceError as exc:
            logger.error("Catalog change not persisted", key=CATALOG_KEY, error=str(exc))
            try:
                self._notify_removed(removed_ids)
            except PersistenceError as listener_exc:
                logger.error("Removal listener change not persisted", key=listener_exc.key, error=str(listener_exc))
            raise exc
        self._notify_removed(removed_ids)

    def _notify_removed(self, removed_ids: frozenset[LineItemId]) -> None:
        if removed_ids:
            for listener in self._removal_listeners:
                listener(removed_ids)
