"""Cart state — quantities per line-item id, written through to the blob store.

The cart only knows ids. Whether an id still names something orderable is the
catalog's business: unknown ids are counted like any other and simply never
show up in the derived cart lines.

Zero means "not in the cart", so entries that reach zero are dropped on the
spot and the snapshot only ever holds positive quantities.
"""

import json
from collections.abc import Iterable, Mapping
from types import MappingProxyType

import structlog
from protean.exceptions import ValidationError

from shared.blob_store import CART_KEY, BlobStore
from shared.errors import PersistenceError
from shared.identifiers import LineItemId

logger = structlog.get_logger(__name__)


def _valid_quantity(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


class CartState:
    def __init__(self, blob_store: BlobStore):
        self._blob_store = blob_store
        self._quantities: Mapping[LineItemId, int] = MappingProxyType({})

    # -------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------
    def snapshot(self) -> Mapping[LineItemId, int]:
        """Read-only view of the current quantities; replaced, never mutated."""
        return self._quantities

    def quantity_of(self, line_id) -> int:
        return self._quantities.get(line_id, 0)

    def total_quantity(self) -> int:
        return sum(self._quantities.values())

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def load(self) -> None:
        """Restore the persisted cart; start empty when nothing usable is stored."""
        try:
            payload = self._blob_store.get(CART_KEY)
            raw = json.loads(payload) if payload is not None else {}
        except (PersistenceError, json.JSONDecodeError) as exc:
            logger.warning("Could not restore cart, starting empty", key=CART_KEY, error=str(exc))
            raw = {}

        if not isinstance(raw, dict):
            logger.warning("Cart snapshot is not a mapping, starting empty", key=CART_KEY)
            raw = {}

        quantities = {LineItemId(k): v for k, v in raw.items() if isinstance(k, str) and _valid_quantity(v)}
        if len(quantities) != len(raw):
            logger.warning("Dropped invalid cart entries", dropped=len(raw) - len(quantities))
        self._quantities = MappingProxyType(quantities)

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def adjust(self, line_id, delta: int) -> int:
        """Add ``delta`` to the quantity of ``line_id``, clamping at zero.

        Unknown ids start at zero. Returns the new quantity.
        """
        if not isinstance(delta, int) or isinstance(delta, bool):
            raise ValidationError({"delta": ["Quantity change must be a whole number"]})

        line_id = LineItemId(str(line_id))
        current = self._quantities.get(line_id, 0)
        new_quantity = max(0, current + delta)
        if new_quantity == current:
            return current

        quantities = dict(self._quantities)
        if new_quantity > 0:
            quantities[line_id] = new_quantity
        else:
            del quantities[line_id]

        logger.debug("Cart quantity adjusted", line_id=line_id, delta=delta, quantity=new_quantity)
        self._replace(quantities)
        return new_quantity

    def purge(self, line_ids: Iterable) -> None:
        """Drop the given ids (called when the catalog deletes what they named)."""
        doomed = {str(line_id) for line_id in line_ids} & set(self._quantities)
        if not doomed:
            return

        logger.info("Cart entries purged", line_ids=sorted(doomed))
        self._replace({k: v for k, v in self._quantities.items() if k not in doomed})

    def retain(self, live_ids: Iterable) -> None:
        """Drop every id that is not in ``live_ids``."""
        live = {str(line_id) for line_id in live_ids}
        self.purge(k for k in self._quantities if k not in live)

    def clear(self) -> None:
        if self._quantities:
            self._replace({})

    def _replace(self, quantities: dict) -> None:
        self._quantities = MappingProxyType(quantities)
        try:
            self._blob_store.set(CART_KEY, json.dumps(dict(quantities), ensure_ascii=False))
        except PersistenceError as exc:
            logger.error("Cart change not persisted", key=CART_KEY, error=str(exc))
            raise
