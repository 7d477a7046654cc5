"""Storefront session — one catalog and one cart over a blob store.

This is the single writer for both snapshots. Every user action runs to
completion (mutation, write-through, stale-entry cleanup) before the next
derivation reads state, so no locking is involved.
"""

from dataclasses import dataclass

import structlog
from protean.exceptions import ValidationError

from catalogue.product.store import CatalogStore
from catalogue.projections.category_groups import CategoryGroup, project
from ordering.cart.cart import CartState
from ordering.cart.derivation import CartLine, derive_cart_lines
from ordering.handoff import HandoffResult, OrderSink, get_order_sink
from ordering.order.formatter import OrderSummary, format_order
from ordering.order.message import compose_order_message
from shared.blob_store import BlobStore, get_blob_store
from shared.errors import PersistenceError
from shared.settings import Settings
from shared.settings import settings as default_settings

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class CheckoutResult:
    summary: OrderSummary
    message: str
    handoff: HandoffResult


class Storefront:
    def __init__(
        self,
        blob_store: BlobStore | None = None,
        settings: Settings | None = None,
        order_sink: OrderSink | None = None,
    ):
        self.settings = settings or default_settings
        self.blob_store = blob_store or get_blob_store()
        self.catalog = CatalogStore(self.blob_store)
        self.cart = CartState(self.blob_store)
        self._order_sink = order_sink

        self.catalog.on_remove(self.cart.purge)

    @classmethod
    def open(cls, **kwargs) -> "Storefront":
        """Create a session and restore catalog and cart from the blob store."""
        storefront = cls(**kwargs)
        storefront.catalog.load()
        storefront.cart.load()
        logger.info(
            "Storefront opened",
            product_count=len(storefront.catalog.snapshot()),
            cart_entries=len(storefront.cart.snapshot()),
        )
        return storefront

    @property
    def order_sink(self) -> OrderSink:
        return self._order_sink or get_order_sink()

    # -------------------------------------------------------------------
    # Derived views
    # -------------------------------------------------------------------
    def categories(self) -> list[CategoryGroup]:
        return project(self.catalog.snapshot(), self.settings.category_priority)

    def cart_lines(self) -> list[CartLine]:
        return derive_cart_lines(self.catalog.snapshot(), self.cart.snapshot())

    def order_summary(self) -> OrderSummary:
        return format_order(
            self.cart_lines(),
            currency_symbol=self.settings.currency_symbol,
            decimal_separator=self.settings.decimal_separator,
        )

    # -------------------------------------------------------------------
    # Cart actions
    # -------------------------------------------------------------------
    def adjust(self, line_id, delta: int) -> int:
        return self.cart.adjust(line_id, delta)

    def clear_cart(self) -> None:
        self.cart.clear()

    # -------------------------------------------------------------------
    # Catalog actions
    # -------------------------------------------------------------------
    def upsert_product(self, product):
        return self._change_catalog(self.catalog.upsert, product)

    def remove_product(self, product_id) -> None:
        self._change_catalog(self.catalog.remove, product_id)

    def reset_catalog(self) -> None:
        self._change_catalog(self.catalog.reset_to_default)

    def _change_catalog(self, change, *args):
        """Run a catalog mutation, then drop cart entries it left stale.

        When the mutation fails its error is the one raised; a cart write
        failure during cleanup is only logged.
        """
        try:
            result = change(*args)
        except (ValidationError, PersistenceError):
            try:
                self._collect_stale_cart_entries()
            except PersistenceError as exc:
                logger.error("Stale cart entries not persisted", key=exc.key, error=str(exc))
            raise
        self._collect_stale_cart_entries()
        return result

    def _collect_stale_cart_entries(self) -> None:
        self.cart.retain(self.catalog.line_item_ids())

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def checkout(self, destination: str | None = None) -> CheckoutResult:
        """Format the current cart and hand it to the order sink.

        Raises ValidationError when the cart has no orderable lines.
        """
        summary = self.order_summary()
        if summary.item_count == 0:
            raise ValidationError({"cart": ["Cannot place an order from an empty cart"]})

        message = compose_order_message(summary, self.settings.shop_name)
        handoff = self.order_sink.deliver(destination or self.settings.whatsapp_number, message)
        if handoff.delivered:
            logger.info("Order handed off", total=str(summary.total), item_count=summary.item_count)
        else:
            logger.warning("Order handoff failed", reason=handoff.failure_reason)
        return CheckoutResult(summary=summary, message=message, handoff=handoff)
