import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    """Pytest hook to run before collecting tests.

    Sets the environment before any domain module is imported, so logging is
    configured for tests and the in-memory adapters are selected.
    """
    os.environ["PROTEAN_ENV"] = session.config.option.env
    os.environ.setdefault("BLOB_STORE_ADAPTER", "memory")
    os.environ.setdefault("ORDER_SINK_ADAPTER", "fake")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = Path(item.fspath)

        if "/domain/" in str(test_path):
            item.add_marker(pytest.mark.domain)
        elif "/application/" in str(test_path):
            item.add_marker(pytest.mark.application)
        elif "/integration/" in str(test_path):
            item.add_marker(pytest.mark.integration)
        elif "/bdd/" in str(test_path):
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(scope="session")
def _catalogue_domain():
    """Initialize the catalogue domain once per session."""
    from catalogue.domain import catalogue

    catalogue.init()
    return catalogue


@pytest.fixture(autouse=True)
def run_around_tests(_catalogue_domain):
    """Push domain context before each test, reset process-wide adapters after."""
    ctx = _catalogue_domain.domain_context()
    ctx.push()

    yield

    from ordering.handoff import reset_order_sink
    from shared.blob_store import reset_blob_store
    from storefront import reset_storefront

    reset_storefront()
    reset_order_sink()
    reset_blob_store()
    ctx.pop()


# ---------------------------------------------------------------------------
# Shared fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def blob_store():
    from shared.blob_store import InMemoryBlobStore, set_blob_store

    store = InMemoryBlobStore()
    set_blob_store(store)
    return store


@pytest.fixture()
def order_sink():
    from ordering.handoff import set_order_sink
    from ordering.handoff.fake_adapter import FakeOrderSink

    sink = FakeOrderSink()
    set_order_sink(sink)
    return sink


@pytest.fixture()
def bread():
    from catalogue.product.product import Product

    return Product.create(
        product_id="bread",
        name="Pão de Lenha",
        price=15.00,
        category="Pães",
        image_url="https://images.example.com/bread.jpg",
    )


@pytest.fixture()
def spice():
    from catalogue.product.product import Product

    return Product.create(
        product_id="spice",
        name="Tempero da Roça",
        category="Temperos",
        image_url="https://images.example.com/spice.jpg",
        variants=[
            {"id": "spice-L", "label": "L", "price": 8.00},
            {"id": "spice-S", "label": "S", "price": 5.00},
        ],
    )


@pytest.fixture()
def storefront(blob_store, order_sink, bread, spice):
    """A session whose catalog holds exactly ``bread`` and ``spice``."""
    from catalogue.product.snapshot import dumps_catalog
    from shared.blob_store import CATALOG_KEY
    from shared.settings import Settings
    from storefront import Storefront, set_storefront

    blob_store.set(CATALOG_KEY, dumps_catalog([bread, spice]))
    blob_store.calls.clear()

    session = Storefront.open(blob_store=blob_store, settings=Settings(), order_sink=order_sink)
    set_storefront(session)
    return session
