"""Shared BDD fixtures and step definitions for the storefront cart."""

import pytest
from pytest_bdd import given, parsers, then


@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


@given("the catalog holds the bread and the spice with variants L and S")
def catalog_with_bread_and_spice(storefront):
    assert [p.id for p in storefront.catalog.list()] == ["bread", "spice"]


@given(parsers.cfparse('the customer has {qty:d} of "{line_id}" in the cart'))
def customer_has_items(storefront, qty, line_id):
    storefront.adjust(line_id, qty)


@then(parsers.cfparse('the cart total is "{total}"'))
def cart_total_is(storefront, total):
    assert str(storefront.order_summary().total) == total


@then(parsers.cfparse("the cart shows {count:d} lines"))
def cart_shows_lines(storefront, count):
    assert len(storefront.cart_lines()) == count


@then(parsers.cfparse('the cart counts {qty:d} of "{line_id}"'))
def cart_counts(storefront, qty, line_id):
    assert storefront.cart.quantity_of(line_id) == qty
