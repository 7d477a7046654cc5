"""Tests for cart quantities and their write-through."""

import json
import random

import pytest
from ordering.cart.cart import CartState
from protean.exceptions import ValidationError
from shared.blob_store import CART_KEY, InMemoryBlobStore
from shared.errors import PersistenceError


@pytest.fixture()
def cart(blob_store):
    state = CartState(blob_store)
    state.load()
    return state


def _persisted(blob_store):
    return json.loads(blob_store.data[CART_KEY])


class TestAdjust:
    def test_new_entry_starts_at_zero(self, cart):
        assert cart.adjust("bread", 2) == 2
        assert cart.snapshot() == {"bread": 2}

    def test_increments_accumulate(self, cart):
        cart.adjust("bread", 1)
        cart.adjust("bread", 1)
        cart.adjust("bread", 3)

        assert cart.quantity_of("bread") == 5

    def test_decrement_below_zero_clamps(self, cart):
        cart.adjust("bread", 1)

        assert cart.adjust("bread", -5) == 0
        assert cart.quantity_of("bread") == 0

    def test_zero_entries_are_dropped(self, cart, blob_store):
        cart.adjust("bread", 2)
        cart.adjust("bread", -2)

        assert "bread" not in cart.snapshot()
        assert _persisted(blob_store) == {}

    def test_decrement_unknown_id_is_noop(self, cart, blob_store):
        assert cart.adjust("ghost", -1) == 0
        assert cart.snapshot() == {}
        assert blob_store.writes_for(CART_KEY) == 0

    def test_unknown_ids_are_counted(self, cart):
        cart.adjust("not-in-any-catalog", 4)
        assert cart.quantity_of("not-in-any-catalog") == 4

    def test_each_change_is_written_through(self, cart, blob_store):
        cart.adjust("bread", 2)
        cart.adjust("spice-L", 1)

        assert blob_store.writes_for(CART_KEY) == 2
        assert _persisted(blob_store) == {"bread": 2, "spice-L": 1}

    @pytest.mark.parametrize("delta", [1.5, "2", None, True])
    def test_delta_must_be_whole_number(self, cart, delta):
        with pytest.raises(ValidationError) as exc:
            cart.adjust("bread", delta)
        assert "delta" in exc.value.messages

    def test_write_failure_surfaces_after_change(self, cart, blob_store):
        blob_store.configure(fail_writes=True)

        with pytest.raises(PersistenceError) as exc:
            cart.adjust("bread", 1)

        assert exc.value.key == CART_KEY
        assert cart.quantity_of("bread") == 1

    @pytest.mark.parametrize("seed", [1, 7, 42, 2024])
    def test_never_negative_and_matches_clamped_sum(self, cart, seed):
        rng = random.Random(seed)
        expected = 0
        for _ in range(200):
            delta = rng.randint(-4, 4)
            expected = max(0, expected + delta)
            cart.adjust("bread", delta)
            assert cart.quantity_of("bread") == expected
            assert all(qty > 0 for qty in cart.snapshot().values())


class TestSnapshot:
    def test_snapshot_is_read_only(self, cart):
        cart.adjust("bread", 1)

        with pytest.raises(TypeError):
            cart.snapshot()["bread"] = 10

    def test_earlier_snapshot_is_not_changed(self, cart):
        cart.adjust("bread", 1)
        before = cart.snapshot()

        cart.adjust("bread", 1)

        assert before == {"bread": 1}
        assert cart.snapshot() == {"bread": 2}

    def test_total_quantity(self, cart):
        cart.adjust("bread", 2)
        cart.adjust("spice-L", 3)

        assert cart.total_quantity() == 5


class TestPurgeAndRetain:
    def test_purge_drops_named_ids(self, cart, blob_store):
        cart.adjust("bread", 2)
        cart.adjust("spice-L", 1)

        cart.purge({"spice-L", "spice-S"})

        assert cart.snapshot() == {"bread": 2}
        assert _persisted(blob_store) == {"bread": 2}

    def test_purge_of_absent_ids_does_not_write(self, cart, blob_store):
        cart.adjust("bread", 2)
        writes = blob_store.writes_for(CART_KEY)

        cart.purge({"ghost"})

        assert blob_store.writes_for(CART_KEY) == writes

    def test_retain_keeps_only_live_ids(self, cart):
        cart.adjust("bread", 2)
        cart.adjust("ghost", 1)

        cart.retain(frozenset({"bread", "spice-L"}))

        assert cart.snapshot() == {"bread": 2}

    def test_clear(self, cart, blob_store):
        cart.adjust("bread", 2)

        cart.clear()

        assert cart.snapshot() == {}
        assert _persisted(blob_store) == {}

    def test_clear_empty_cart_does_not_write(self, cart, blob_store):
        cart.clear()
        assert blob_store.writes_for(CART_KEY) == 0


class TestLoad:
    def test_missing_key_starts_empty(self, cart):
        assert cart.snapshot() == {}

    def test_restores_persisted_quantities(self):
        store = InMemoryBlobStore({CART_KEY: json.dumps({"bread": 2, "spice-L": 1})})
        cart = CartState(store)

        cart.load()

        assert cart.snapshot() == {"bread": 2, "spice-L": 1}

    def test_invalid_entries_are_dropped(self):
        payload = json.dumps({"bread": 2, "zero": 0, "negative": -1, "float": 1.5, "text": "3", "flag": True})
        cart = CartState(InMemoryBlobStore({CART_KEY: payload}))

        cart.load()

        assert cart.snapshot() == {"bread": 2}

    @pytest.mark.parametrize("payload", ["{broken", "[1, 2]", '"bread"', "null"])
    def test_unreadable_payload_starts_empty(self, payload):
        cart = CartState(InMemoryBlobStore({CART_KEY: payload}))
        cart.load()
        assert cart.snapshot() == {}

    def test_read_failure_starts_empty(self):
        store = InMemoryBlobStore({CART_KEY: json.dumps({"bread": 2})})
        store.configure(fail_reads=True)
        cart = CartState(store)

        cart.load()

        assert cart.snapshot() == {}
