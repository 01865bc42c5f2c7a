"""Tests for the ordered authenticated map."""

from __future__ import annotations

import random

import pytest
from hypothesis import given
from hypothesis import strategies as st

from canister_sig.hash_tree import (
    Labeled,
    LookupStatus,
    OrderedAuthenticatedMap,
    Pruned,
    Unit,
    empty,
    fork,
    labeled,
    leaf,
    lookup_path,
)

_keys = st.lists(st.binary(min_size=1, max_size=8), unique=True, max_size=24)
_non_empty_keys = st.lists(st.binary(min_size=1, max_size=8), unique=True, min_size=1, max_size=24)


def _map_of(keys: list[bytes]) -> OrderedAuthenticatedMap[Unit]:
    m: OrderedAuthenticatedMap[Unit] = OrderedAuthenticatedMap()
    for key in keys:
        m.insert(key, Unit())
    return m


def _node(key: bytes) -> Labeled:
    return labeled(key, leaf(b""))


class TestMappingOperations:
    """Tests for the dictionary-like interface."""

    def test_new_map_is_empty(self) -> None:
        m = _map_of([])

        assert m.is_empty()
        assert len(m) == 0
        assert m.root_hash() == empty().digest()
        assert m.as_hash_tree() == empty()

    def test_keys_are_sorted(self) -> None:
        m = _map_of([b"c", b"a", b"b"])

        assert m.keys() == [b"a", b"b", b"c"]
        assert list(m) == [b"a", b"b", b"c"]

    def test_insert_replaces_existing_value(self) -> None:
        m: OrderedAuthenticatedMap[OrderedAuthenticatedMap[Unit]] = OrderedAuthenticatedMap()
        m.insert(b"k", _map_of([b"x"]))
        m.insert(b"k", _map_of([b"y"]))

        value = m.get(b"k")
        assert len(m) == 1
        assert value is not None and value.keys() == [b"y"]

    def test_get_and_contains(self) -> None:
        m = _map_of([b"a"])

        assert m.get(b"a") == Unit()
        assert m.get(b"b") is None
        assert b"a" in m
        assert b"b" not in m
        assert "a" not in m

    def test_delete(self) -> None:
        m = _map_of([b"a", b"b"])

        assert m.delete(b"a") == Unit()
        assert m.delete(b"a") is None
        assert m.keys() == [b"b"]

    def test_modify_absent_key_does_not_call(self) -> None:
        m = _map_of([])
        calls: list[Unit] = []

        assert m.modify(b"a", calls.append) is None
        assert calls == []

    def test_modify_nested_map_updates_root_hash(self) -> None:
        """Changing a nested value through `modify` invalidates cached digests."""
        outer: OrderedAuthenticatedMap[OrderedAuthenticatedMap[Unit]] = OrderedAuthenticatedMap()
        outer.insert(b"seed", _map_of([b"m1"]))
        before = outer.root_hash()

        outer.modify(b"seed", lambda inner: inner.insert(b"m2", Unit()))

        assert outer.root_hash() != before
        assert outer.root_hash() == outer.as_hash_tree().digest()


class TestTreeShape:
    """Tests for the layout of the revealed tree."""

    def test_single_key(self) -> None:
        assert _map_of([b"a"]).as_hash_tree() == _node(b"a")

    def test_two_keys(self) -> None:
        assert _map_of([b"b", b"a"]).as_hash_tree() == fork(_node(b"a"), _node(b"b"))

    def test_three_keys(self) -> None:
        assert _map_of([b"a", b"b", b"c"]).as_hash_tree() == fork(
            _node(b"a"), fork(_node(b"b"), _node(b"c"))
        )

    def test_four_keys(self) -> None:
        """The middle key of [a, b, c, d] is c; [a, b] and [d] hang off it."""
        assert _map_of([b"a", b"b", b"c", b"d"]).as_hash_tree() == fork(
            fork(_node(b"a"), _node(b"b")),
            fork(_node(b"c"), _node(b"d")),
        )

    @given(_keys)
    def test_root_hash_matches_revealed_tree(self, keys: list[bytes]) -> None:
        m = _map_of(keys)

        assert m.root_hash() == m.as_hash_tree().digest()

    @given(_keys, st.randoms(use_true_random=False))
    def test_root_hash_independent_of_insertion_order(
        self, keys: list[bytes], rnd: random.Random
    ) -> None:
        shuffled = list(keys)
        rnd.shuffle(shuffled)

        assert _map_of(keys).root_hash() == _map_of(shuffled).root_hash()

    @given(_keys, st.binary(min_size=1, max_size=8))
    def test_delete_restores_previous_root(self, keys: list[bytes], extra: bytes) -> None:
        m = _map_of([k for k in keys if k != extra])
        before = m.root_hash()

        m.insert(extra, Unit())
        m.delete(extra)

        assert m.root_hash() == before


class TestWitness:
    """Tests for witnesses of single keys."""

    @given(_non_empty_keys, st.data())
    def test_witness_matches_root_hash(self, keys: list[bytes], data: st.DataObject) -> None:
        m = _map_of(keys)
        key = data.draw(st.sampled_from(keys))

        witness = m.witness(key)

        assert witness.digest() == m.root_hash()
        assert lookup_path(witness, [key]).value == b""

    def test_witness_hides_other_keys(self) -> None:
        m = _map_of([b"a", b"b", b"c", b"d", b"e"])

        witness = m.witness(b"b")

        assert lookup_path(witness, [b"d"]).status is LookupStatus.UNKNOWN

    def test_single_key_witness_reveals_everything(self) -> None:
        m = _map_of([b"only"])

        assert m.witness(b"only") == m.as_hash_tree()

    def test_witness_of_absent_key_raises(self) -> None:
        with pytest.raises(KeyError):
            _map_of([b"a"]).witness(b"b")

    def test_nested_witness_uses_inner_tree(self) -> None:
        """The value is represented by whatever the callback returns."""
        m = _map_of([b"a", b"b"])

        witness = m.nested_witness(b"a", lambda value: Pruned(value.root_hash()))

        assert witness.digest() == m.root_hash()
        assert lookup_path(witness, [b"a"]).status is LookupStatus.UNKNOWN
