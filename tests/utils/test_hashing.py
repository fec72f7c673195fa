"""Tests for structural hashing helpers."""

from collections import OrderedDict
from types import MappingProxyType

from domix_problem.utils.hashing import freeze, structural_hash


def test_equal_mappings_hash_equally_regardless_of_type_or_order() -> None:
    """Mappings that compare equal must share a structural hash."""
    plain = {"a": [1, 2], "b": {"c": 3}}
    ordered = OrderedDict([("b", {"c": 3}), ("a", [1, 2])])
    proxy = MappingProxyType({"a": [1, 2], "b": {"c": 3}})
    assert plain == ordered == proxy
    assert structural_hash(plain) == structural_hash(ordered) == structural_hash(proxy)


def test_freeze_keeps_strings_intact() -> None:
    """Strings are sequences but must not be split into characters."""
    assert freeze("abc") == "abc"
    assert freeze(b"abc") == b"abc"


def test_freeze_converts_sets_and_lists() -> None:
    assert freeze({1, 2}) == frozenset({1, 2})
    assert freeze([1, [2, 3]]) == (1, (2, 3))


def test_unhashable_leaves_fall_back_to_their_type() -> None:
    class Bag:
        __hash__ = None  # type: ignore[assignment]

    first, second = Bag(), Bag()
    assert structural_hash([first]) == structural_hash([second])
