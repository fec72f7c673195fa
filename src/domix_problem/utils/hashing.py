"""Structural hashing helpers for values that may hold unhashable containers."""

from __future__ import annotations

from collections.abc import Hashable, Mapping, Sequence, Set
from typing import Any

_TEXT_TYPES = (str, bytes, bytearray)


def freeze(value: Any) -> Hashable:
    """Return a hashable stand-in that compares equal whenever ``value`` does.

    Mappings become frozensets of frozen items, sequences become tuples and
    sets become frozensets. Unhashable leaves fall back to their type so that
    equal values still share a hash bucket.
    """
    if isinstance(value, Mapping):
        return frozenset((key, freeze(item)) for key, item in value.items())
    if isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES):
        return tuple(freeze(item) for item in value)
    if isinstance(value, Set):
        return frozenset(freeze(item) for item in value)
    if isinstance(value, bytearray):
        return bytes(value)
    try:
        hash(value)
    except TypeError:
        return (type(value).__module__, type(value).__qualname__)
    return value


def structural_hash(value: Any) -> int:
    """Hash ``value`` consistently with ``==`` even for nested dicts and lists."""
    return hash(freeze(value))


__all__ = ["freeze", "structural_hash"]
