"""Membership tables and strict equality.

A membership table maps a table key to the element it was built from. Keys are
strict: values of different types never collide, so 1, 1.0 and True are three
distinct members. Unhashable values fall back to identity keys.
"""

from __future__ import annotations

import warnings
from collections.abc import Hashable
from typing import Any

from foldkit.config import get_settings
from foldkit.core.iteration import CollectionView, each
from foldkit.core.types import Collection


class UnhashableElementWarning(UserWarning):
    """An unhashable value was keyed by identity in a membership table."""


class _IdentityKey:
    """Tag for identity-based table keys. Never instantiated."""


def strictly_equal(a: Any, b: Any) -> bool:
    """Equality without cross-type coercion (1 != 1.0 != True)."""
    return a is b or (type(a) is type(b) and a == b)


def is_hashable(value: Any) -> bool:
    """Check whether value can be used as a dict key."""
    if not isinstance(value, Hashable):
        return False
    try:
        hash(value)
    except TypeError:
        # Tuples holding unhashable members
        return False
    return True


def table_key(value: Any) -> tuple[type, Any]:
    """Compute the membership-table key for value.

    Args:
        value: Any element.

    Returns:
        (type(value), value) for hashable values, an identity key otherwise.
    """
    if is_hashable(value):
        return (type(value), value)
    if get_settings().warn_unhashable:
        warnings.warn(
            f"Unhashable {type(value).__name__} keyed by identity; "
            f"equal but distinct objects will not be treated as the same member.",
            UnhashableElementWarning,
            stacklevel=3,
        )
    return (_IdentityKey, id(value))


def build_table(values: Collection | CollectionView) -> dict[tuple[type, Any], Any]:
    """Build a membership table from the values of a collection.

    Mappings contribute their values, not their keys. Later duplicates keep the
    first slot.
    """
    table: dict[tuple[type, Any], Any] = {}

    def add(value: Any, _key: Any, _collection: Any) -> None:
        table.setdefault(table_key(value), value)

    each(values, add)
    return table
