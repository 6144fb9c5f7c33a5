"""Stable ordering: merge sort keyed by an extracted value.

Falsy elements and None keys rank above every other key, so they sort last
while keeping their input order among themselves.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any

from foldkit.core.iteration import CollectionView, identity
from foldkit.core.ordering.models import KeyExtractor, normalize_key
from foldkit.core.transforms import map
from foldkit.core.types import Collection

Comparator = Callable[[Any, Any], bool]
"""greater(a, b): True when a must come after b."""


def merge(left: Sequence[Any], right: Sequence[Any], greater: Comparator) -> list[Any]:
    """Merge two sorted runs.

    The right head is taken only when greater(left_head, right_head) holds, so
    on ties the left element goes first.
    """
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if greater(left[i], right[j]):
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Sequence[Any], greater: Comparator) -> list[Any]:
    """Stable top-down merge sort. Returns a new list."""
    if len(values) <= 1:
        return list(values)
    middle = len(values) // 2
    return merge(
        merge_sort(values[:middle], greater),
        merge_sort(values[middle:], greater),
        greater,
    )


def sorts_last(value: Any, key: Any) -> bool:
    """Whether an element ranks as the largest possible key."""
    return not value or key is None


def key_comparator(accessor: Callable[[Any], Any]) -> Comparator:
    """Build greater(a, b) over keys read at comparison time."""

    def greater(a: Any, b: Any) -> bool:
        a_key = accessor(a) if a else None
        b_key = accessor(b) if b else None
        a_last = sorts_last(a, a_key)
        b_last = sorts_last(b, b_key)
        if a_last or b_last:
            return a_last and not b_last
        return bool(a_key > b_key)

    return greater


def sort_by(
    collection: Collection | CollectionView,
    key: KeyExtractor | Callable[[Any], Any] | str | None = None,
) -> list[Any]:
    """Sort values ascending by key, stably.

    Args:
        collection: Sequence or mapping; mappings are sorted by value.
        key: Callable, field name, KeyExtractor, or None for the values themselves.

    Returns:
        New sorted list. The input is not modified.

    Raises:
        TypeError: If key is not a valid key specification, or if two keys
            cannot be compared.
    """
    greater = key_comparator(normalize_key(key).accessor())
    values = map(collection, identity)
    return merge_sort(values, greater)
