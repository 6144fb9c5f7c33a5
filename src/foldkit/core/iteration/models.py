"""Collection models: the two iterable variants every combinator is written against.

Usage:
    coll = as_collection([10, 20])      # OrderedSequence
    coll = as_collection({"a": 1})      # KeyedMapping

    for key, value in coll.pairs():
        ...
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class OrderedSequence:
    """Index-addressed collection. Yields (index, value) in index order."""

    source: Sequence[Any]

    def pairs(self) -> Iterator[tuple[int, Any]]:
        """Lazily yield (index, value) pairs, 0-based."""
        yield from enumerate(self.source)


@dataclass(frozen=True, slots=True)
class KeyedMapping:
    """Key-addressed collection. Yields (key, value) in the mapping's own order.

    Callers must not rely on key order beyond what the concrete mapping guarantees.
    """

    source: Mapping[Any, Any]

    def pairs(self) -> Iterator[tuple[Any, Any]]:
        """Lazily yield (key, value) pairs in enumeration order."""
        for key in self.source:
            yield key, self.source[key]


CollectionView = OrderedSequence | KeyedMapping


def as_collection(
    collection: Sequence[Any] | Mapping[Any, Any] | CollectionView,
) -> CollectionView:
    """Normalize a concrete container to one of the two collection variants.

    Mappings are checked first, so a type that is both (rare) iterates by key.

    Args:
        collection: A sequence, a mapping, or an already normalized view.

    Returns:
        OrderedSequence or KeyedMapping wrapping the input (no copy).

    Raises:
        TypeError: If collection is neither a sequence nor a mapping.
    """
    if isinstance(collection, OrderedSequence | KeyedMapping):
        return collection
    if isinstance(collection, Mapping):
        return KeyedMapping(collection)
    if isinstance(collection, Sequence):
        return OrderedSequence(collection)
    raise TypeError(
        f"Expected a sequence or mapping, got {type(collection).__name__}: {collection!r}"
    )
