"""Iteration primitives: each and reduce.

Everything else in foldkit.core is built on these two functions.
"""

from __future__ import annotations

from typing import Any

from foldkit.core.iteration.models import CollectionView, as_collection
from foldkit.core.types import Collection, Iteratee, Visitor


def identity(value: Any) -> Any:
    """Return value unchanged. Default iteratee where none is supplied."""
    return value


def each(collection: Collection | CollectionView, visitor: Visitor) -> None:
    """Call visitor(value, key, collection) for every element.

    Sequences are visited in index order, mappings in enumeration order. The
    third argument is the collection as the caller passed it (not the view).
    An exception from the visitor propagates and stops the traversal.

    Args:
        collection: Sequence or mapping to traverse.
        visitor: Side-effecting callback. Its return value is ignored.

    Raises:
        TypeError: If collection is neither a sequence nor a mapping.
    """
    view = as_collection(collection)
    original = view.source if collection is view else collection
    for key, value in view.pairs():
        visitor(value, key, original)


def reduce(collection: Collection | CollectionView, iteratee: Iteratee, accumulator: Any) -> Any:
    """Left-fold collection into a single value.

    Each step computes accumulator = iteratee(accumulator, value). The seed is
    required; there is no "start from the first element" mode. The source
    collection is never modified.

    Args:
        collection: Sequence or mapping to fold.
        iteratee: Step function (accumulator, value) -> accumulator.
        accumulator: Initial accumulator, owned by this call.

    Returns:
        The final accumulator.
    """

    def step(value: Any, _key: Any, _collection: Any) -> None:
        nonlocal accumulator
        accumulator = iteratee(accumulator, value)

    each(collection, step)
    return accumulator
