"""Thin helpers over sequences and mappings: accessors, merging, zip, shuffle."""

from __future__ import annotations

import random
from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

from foldkit.core.iteration import each, identity
from foldkit.core.transforms import map


def first(array: Sequence[Any], n: int | None = None) -> Any:
    """First element (None if empty), or a list of the first n elements."""
    if n is None:
        return array[0] if array else None
    return list(array[: max(n, 0)])


def last(array: Sequence[Any], n: int | None = None) -> Any:
    """Last element (None if empty), or a list of the last n elements."""
    if n is None:
        return array[-1] if array else None
    return list(array[max(len(array) - n, 0) :])


def _copy_into(
    target: MutableMapping[Any, Any],
    sources: tuple[Mapping[Any, Any], ...],
    overwrite: bool,
) -> MutableMapping[Any, Any]:
    def copy_source(source: Mapping[Any, Any], _index: int, _sources: Any) -> None:
        def copy_entry(value: Any, key: Any, _source: Any) -> None:
            if overwrite or key not in target:
                target[key] = value

        each(source, copy_entry)

    each(sources, copy_source)
    return target


def extend(
    target: MutableMapping[Any, Any], *sources: Mapping[Any, Any]
) -> MutableMapping[Any, Any]:
    """Copy every entry of each source into target, later sources winning.

    Mutates and returns target.
    """
    return _copy_into(target, sources, overwrite=True)


def defaults(
    target: MutableMapping[Any, Any], *sources: Mapping[Any, Any]
) -> MutableMapping[Any, Any]:
    """Like extend(), but keys already in target are never overwritten."""
    return _copy_into(target, sources, overwrite=False)


def zip(*arrays: Sequence[Any]) -> list[list[Any]]:
    """Group elements by index. Shorter arrays are padded with None.

    Example:
        zip(["a", "b", "c"], [1, 2])  # [["a", 1], ["b", 2], ["c", None]]
    """
    length = max(map(arrays, len), default=0)
    return [[array[i] if i < len(array) else None for array in arrays] for i in range(length)]


def shuffle(array: Sequence[Any], rng: random.Random | None = None) -> list[Any]:
    """Random permutation of array (Fisher-Yates). The input is left untouched."""
    rng = rng or random.Random()
    shuffled = map(array, identity)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled
