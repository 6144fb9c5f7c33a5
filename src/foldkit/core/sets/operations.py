"""Set algebra over sequences, built on membership tables.

Results hold each member once. Membership is strict (see foldkit.core.membership).

Usage:
    intersection([1, 2, 3], [2, 3, 4])          # [2, 3]
    difference([1, 2, 3, 4], [2, 4])            # [1, 3]
    difference([1, 2, 3, 4, 5], [5, 2, 10], [1])  # [3, 4]
"""

from __future__ import annotations

from typing import Any

from foldkit.core.iteration import each, reduce
from foldkit.core.membership import build_table, table_key
from foldkit.core.transforms import every, map, uniq
from foldkit.core.types import Collection


def intersection(*arrays: Collection) -> list[Any]:
    """Members present in every input array.

    One membership table is built per input; a value belongs to the result iff
    every table contains it. Results come out in first-appearance order,
    scanning the inputs left to right, but callers should treat the order as
    unspecified.

    Args:
        *arrays: Zero or more sequences or mappings (mappings by value).

    Returns:
        Deduplicated list of shared members. Empty when no arrays are given.
    """
    if not arrays:
        return []
    tables = map(arrays, build_table)
    results: dict[tuple[type, Any], Any] = {}

    def collect(value: Any, _key: Any, _array: Any) -> None:
        key = table_key(value)
        if key not in results and every(tables, lambda table: key in table):
            results[key] = value

    each(arrays, lambda array, _i, _arrays: each(array, collect))
    return list(results.values())


def _difference_of_two(array: Collection, other: Collection) -> list[Any]:
    """Members of array with every key of other deleted, in array order."""

    def discard(remaining: dict[tuple[type, Any], Any], value: Any) -> dict[tuple[type, Any], Any]:
        remaining.pop(table_key(value), None)
        return remaining

    return list(reduce(other, discard, build_table(array)).values())


def difference(array: Collection, *others: Collection) -> list[Any]:
    """Members of array absent from every other array.

    With a single other array, the result is array's membership table minus the
    keys of other. With several, it is the fold

        result = difference(result, intersection(result, other))

    over others in order, seeded with array.

    Args:
        array: Sequence or mapping to subtract from (mappings by value).
        *others: Collections whose members are removed.

    Returns:
        Deduplicated members of array, in array order.
    """
    if not others:
        return uniq(array)
    if len(others) == 1:
        return _difference_of_two(array, others[0])
    return reduce(
        others,
        lambda result, other: _difference_of_two(result, intersection(result, other)),
        array,
    )
