"""Derived predicates and transforms.

Pure functions expressed as compositions of each/reduce. None of them modify
their input; each returns a new list or a bool.

Usage:
    filter([1, 2, 3, 4], lambda n: n % 2)      # [1, 3]
    every([1, 2, 3], lambda n: n > 0)          # True
    uniq([2, 1, 2, 3, 1])                      # [2, 1, 3]
    flatten([1, [2, [3, [4]]], 5])             # [1, 2, 3, 4, 5]
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

from foldkit.core.iteration import CollectionView, identity, reduce
from foldkit.core.membership import strictly_equal, table_key
from foldkit.core.types import Collection, Predicate, Transform

_LEAF_SEQUENCES = (str, bytes, bytearray, memoryview)


def negate(predicate: Predicate) -> Predicate:
    """Return a predicate that is true exactly when predicate is falsy."""

    def negated(*args: Any, **kwargs: Any) -> bool:
        return not predicate(*args, **kwargs)

    return negated


def read_field(value: Any, name: str | int) -> Any:
    """Read a named field off value, or None if it has no such field.

    Mappings are read by key, sequences by integer position, anything else by
    attribute.
    """
    if isinstance(value, Mapping):
        return value.get(name)
    if isinstance(name, int) and isinstance(value, Sequence):
        return value[name] if -len(value) <= name < len(value) else None
    if isinstance(name, str):
        return getattr(value, name, None)
    return None


def filter(collection: Collection | CollectionView, predicate: Predicate) -> list[Any]:
    """Values for which predicate is truthy, in traversal order."""

    def keep(accumulator: list[Any], value: Any) -> list[Any]:
        if predicate(value):
            accumulator.append(value)
        return accumulator

    return reduce(collection, keep, [])


def reject(collection: Collection | CollectionView, predicate: Predicate) -> list[Any]:
    """Values for which predicate is falsy. Complement of filter()."""
    return filter(collection, negate(predicate))


def map(collection: Collection | CollectionView, transform: Transform) -> list[Any]:
    """transform(value) for every value, in traversal order."""

    def apply(accumulator: list[Any], value: Any) -> list[Any]:
        accumulator.append(transform(value))
        return accumulator

    return reduce(collection, apply, [])


def pluck(collection: Collection | CollectionView, name: str | int) -> list[Any]:
    """Read the same field off every value. Missing fields come back as None."""
    return map(collection, lambda value: read_field(value, name))


def invoke(
    collection: Collection | CollectionView,
    method: str | Callable[..., Any],
    *args: Any,
) -> list[Any]:
    """Call a method on every value and collect the results.

    Args:
        collection: Values to call on.
        method: Method name looked up on each value, or a callable invoked as
            method(value, *args).
        *args: Extra positional arguments for every call.

    Returns:
        List of call results in traversal order.

    Raises:
        TypeError: If method is neither a string nor callable.
    """
    if isinstance(method, str):
        return map(collection, lambda value: getattr(value, method)(*args))
    if callable(method):
        return map(collection, lambda value: method(value, *args))
    raise TypeError(f"invoke() expects a method name or callable, got {type(method).__name__}")


def every(collection: Collection | CollectionView, predicate: Predicate | None = None) -> bool:
    """True if predicate holds for every value (vacuously true when empty).

    Traversal always covers the whole collection, but once a value fails the
    predicate is not called again.
    """
    test = predicate or identity
    return reduce(collection, lambda passed, value: bool(passed and test(value)), True)


def some(collection: Collection | CollectionView, predicate: Predicate | None = None) -> bool:
    """True if predicate holds for at least one value: not every(not predicate)."""
    return not every(collection, negate(predicate or identity))


def contains(collection: Collection | CollectionView, target: Any) -> bool:
    """Strict membership test over the values of collection."""
    return reduce(
        collection,
        lambda found, value: found or strictly_equal(value, target),
        False,
    )


def index_of(sequence: Sequence[Any], target: Any) -> int:
    """Index of the first value strictly equal to target, or -1."""

    def locate(state: tuple[int, int], value: Any) -> tuple[int, int]:
        found, position = state
        if found == -1 and strictly_equal(value, target):
            found = position
        return found, position + 1

    found, _ = reduce(sequence, locate, (-1, 0))
    return found


def uniq(sequence: Collection | CollectionView) -> list[Any]:
    """Drop repeated values, keeping the first occurrence of each."""
    seen: set[tuple[type, Any]] = set()

    def first_time(value: Any) -> bool:
        key = table_key(value)
        if key in seen:
            return False
        seen.add(key)
        return True

    return filter(sequence, first_time)


def is_nested(value: Any) -> bool:
    """Whether flatten() descends into value. Text and bytes are leaves."""
    return isinstance(value, Sequence) and not isinstance(value, _LEAF_SEQUENCES)


def flatten(nested: Sequence[Any]) -> list[Any]:
    """Flatten arbitrarily nested sequences into one list, depth first.

    Non-sequence values (and strings) are kept as-is, in left-to-right order.
    Cyclic structures are not supported.
    """

    def absorb(result: list[Any], value: Any) -> list[Any]:
        if is_nested(value):
            result.extend(flatten(value))
        else:
            result.append(value)
        return result

    return reduce(nested, absorb, [])
