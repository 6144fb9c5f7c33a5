"""Derived predicates and transforms built on each/reduce."""

from foldkit.core.transforms.operations import (
    contains,
    every,
    filter,
    flatten,
    index_of,
    invoke,
    is_nested,
    map,
    negate,
    pluck,
    read_field,
    reject,
    some,
    uniq,
)

__all__ = [
    # Predicates
    "every",
    "some",
    "contains",
    "index_of",
    "negate",
    # Transforms
    "filter",
    "reject",
    "map",
    "pluck",
    "invoke",
    "uniq",
    "flatten",
    "is_nested",
    "read_field",
]
