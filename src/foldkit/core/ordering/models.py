"""Key extractor models for sort_by.

Usage:
    sort_by(people, "age")                  # FieldKey("age")
    sort_by(people, lambda p: p["age"])     # FunctionKey(...)
    sort_by(numbers)                        # FunctionKey(identity)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from foldkit.core.iteration import identity
from foldkit.core.transforms import read_field


@dataclass(frozen=True, slots=True)
class FunctionKey:
    """Key computed by calling a function on each value."""

    fn: Callable[[Any], Any]

    def accessor(self) -> Callable[[Any], Any]:
        return self.fn


@dataclass(frozen=True, slots=True)
class FieldKey:
    """Key read from a named field of each value (mapping key or attribute)."""

    name: str

    def accessor(self) -> Callable[[Any], Any]:
        name = self.name
        return lambda value: read_field(value, name)


KeyExtractor = FunctionKey | FieldKey


def normalize_key(key: KeyExtractor | Callable[[Any], Any] | str | None) -> KeyExtractor:
    """Convert the accepted key specifications to a KeyExtractor.

    - None -> FunctionKey(identity)
    - str -> FieldKey
    - callable -> FunctionKey
    - KeyExtractor -> passthrough

    Raises:
        TypeError: If key is not a recognized key specification.
    """
    if key is None:
        return FunctionKey(identity)
    if isinstance(key, FunctionKey | FieldKey):
        return key
    if isinstance(key, str):
        return FieldKey(key)
    if callable(key):
        return FunctionKey(key)
    raise TypeError(f"Invalid sort key: expected callable or field name, got {key!r}")
