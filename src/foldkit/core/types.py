"""Core type definitions for foldkit."""

from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeAlias

Collection: TypeAlias = Sequence[Any] | Mapping[Any, Any]
"""Anything the iteration primitives accept: an ordered sequence or a keyed mapping."""

Visitor: TypeAlias = Callable[[Any, Any, Any], object]
"""Called as visitor(value, key_or_index, collection). Return value is ignored."""

Iteratee: TypeAlias = Callable[[Any, Any], Any]
"""Reduction step: iteratee(accumulator, value) -> next accumulator."""

Predicate: TypeAlias = Callable[[Any], Any]
"""Truth test over one value. Only the truthiness of the result matters."""

Transform: TypeAlias = Callable[[Any], Any]
"""Maps one value to another."""
