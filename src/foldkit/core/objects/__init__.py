"""Accessors and helpers for plain sequences and mappings."""

from foldkit.core.objects.operations import defaults, extend, first, last, shuffle, zip

__all__ = [
    "first",
    "last",
    "extend",
    "defaults",
    "zip",
    "shuffle",
]
