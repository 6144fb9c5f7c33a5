"""Set algebra: intersection and difference over sequences."""

from foldkit.core.sets.operations import difference, intersection

__all__ = [
    "intersection",
    "difference",
]
