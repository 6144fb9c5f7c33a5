"""Iteration primitives and the collection abstraction."""

from foldkit.core.iteration.models import (
    CollectionView,
    KeyedMapping,
    OrderedSequence,
    as_collection,
)
from foldkit.core.iteration.operations import each, identity, reduce

__all__ = [
    # Models
    "OrderedSequence",
    "KeyedMapping",
    "CollectionView",
    "as_collection",
    # Operations
    "each",
    "reduce",
    "identity",
]
