"""Core functionalities: stateless, eager operations over collections.

Architecture Note:
    core/ contains pure functions with no state beyond a single call.
    iteration/ holds the two primitives (each, reduce); every other package
    here is written against them. For stateful wrappers, see decorators/.
"""

from foldkit.core.iteration import (
    CollectionView,
    KeyedMapping,
    OrderedSequence,
    as_collection,
    each,
    identity,
    reduce,
)
from foldkit.core.membership import UnhashableElementWarning, strictly_equal
from foldkit.core.objects import defaults, extend, first, last, shuffle, zip
from foldkit.core.ordering import (
    FieldKey,
    FunctionKey,
    KeyExtractor,
    merge_sort,
    normalize_key,
    sort_by,
)
from foldkit.core.sets import difference, intersection
from foldkit.core.transforms import (
    contains,
    every,
    filter,
    flatten,
    index_of,
    invoke,
    map,
    negate,
    pluck,
    reject,
    some,
    uniq,
)
from foldkit.core.types import Collection, Iteratee, Predicate, Transform, Visitor

__all__ = [
    # Types
    "Collection",
    "Visitor",
    "Iteratee",
    "Predicate",
    "Transform",
    # Iteration
    "OrderedSequence",
    "KeyedMapping",
    "CollectionView",
    "as_collection",
    "each",
    "reduce",
    "identity",
    # Predicates & transforms
    "filter",
    "reject",
    "map",
    "pluck",
    "invoke",
    "every",
    "some",
    "contains",
    "index_of",
    "negate",
    "uniq",
    "flatten",
    # Set algebra
    "intersection",
    "difference",
    "strictly_equal",
    "UnhashableElementWarning",
    # Ordering
    "sort_by",
    "merge_sort",
    "KeyExtractor",
    "FunctionKey",
    "FieldKey",
    "normalize_key",
    # Objects
    "first",
    "last",
    "extend",
    "defaults",
    "zip",
    "shuffle",
]
