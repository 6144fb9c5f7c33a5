"""foldkit: eager functional combinators and stateful function decorators.

Usage:
    from foldkit import reduce, sort_by, intersection, memoize

    reduce([1, 2, 3], lambda total, n: total + n, 0)      # 6
    sort_by([{"age": 30}, {"age": 4}], "age")            # [{"age": 4}, {"age": 30}]
    intersection([1, 2, 3], [2, 3, 4])                   # [2, 3]

    @memoize
    def square(n):
        return n * n
"""

__version__ = "0.1.0"

# Configuration
from foldkit.config import FoldkitSettings, get_settings

# Core primitives and combinators
from foldkit.core import (
    FieldKey,
    FunctionKey,
    KeyExtractor,
    UnhashableElementWarning,
    contains,
    defaults,
    difference,
    each,
    every,
    extend,
    filter,
    first,
    flatten,
    identity,
    index_of,
    intersection,
    invoke,
    last,
    map,
    pluck,
    reduce,
    reject,
    shuffle,
    some,
    sort_by,
    uniq,
    zip,
)

# Decorators
from foldkit.decorators import (
    NotCallableError,
    UnhashableArgumentError,
    delay,
    memoize,
    once,
    throttle,
)

__all__ = [
    # Version
    "__version__",
    # Iteration
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
    "uniq",
    "flatten",
    # Set algebra
    "intersection",
    "difference",
    "UnhashableElementWarning",
    # Ordering
    "sort_by",
    "KeyExtractor",
    "FunctionKey",
    "FieldKey",
    # Objects
    "first",
    "last",
    "extend",
    "defaults",
    "zip",
    "shuffle",
    # Decorators
    "once",
    "memoize",
    "throttle",
    "delay",
    "NotCallableError",
    "UnhashableArgumentError",
    # Config
    "FoldkitSettings",
    "get_settings",
]
