"""Stable ordering: key extractors and merge sort."""

from foldkit.core.ordering.models import FieldKey, FunctionKey, KeyExtractor, normalize_key
from foldkit.core.ordering.operations import merge, merge_sort, sort_by

__all__ = [
    # Models
    "KeyExtractor",
    "FunctionKey",
    "FieldKey",
    "normalize_key",
    # Operations
    "sort_by",
    "merge",
    "merge_sort",
]
