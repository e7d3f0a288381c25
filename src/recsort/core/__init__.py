"""
Core sorting engine.

Leaves first: value comparison and path access, criterion variants, the
single-criterion resolver, the multi-key composer, and the ``sort`` entry
point that ties them together.
"""

from .access import get_value, is_structured, parse_path
from .compare import default_compare
from .criteria import (
    FunctionCriterion,
    PathCriterion,
    SortDescriptor,
    SortDirection,
    SortOptions,
    to_criterion,
)
from .exceptions import InvalidSequenceError, ValidationError
from .resolver import RankMap, resolve_one
from .composer import ComposedComparator, compose
from .arguments import flatten, normalize_arguments
from .sorting import sort
from .types import MISSING

__all__ = [
    "MISSING",
    "ComposedComparator",
    "FunctionCriterion",
    "InvalidSequenceError",
    "PathCriterion",
    "RankMap",
    "SortDescriptor",
    "SortDirection",
    "SortOptions",
    "ValidationError",
    "compose",
    "default_compare",
    "flatten",
    "get_value",
    "is_structured",
    "normalize_arguments",
    "parse_path",
    "resolve_one",
    "sort",
    "to_criterion",
]
