"""
recsort - Multi-key sorting for lists of heterogeneous records

This package sorts lists of records (dicts, objects, scalars or any mix) by
one or more criteria:

- Nested field paths such as ``"metadata.created_at"`` or ``"tags[0]"``
- Comparison functions, optionally receiving the default comparator
- Descriptors bundling a path with its own direction
- Global options for direction and custom value ranking

Example:
    >>> from recsort import sort
    >>> sort([{"n": 2}, {"n": 1}], "n", {"direction": "desc"})
    [{'n': 2}, {'n': 1}]
"""

__version__ = "0.1.0"
__author__ = "recsort Team"
__license__ = "MIT"

# Version compatibility check
import sys

if sys.version_info < (3, 9):
    raise RuntimeError("recsort requires Python 3.9 or higher")

# Import commonly used components for easier access
from .core import (
    MISSING,
    InvalidSequenceError,
    SortDescriptor,
    SortDirection,
    SortOptions,
    ValidationError,
    compose,
    default_compare,
    get_value,
    sort,
)

__all__ = [
    "sort",
    "compose",
    "default_compare",
    "get_value",
    "SortDescriptor",
    "SortDirection",
    "SortOptions",
    "MISSING",
    "InvalidSequenceError",
    "ValidationError",
]
