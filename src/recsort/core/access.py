"""
Nested value access.

This module resolves path strings against nested records. Paths use dots
and brackets (``"metadata.created_at"``, ``"tags[0]"``, ``"rows.2.name"``,
``'labels["a.b"]'``) and walk through mappings, sequences and object
attributes alike. A missing segment yields ``MISSING`` rather than an error.
"""

import re
from collections.abc import Mapping, Sequence
from functools import lru_cache
from numbers import Number
from typing import Any, Tuple, Union

from .types import MISSING

_SEGMENT = re.compile(r"""\[\s*(?:"([^"]*)"|'([^']*)'|([^\]]*?))\s*\]|([^.\[\]]+)""")

_SCALARS = (str, bytes, bytearray, Number)

Segment = Union[str, int]


def is_structured(value: Any) -> bool:
    """Return True if paths can be resolved against ``value``."""
    return value is not None and value is not MISSING and not isinstance(value, _SCALARS)


def _as_index(text: str) -> Union[int, None]:
    if text.isdigit():
        return int(text)
    return None


@lru_cache(maxsize=256)
def parse_path(path: str) -> Tuple[Segment, ...]:
    """
    Split a path string into its segments.

    Quoted bracket segments are kept as strings; unquoted numeric segments
    become integers.

    Example:
        >>> parse_path('a.b[0]["x.y"]')
        ('a', 'b', 0, 'x.y')
    """
    segments = []
    for double, single, bare, plain in _SEGMENT.findall(path):
        if double or single:
            segments.append(double or single)
            continue
        text = bare or plain
        if not text:
            continue
        index = _as_index(text)
        segments.append(text if index is None else index)
    return tuple(segments)


def _step(current: Any, segment: Segment) -> Any:
    if isinstance(current, Mapping):
        if segment in current:
            return current[segment]
        # "a.0" against {"0": ...} and {0: ...} both resolve
        alternate = str(segment) if isinstance(segment, int) else _as_index(segment)
        if alternate is not None and alternate in current:
            return current[alternate]
        return MISSING

    if isinstance(current, Sequence) and not isinstance(current, _SCALARS):
        if isinstance(segment, int) and segment < len(current):
            return current[segment]
        return MISSING

    if current is None or current is MISSING or not isinstance(segment, str):
        return MISSING
    if not hasattr(current, segment):
        return MISSING
    return getattr(current, segment)


def get_value(obj: Any, path: Union[str, int], default: Any = MISSING) -> Any:
    """
    Safely get a nested value from a record.

    Traverses the path one segment at a time, returning ``default`` as soon
    as a segment cannot be resolved. A mapping that holds the whole path as a
    literal key returns that entry directly.

    Args:
        obj: Record to read from
        path: Path to the value (e.g. ``"metadata.created_at"``); an integer
            is treated as a single index
        default: Value returned when the path does not resolve

    Returns:
        The value at ``path``, or ``default`` if any segment is missing

    Example:
        >>> get_value({"a": {"b": [10, 20]}}, "a.b[1]")
        20
        >>> get_value({"a": 1}, "a.b.c")
        MISSING
    """
    if isinstance(path, int) and not isinstance(path, bool):
        segments: Tuple[Segment, ...] = (path,)
    else:
        path = str(path)
        if isinstance(obj, Mapping) and path in obj:
            return obj[path]
        segments = parse_path(path)

    current = obj
    for segment in segments:
        current = _step(current, segment)
        if current is MISSING:
            return default
    return current
