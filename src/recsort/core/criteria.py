"""
Sort criteria and options.

This module defines the criterion variants accepted by the sorting engine:
- ``PathCriterion``: compare the values found at a path
- ``FunctionCriterion``: delegate to a user comparison function
- ``SortDescriptor``: a path with its own sort direction
- ``None``: compare the records themselves

It also defines ``SortOptions``, the per-call settings applied on top of the
criteria, and ``to_criterion``, which turns loosely typed user input into one
of the variants above.
"""

import inspect
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Tuple, Union

from .constants import ASC, DEFAULT_DIRECTION, DESC, DESCRIPTOR_FIELD_KEY, DIRECTIONS
from .exceptions import ValidationError

logger = logging.getLogger(__name__)


class SortDirection(str, Enum):
    """Enumeration of sort directions."""

    ASC = ASC
    DESC = DESC


def _direction_sign(direction: Any) -> int:
    return -1 if direction == DESC else 1


@dataclass(frozen=True)
class PathCriterion:
    """
    Compare two records by the values at ``path``.

    Attributes:
        path (str): Dotted or bracketed path (e.g. ``"metadata.created_at"``)
    """

    path: str


@dataclass(frozen=True)
class FunctionCriterion:
    """
    Compare two records with a user function.

    The function's result is used as is. Functions that accept a third
    positional argument receive the default comparator through it, so they
    can handle part of the ordering themselves and hand the rest back.

    Attributes:
        func (Callable): The comparison function
        takes_fallback (bool): Whether ``func`` is called with the fallback
    """

    func: Callable[..., Any]
    takes_fallback: bool = False

    @classmethod
    def from_callable(cls, func: Callable[..., Any]) -> "FunctionCriterion":
        """Wrap ``func``, detecting whether it accepts the fallback argument."""
        return cls(func=func, takes_fallback=_accepts_three_positional(func))


def _accepts_three_positional(func: Callable[..., Any]) -> bool:
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return False

    positional = 0
    for param in signature.parameters.values():
        if param.kind == param.VAR_POSITIONAL:
            return True
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            positional += 1
    return positional >= 3


@dataclass(frozen=True)
class SortDescriptor:
    """
    Sorting criterion bundling a field path with its own direction.

    The direction applies to this criterion only and multiplies with the
    global direction from ``SortOptions``.

    Attributes:
        field (Optional[str]): The path to sort by; empty means the records
            themselves are compared
        direction (str): Sort direction ("asc" or "desc")

    Example uses:
        - Newest first: SortDescriptor(field="created_at", direction="desc")
        - By nested score: SortDescriptor(field="metrics.score")
    """

    field: Optional[Union[str, int]] = None
    direction: str = DEFAULT_DIRECTION

    @classmethod
    def from_mapping(cls, value: Mapping) -> "SortDescriptor":
        """Build a descriptor from a ``{"field": ..., "direction": ...}`` mapping."""
        return cls(
            field=value.get(DESCRIPTOR_FIELD_KEY),
            direction=value.get("direction", DEFAULT_DIRECTION),
        )

    @property
    def sign(self) -> int:
        """Return -1 for descending descriptors, 1 otherwise."""
        return _direction_sign(self.direction)

    @property
    def criterion(self) -> Optional[PathCriterion]:
        """Return the path criterion this descriptor wraps."""
        return _path_or_generic(self.field)

    def validate(self) -> None:
        """
        Validate descriptor configuration.

        Raises:
            ValidationError: If the sort direction is invalid
        """
        if self.direction not in DIRECTIONS:
            raise ValidationError(f"Invalid sort direction: {self.direction}")


@dataclass(frozen=True)
class SortOptions:
    """
    Per-call sorting options.

    Attributes:
        direction (str): Global direction applied once to the final result
        order (Optional[Tuple]): Values in their custom rank order; a value's
            position in this sequence is its rank
    """

    direction: str = DEFAULT_DIRECTION
    order: Optional[Tuple[Any, ...]] = None

    @classmethod
    def from_value(cls, value: Any) -> "SortOptions":
        """Build options from a ``SortOptions``, a mapping, or ``None``."""
        if value is None:
            return cls()
        if isinstance(value, SortOptions):
            return value
        return cls(
            direction=value.get("direction", DEFAULT_DIRECTION),
            order=_freeze_order(value.get("order")),
        )

    @property
    def descending(self) -> bool:
        return self.direction == DESC

    def validate(self) -> None:
        """
        Validate options configuration.

        Raises:
            ValidationError: If the direction is invalid or ``order`` is not a
                sequence of values
        """
        if self.direction not in DIRECTIONS:
            raise ValidationError(f"Invalid sort direction: {self.direction}")
        if self.order is not None and not isinstance(self.order, (list, tuple)):
            raise ValidationError(f"Invalid custom order: {self.order!r}")


def _freeze_order(order: Any) -> Any:
    if isinstance(order, list):
        return tuple(order)
    return order


Criterion = Union[PathCriterion, FunctionCriterion, SortDescriptor, None]
CriteriaList = Tuple[Criterion, ...]


def _path_or_generic(value: Any) -> Optional[PathCriterion]:
    if isinstance(value, Enum):
        value = value.value
    if value is None or value == "":
        return None
    if isinstance(value, str):
        return PathCriterion(path=value)
    return PathCriterion(path=str(value))


def is_options_like(value: Any) -> bool:
    """Return True if ``value`` is options rather than a criterion."""
    if isinstance(value, SortOptions):
        return True
    return isinstance(value, Mapping) and DESCRIPTOR_FIELD_KEY not in value


def to_criterion(value: Any) -> Criterion:
    """
    Convert a user-supplied criterion to its variant.

    Args:
        value: A path string or index, a callable, a descriptor (instance or
            mapping), a ready-made criterion, or None

    Returns:
        The matching criterion; unrecognized values become the generic
        criterion (None)
    """
    if value is None or isinstance(value, (PathCriterion, FunctionCriterion, SortDescriptor)):
        return value
    if isinstance(value, Mapping):
        return SortDescriptor.from_mapping(value)
    if isinstance(value, str) or (isinstance(value, int) and not isinstance(value, bool)):
        return _path_or_generic(value)
    if callable(value):
        return FunctionCriterion.from_callable(value)

    logger.debug("Treating unrecognized criterion %r as a generic comparison", value)
    return None


def to_criteria(values: Sequence[Any]) -> CriteriaList:
    """Convert each value with ``to_criterion``."""
    return tuple(to_criterion(value) for value in values)
