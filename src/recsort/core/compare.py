"""
Default value comparison.

``default_compare`` is the total order every criterion falls back to. It
orders ``None`` after every present value and ``MISSING`` after ``None``.
Values Python can compare are compared natively; for values it cannot
(``1`` against ``"a"``, two dicts) the order is decided by a type label and
then by the string form of each value, so a list of mixed records still
sorts deterministically.
"""

from numbers import Real
from typing import Any, Optional

from .access import get_value, is_structured
from .types import MISSING

# Shared label so that ints, floats and bools fall into one group
_NUMBER_LABEL = "number"


def _type_label(value: Any) -> str:
    if isinstance(value, Real):
        return _NUMBER_LABEL
    return type(value).__name__


def _sign(a: Any, b: Any) -> int:
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def _compare_present(a: Any, b: Any) -> int:
    """Compare two values neither of which is ``None`` or ``MISSING``."""
    try:
        return _sign(a, b)
    except TypeError:
        pass

    label_a, label_b = _type_label(a), _type_label(b)
    if label_a != label_b:
        return _sign(label_a, label_b)
    return _sign(str(a), str(b))


def default_compare(a: Any, b: Any, prop: Optional[str] = None) -> int:
    """
    Compare two values of arbitrary type.

    Args:
        a: First value
        b: Second value
        prop: Optional path; structured values are replaced by their value at
            this path before comparing

    Returns:
        -1 if ``a`` sorts first, 1 if ``b`` sorts first, 0 for a tie

    Raises:
        TypeError: If ``prop`` is given and is not a string

    Example:
        >>> default_compare(1, 2)
        -1
        >>> default_compare(None, "a")
        1
        >>> default_compare({"n": 2}, {"n": 1}, "n")
        1
    """
    if prop is not None:
        if not isinstance(prop, str):
            raise TypeError('expected "prop" to be None or a string')
        if is_structured(a):
            a = get_value(a, prop)
        if is_structured(b):
            b = get_value(b, prop)

    if a is MISSING:
        return 0 if b is MISSING else 1
    if b is MISSING:
        return -1
    if a is None:
        return 0 if b is None else 1
    if b is None:
        return -1
    return _compare_present(a, b)
