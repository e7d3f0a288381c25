"""Normalization of the variadic arguments passed to ``sort``."""

from typing import Any, List, Sequence, Tuple

from .criteria import CriteriaList, SortOptions, is_options_like, to_criteria


def flatten(args: Sequence[Any]) -> List[Any]:
    """
    Flatten one level of lists and tuples.

    Example:
        >>> flatten(["a", ["b", ["c"]], ("d",)])
        ['a', 'b', ['c'], 'd']
    """
    flat: List[Any] = []
    for arg in args:
        if isinstance(arg, (list, tuple)):
            flat.extend(arg)
        else:
            flat.append(arg)
    return flat


def split_options(candidates: List[Any]) -> Tuple[List[Any], Any]:
    """
    Separate a trailing options value from the criteria candidates.

    The last candidate is options if it is a ``SortOptions`` or a mapping
    without a ``field`` key; a mapping with ``field`` is a descriptor.

    Returns:
        Tuple of (criteria candidates, raw options or None)
    """
    if candidates and is_options_like(candidates[-1]):
        return candidates[:-1], candidates[-1]
    return candidates, None


def normalize_arguments(args: Sequence[Any]) -> Tuple[CriteriaList, SortOptions]:
    """
    Turn ``sort``'s variadic arguments into a criteria list and options.

    When no criteria remain once the options are removed, the records are
    compared directly, so ``order`` and ``direction`` still take effect.

    Args:
        args: Everything passed to ``sort`` after the list itself

    Returns:
        Tuple of (criteria, options)
    """
    candidates, raw_options = split_options(flatten(args))
    criteria = to_criteria(candidates) or (None,)
    return criteria, SortOptions.from_value(raw_options)
