"""
Sorting entry point.

``sort`` orders a list of records in place by any mix of paths, comparison
functions and descriptors, optionally followed by an options value:

    sort(people, "last", "first")
    sort(people, {"field": "age", "direction": "desc"}, "name")
    sort(people, ["team", "age"], {"direction": "desc"})
    sort(levels, {"order": ["high", "medium", "low"]})
    sort(numbers, lambda a, b: b - a)
"""

import logging
from functools import cmp_to_key
from typing import Any, List, Optional

from ..utils.validation import SchemaValidator
from .arguments import flatten, normalize_arguments, split_options
from .composer import compose
from .constants import INVALID_SEQUENCE_MSG
from .exceptions import InvalidSequenceError, ValidationError

logger = logging.getLogger(__name__)


def _check_arguments(args: Any, strict: bool) -> None:
    """Validate options and descriptor mappings, logging or raising problems."""
    validator = SchemaValidator()
    candidates, raw_options = split_options(flatten(args))
    results = validator.validate_descriptors(candidates)
    if raw_options is not None:
        results.append(validator.validate_options(raw_options))

    errors = [error for result in results for error in result.errors]
    if not errors:
        return
    if strict:
        raise ValidationError("; ".join(errors))
    for error in errors:
        logger.warning("Ignoring invalid sort argument: %s", error)


def sort(sequence: Optional[List[Any]], *args: Any, strict: bool = False) -> List[Any]:
    """
    Sort a list of records in place by one or more criteria.

    Args:
        sequence: The list to sort; None is treated as an empty list
        *args: Criteria in precedence order (path strings, comparison
            functions, descriptors, or lists of these), optionally followed
            by an options mapping such as ``{"direction": "desc"}`` or
            ``{"order": [...]}``
        strict: Raise on invalid options or descriptors instead of logging
            a warning

    Returns:
        ``sequence`` itself, sorted, or a new empty list for None

    Raises:
        InvalidSequenceError: If ``sequence`` is neither a list nor None
        ValidationError: If ``strict`` is set and an options or descriptor
            mapping is invalid

    Example:
        >>> sort([{"a": {"b": 2}}, {"a": {"b": 1}}], "a.b")
        [{'a': {'b': 1}}, {'a': {'b': 2}}]
        >>> sort(["b", "a", "c"], {"order": ["c", "b", "a"]})
        ['c', 'b', 'a']
    """
    if sequence is None:
        return []
    if not isinstance(sequence, list):
        raise InvalidSequenceError(INVALID_SEQUENCE_MSG)

    if not args:
        # Default ordering compares the string form of each record
        sequence.sort(key=str)
        return sequence

    _check_arguments(args, strict)
    criteria, options = normalize_arguments(args)
    comparator = compose(criteria, options)
    logger.debug("Sorting %d records with %r", len(sequence), comparator)

    sequence.sort(key=cmp_to_key(comparator))
    return sequence
