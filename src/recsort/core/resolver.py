"""
Single-criterion resolution.

``resolve_one`` applies one criterion to two records. Custom ranks from the
``order`` option are looked up against whatever two values are being
compared at the current step: the records themselves for a list of
primitives, or the resolved field values once a path has been followed.
"""

from typing import Any, Dict, Iterable, Optional, Union

from .access import get_value, is_structured
from .compare import default_compare
from .criteria import Criterion, FunctionCriterion, PathCriterion, SortDescriptor
from .types import MISSING


class RankMap:
    """
    Lookup from values to their position in a custom order.

    When a value occurs more than once in the order, its last position wins.
    Unhashable values never have a rank.
    """

    __slots__ = ("_ranks",)

    def __init__(self, order: Optional[Iterable[Any]] = None):
        self._ranks: Dict[Any, int] = {}
        for rank, value in enumerate(order or ()):
            try:
                self._ranks[value] = rank
            except TypeError:
                continue

    def __len__(self) -> int:
        return len(self._ranks)

    def __contains__(self, value: Any) -> bool:
        try:
            return value in self._ranks
        except TypeError:
            return False

    def rank(self, value: Any) -> Any:
        """Return the rank of ``value``, or ``MISSING`` if it has none."""
        try:
            return self._ranks.get(value, MISSING)
        except TypeError:
            return MISSING


EMPTY_RANK_MAP = RankMap()


def resolve_one(
    criterion: Criterion, a: Any, b: Any, rank_map: RankMap = EMPTY_RANK_MAP
) -> Union[int, float]:
    """
    Compare ``a`` and ``b`` under a single criterion.

    Args:
        criterion: Criterion to apply; None compares the values directly
        a: First record
        b: Second record
        rank_map: Custom ranks from the ``order`` option

    Returns:
        Negative if ``a`` sorts first, positive if ``b`` sorts first, 0 for a
        tie. Function criteria return whatever the function returns.
    """
    if isinstance(criterion, FunctionCriterion):
        if criterion.takes_fallback:
            return criterion.func(a, b, default_compare)
        return criterion.func(a, b)

    if isinstance(criterion, SortDescriptor):
        return criterion.sign * resolve_one(criterion.criterion, a, b, rank_map)

    if len(rank_map) and (a in rank_map or b in rank_map):
        return default_compare(rank_map.rank(a), rank_map.rank(b))

    if isinstance(criterion, PathCriterion) and is_structured(a) and is_structured(b):
        return resolve_one(
            None, get_value(a, criterion.path), get_value(b, criterion.path), rank_map
        )

    return default_compare(a, b)
