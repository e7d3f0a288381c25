"""
Multi-key comparator composition.

``compose`` turns an ordered list of criteria and the per-call options into
one two-argument comparator. Earlier criteria dominate; later ones only
break ties. The global direction is applied once, to the final result.
"""

from typing import Any, Iterable, Optional, Union

from .criteria import CriteriaList, SortOptions, to_criteria
from .resolver import RankMap, resolve_one


class ComposedComparator:
    """
    Comparator built from a criteria list and sort options.

    Instances carry everything they need (criteria, rank map, direction), so
    one can be handed to ``functools.cmp_to_key`` or called directly.

    Attributes:
        criteria (CriteriaList): Criteria in precedence order
        rank_map (RankMap): Custom ranks from ``options.order``
        descending (bool): Whether the final result is negated
    """

    __slots__ = ("criteria", "rank_map", "descending")

    def __init__(self, criteria: CriteriaList, rank_map: RankMap, descending: bool = False):
        self.criteria = criteria
        self.rank_map = rank_map
        self.descending = descending

    def __call__(self, a: Any, b: Any) -> Union[int, float]:
        # An empty criteria list compares as a tie in either direction
        result: Union[int, float] = 0
        for criterion in self.criteria:
            result = resolve_one(criterion, a, b, self.rank_map)
            if result != 0:
                break
        if self.descending:
            return -result
        return result

    def __repr__(self) -> str:
        direction = "desc" if self.descending else "asc"
        return (
            f"ComposedComparator(criteria={self.criteria!r}, "
            f"ranks={len(self.rank_map)}, direction={direction!r})"
        )


def compose(criteria: Iterable[Any], options: Optional[Any] = None) -> ComposedComparator:
    """
    Build a comparator from criteria and options.

    Args:
        criteria: Criteria in precedence order; raw values (paths, callables,
            descriptor mappings) are converted with ``to_criterion``
        options: ``SortOptions``, an options mapping, or None

    Returns:
        A comparator returning a signed number for two records

    Example:
        >>> cmp = compose(["age", {"field": "name", "direction": "desc"}])
        >>> cmp({"age": 30, "name": "a"}, {"age": 30, "name": "b"})
        1
    """
    opts = SortOptions.from_value(options)
    order = opts.order if isinstance(opts.order, (list, tuple)) else None
    return ComposedComparator(
        criteria=to_criteria(list(criteria)),
        rank_map=RankMap(order),
        descending=opts.descending,
    )
