"""
Empty-cluster recovery strategies.

When a Lloyd round leaves a cluster without members, one point is taken
from another cluster and becomes the empty cluster's singleton center.
Each strategy is a pure function choosing the donor; it never mutates its
inputs. The working state it inspects is:

- ``points``: all input points
- ``centers``: current center of every cluster
- ``members``: for every cluster, the positions in ``points`` of its members

Donors must keep at least one member, so only clusters with two or more
members qualify. Without any qualifying donor, ``ConvergenceError`` is
raised.
"""

from enum import Enum
from typing import Callable, Dict, List, Sequence, Tuple, Union

from ..base.exceptions import ConvergenceError
from ..utils.metrics import sum_of_squares, mean_squared_distance, distance_variance


class EmptyClusterStrategy(Enum):
    """How to refill a cluster that lost all of its points."""
    LARGEST_VARIANCE = 'largest_variance'
    LARGEST_POINTS_NUMBER = 'largest_points_number'
    FARTHEST_POINT = 'farthest_point'


class VarianceMeasure(Enum):
    """Spread measure used by ``LARGEST_VARIANCE``."""
    SUM_SQUARED = 'sum_squared'
    MEAN_SQUARED = 'mean_squared'
    DISTANCE_VARIANCE = 'distance_variance'


class TieBreak(Enum):
    """Which candidate wins when several share the largest value."""
    FIRST = 'first'
    LAST = 'last'


_VARIANCE_FUNCTIONS = {
    VarianceMeasure.SUM_SQUARED: sum_of_squares,
    VarianceMeasure.MEAN_SQUARED: mean_squared_distance,
    VarianceMeasure.DISTANCE_VARIANCE: distance_variance,
}


def as_enum(enum_cls, value):
    """Accept an enum member or its (case-insensitive) value/name."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        for member in enum_cls:
            if key in (member.value, member.name.lower()):
                return member
    raise ValueError(f"Unknown {enum_cls.__name__}: {value!r}")


def _beats(value: float, best: float, tie_break: TieBreak) -> bool:
    if tie_break is TieBreak.LAST:
        return value >= best
    return value > best


def _donors(members: Sequence[List[int]]) -> List[int]:
    """Clusters that can give away a point and stay non-empty."""
    donors = [k for k, m in enumerate(members) if len(m) >= 2]
    if not donors:
        raise ConvergenceError()
    return donors


def farthest_member(points: Sequence, center, member_positions: List[int],
                    tie_break: TieBreak = TieBreak.FIRST) -> Tuple[int, float]:
    """Slot (index into ``member_positions``) of the member farthest from center.

    Returns:
        (slot, distance)
    """
    best_slot = -1
    best_distance = float('-inf')
    for slot, position in enumerate(member_positions):
        d = points[position].distance_from(center)
        if _beats(d, best_distance, tie_break):
            best_slot, best_distance = slot, d
    return best_slot, best_distance


def largest_variance_donor(points: Sequence, centers: Sequence,
                           members: Sequence[List[int]],
                           tie_break: TieBreak = TieBreak.FIRST,
                           variance_measure: VarianceMeasure = VarianceMeasure.SUM_SQUARED) -> Tuple[int, int]:
    """Take the farthest point of the cluster with the largest spread.

    Returns:
        (donor cluster index, member slot to move)
    """
    measure = _VARIANCE_FUNCTIONS[as_enum(VarianceMeasure, variance_measure)]

    selected = -1
    max_variance = float('-inf')
    for k in _donors(members):
        variance = measure(centers[k], [points[i] for i in members[k]])
        if _beats(variance, max_variance, tie_break):
            selected, max_variance = k, variance

    slot, _ = farthest_member(points, centers[selected], members[selected], tie_break)
    return selected, slot


def largest_points_number_donor(points: Sequence, centers: Sequence,
                                members: Sequence[List[int]],
                                tie_break: TieBreak = TieBreak.FIRST) -> Tuple[int, int]:
    """Take the farthest point of the cluster with the most members."""
    selected = -1
    max_size = -1
    for k in _donors(members):
        if _beats(len(members[k]), max_size, tie_break):
            selected, max_size = k, len(members[k])

    slot, _ = farthest_member(points, centers[selected], members[selected], tie_break)
    return selected, slot


def farthest_point_donor(points: Sequence, centers: Sequence,
                         members: Sequence[List[int]],
                         tie_break: TieBreak = TieBreak.FIRST) -> Tuple[int, int]:
    """Take the point farthest from its own cluster center, over all donors."""
    selected = -1
    selected_slot = -1
    max_distance = float('-inf')
    for k in _donors(members):
        slot, d = farthest_member(points, centers[k], members[k], tie_break)
        if _beats(d, max_distance, tie_break):
            selected, selected_slot, max_distance = k, slot, d
    return selected, selected_slot


_STRATEGIES: Dict[EmptyClusterStrategy, Callable[..., Tuple[int, int]]] = {
    EmptyClusterStrategy.LARGEST_VARIANCE: largest_variance_donor,
    EmptyClusterStrategy.LARGEST_POINTS_NUMBER: largest_points_number_donor,
    EmptyClusterStrategy.FARTHEST_POINT: farthest_point_donor,
}


def select_donor(strategy: Union[EmptyClusterStrategy, str],
                 points: Sequence, centers: Sequence,
                 members: Sequence[List[int]],
                 tie_break: Union[TieBreak, str] = TieBreak.FIRST,
                 variance_measure: Union[VarianceMeasure, str] = VarianceMeasure.SUM_SQUARED) -> Tuple[int, int]:
    """Dispatch to the donor-selection function of ``strategy``.

    Returns:
        (donor cluster index, member slot to move)

    Raises:
        ConvergenceError: If no cluster has a point to spare
    """
    strategy = as_enum(EmptyClusterStrategy, strategy)
    tie_break = as_enum(TieBreak, tie_break)
    if strategy is EmptyClusterStrategy.LARGEST_VARIANCE:
        return largest_variance_donor(points, centers, members, tie_break,
                                      as_enum(VarianceMeasure, variance_measure))
    return _STRATEGIES[strategy](points, centers, members, tie_break)
