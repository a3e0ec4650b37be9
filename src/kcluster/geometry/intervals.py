"""
One-dimensional regions as sorted lists of closed intervals.

A region of the real line is stored as disjoint, non-touching closed
intervals in ascending order. Bounds may be infinite; unbounded ends are
detected explicitly so no arithmetic is ever done on an infinite bound.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Tuple, Union
import math


DEFAULT_TOLERANCE = 1e-10


class Location(Enum):
    """Position of a point with respect to a region."""
    INSIDE = 'inside'
    OUTSIDE = 'outside'
    BOUNDARY = 'boundary'


def is_negative_infinity(value: float) -> bool:
    return math.isinf(value) and value < 0


def is_positive_infinity(value: float) -> bool:
    return math.isinf(value) and value > 0


@dataclass(frozen=True)
class Interval:
    """Closed interval ``[lower, upper]``, possibly unbounded on either side."""
    lower: float
    upper: float

    def __post_init__(self):
        if math.isnan(self.lower) or math.isnan(self.upper):
            raise ValueError("Interval bounds must not be NaN")
        if is_positive_infinity(self.lower) or is_negative_infinity(self.upper):
            raise ValueError(f"Invalid interval bounds: [{self.lower}, {self.upper}]")
        if self.lower > self.upper:
            raise ValueError(f"Interval lower bound {self.lower} exceeds upper bound {self.upper}")

    @property
    def bounded_below(self) -> bool:
        return not is_negative_infinity(self.lower)

    @property
    def bounded_above(self) -> bool:
        return not is_positive_infinity(self.upper)

    @property
    def length(self) -> float:
        if not (self.bounded_below and self.bounded_above):
            return math.inf
        return self.upper - self.lower

    def check_point(self, x: float, tolerance: float = DEFAULT_TOLERANCE) -> Location:
        """Locate ``x`` relative to this interval.

        A point within ``tolerance`` of a finite bound is on the BOUNDARY.
        """
        if self.bounded_below and abs(x - self.lower) <= tolerance:
            return Location.BOUNDARY
        if self.bounded_above and abs(x - self.upper) <= tolerance:
            return Location.BOUNDARY
        if self.lower < x < self.upper:
            return Location.INSIDE
        return Location.OUTSIDE


IntervalLike = Union[Interval, Tuple[float, float]]


class IntervalsSet:
    """Region of the real line made of disjoint closed intervals.

    ``IntervalsSet()`` is the empty region; use ``whole_line()`` for the full
    line and ``from_bounds(lower, upper)`` for a single interval.
    Overlapping or touching input intervals are merged.

    Example:
        >>> region = IntervalsSet([(1, 2), (3, 4)])
        >>> region.check_point(1.5)
        <Location.INSIDE: 'inside'>
        >>> region.complement().as_list()[1]
        Interval(lower=2.0, upper=3.0)
    """

    def __init__(self, intervals: Iterable[IntervalLike] = (),
                 tolerance: float = DEFAULT_TOLERANCE):
        self.tolerance = tolerance
        self._intervals: Tuple[Interval, ...] = self._normalize(intervals)

    @staticmethod
    def _normalize(intervals: Iterable[IntervalLike]) -> Tuple[Interval, ...]:
        items = [
            iv if isinstance(iv, Interval) else Interval(float(iv[0]), float(iv[1]))
            for iv in intervals
        ]
        items.sort(key=lambda iv: (iv.lower, iv.upper))

        merged: List[Interval] = []
        for iv in items:
            if merged and iv.lower <= merged[-1].upper:
                last = merged[-1]
                merged[-1] = Interval(last.lower, max(last.upper, iv.upper))
            else:
                merged.append(iv)
        return tuple(merged)

    @classmethod
    def from_bounds(cls, lower: float, upper: float,
                    tolerance: float = DEFAULT_TOLERANCE) -> "IntervalsSet":
        """Region made of the single interval ``[lower, upper]``."""
        return cls([Interval(float(lower), float(upper))], tolerance)

    @classmethod
    def whole_line(cls, tolerance: float = DEFAULT_TOLERANCE) -> "IntervalsSet":
        return cls([Interval(-math.inf, math.inf)], tolerance)

    @classmethod
    def empty(cls, tolerance: float = DEFAULT_TOLERANCE) -> "IntervalsSet":
        return cls((), tolerance)

    @property
    def intervals(self) -> Tuple[Interval, ...]:
        return self._intervals

    def as_list(self) -> List[Interval]:
        """Intervals in ascending order."""
        return list(self._intervals)

    def __iter__(self) -> Iterator[Interval]:
        return iter(self._intervals)

    def __len__(self) -> int:
        return len(self._intervals)

    def __eq__(self, other) -> bool:
        if not isinstance(other, IntervalsSet):
            return NotImplemented
        return self._intervals == other._intervals

    def __hash__(self) -> int:
        return hash(self._intervals)

    def __repr__(self) -> str:
        body = ", ".join(f"[{iv.lower}, {iv.upper}]" for iv in self._intervals)
        return f"IntervalsSet({body})"

    def is_empty(self) -> bool:
        return not self._intervals

    def is_full(self) -> bool:
        return (len(self._intervals) == 1
                and not self._intervals[0].bounded_below
                and not self._intervals[0].bounded_above)

    @property
    def size(self) -> float:
        """Total length of the region (may be infinite)."""
        total = 0.0
        for iv in self._intervals:
            if iv.length == math.inf:
                return math.inf
            total += iv.length
        return total

    @property
    def inf(self) -> float:
        """Lowest point of the region (+inf when empty)."""
        return self._intervals[0].lower if self._intervals else math.inf

    @property
    def sup(self) -> float:
        """Highest point of the region (-inf when empty)."""
        return self._intervals[-1].upper if self._intervals else -math.inf

    def check_point(self, x: float) -> Location:
        """Locate ``x`` relative to the region."""
        for iv in self._intervals:
            location = iv.check_point(x, self.tolerance)
            if location is not Location.OUTSIDE:
                return location
        return Location.OUTSIDE

    def complement(self) -> "IntervalsSet":
        """Closure of the part of the line not covered by this region."""
        if not self._intervals:
            return IntervalsSet.whole_line(self.tolerance)

        gaps: List[Interval] = []
        first, last = self._intervals[0], self._intervals[-1]
        if first.bounded_below:
            gaps.append(Interval(-math.inf, first.lower))
        for left, right in zip(self._intervals, self._intervals[1:]):
            gaps.append(Interval(left.upper, right.lower))
        if last.bounded_above:
            gaps.append(Interval(last.upper, math.inf))
        return IntervalsSet(gaps, self.tolerance)

    def union(self, other: "IntervalsSet") -> "IntervalsSet":
        return IntervalsSet(self._intervals + other._intervals, self.tolerance)

    def intersection(self, other: "IntervalsSet") -> "IntervalsSet":
        """Common part of both regions; single shared points are dropped."""
        result: List[Interval] = []
        i = j = 0
        a, b = self._intervals, other._intervals
        while i < len(a) and j < len(b):
            lower = max(a[i].lower, b[j].lower)
            upper = min(a[i].upper, b[j].upper)
            if lower < upper:
                result.append(Interval(lower, upper))
            if a[i].upper < b[j].upper:
                i += 1
            else:
                j += 1
        return IntervalsSet(result, self.tolerance)

    def difference(self, other: "IntervalsSet") -> "IntervalsSet":
        return self.intersection(other.complement())
