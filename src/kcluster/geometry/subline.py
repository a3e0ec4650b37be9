"""
Sub-lines: pieces of an oriented line restricted to a 1D region.
"""

from dataclasses import dataclass
from typing import List, Optional
import math

from .intervals import DEFAULT_TOLERANCE, Interval, IntervalsSet, Location
from .line import Line
from .vector import Vector2D


def _abscissa(line: Line, point: Vector2D) -> float:
    """Abscissa of ``point`` on ``line``, signed infinity for a point at infinity."""
    if not point.is_infinite():
        return line.to_sub_space(point)
    # Only the infinite coordinates tell which way along the line the point lies
    toward = 0.0
    if math.isinf(point.x):
        toward += line.cos * math.copysign(1.0, point.x)
    if math.isinf(point.y):
        toward += line.sin * math.copysign(1.0, point.y)
    return math.copysign(math.inf, toward)


@dataclass(frozen=True)
class Segment:
    """Segment of a line between two points, either of which may be at infinity."""
    start: Vector2D
    end: Vector2D
    line: Line

    @property
    def length(self) -> float:
        if self.start.is_infinite() or self.end.is_infinite():
            return math.inf
        return self.start.distance(self.end)

    def distance(self, point: Vector2D) -> float:
        """Distance from ``point`` to the closest point of the segment."""
        lower = _abscissa(self.line, self.start)
        upper = _abscissa(self.line, self.end)
        if lower > upper:
            lower, upper = upper, lower

        abscissa = min(max(self.line.to_sub_space(point), lower), upper)
        return point.distance(self.line.to_space(abscissa))


class SubLine:
    """Part of a line, given as a region of abscissas along it.

    Args:
        line: Supporting line
        remaining_region: Abscissa intervals kept on the line

    Example:
        >>> sub = SubLine.from_endpoints(Vector2D(1, 1), Vector2D(3, 1))
        >>> other = SubLine.from_endpoints(Vector2D(2, 0), Vector2D(2, 2))
        >>> point = sub.intersection(other, include_end_points=False)
        >>> round(point.x, 9), round(point.y, 9)
        (2.0, 1.0)
    """

    def __init__(self, line: Line, remaining_region: IntervalsSet):
        self.line = line
        self.remaining_region = remaining_region

    @classmethod
    def from_endpoints(cls, start: Vector2D, end: Vector2D,
                       tolerance: float = DEFAULT_TOLERANCE) -> "SubLine":
        """Bounded sub-line oriented from ``start`` to ``end``."""
        line = Line(start, end, tolerance)
        region = IntervalsSet.from_bounds(line.to_sub_space(start),
                                          line.to_sub_space(end),
                                          tolerance)
        return cls(line, region)

    @classmethod
    def from_segment(cls, segment: Segment) -> "SubLine":
        """Sub-line covering a segment, supported by the segment's line."""
        line = segment.line
        a = line.to_sub_space(segment.start)
        b = line.to_sub_space(segment.end)
        return cls(line, IntervalsSet.from_bounds(min(a, b), max(a, b), line.tolerance))

    def __repr__(self) -> str:
        return f"SubLine({self.line!r}, {self.remaining_region!r})"

    def get_segments(self) -> List[Segment]:
        """Materialize the region as segments, in ascending abscissa order."""
        return [
            Segment(self.line.to_space(interval.lower),
                    self.line.to_space(interval.upper),
                    self.line)
            for interval in self.remaining_region
        ]

    def intersection(self, other: "SubLine", include_end_points: bool) -> Optional[Vector2D]:
        """Intersection point with another sub-line.

        Args:
            other: Sub-line to intersect with
            include_end_points: If True, points on a region boundary count as
                part of the sub-line; otherwise only interior points do

        Returns:
            The crossing point, or None when the lines are parallel or the
            crossing lies outside either region
        """
        point = self.line.intersection(other.line)
        if point is None:
            return None

        loc1 = self.remaining_region.check_point(self.line.to_sub_space(point))
        loc2 = other.remaining_region.check_point(other.line.to_sub_space(point))

        if include_end_points:
            hit = loc1 is not Location.OUTSIDE and loc2 is not Location.OUTSIDE
        else:
            hit = loc1 is Location.INSIDE and loc2 is Location.INSIDE
        return point if hit else None

    def is_empty(self) -> bool:
        return self.remaining_region.is_empty()

    @property
    def length(self) -> float:
        return self.remaining_region.size

    def reverse(self) -> "SubLine":
        """Same points on the reversed line."""
        region = IntervalsSet(
            [Interval(-iv.upper, -iv.lower) for iv in self.remaining_region],
            self.remaining_region.tolerance
        )
        return SubLine(self.line.reverse(), region)
