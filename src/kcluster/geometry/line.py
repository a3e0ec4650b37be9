"""
Oriented lines in the plane.

A line is stored by its angle and its signed offset from the origin. Points
on the line are addressed by their abscissa, the signed distance along the
direction vector ``(cos, sin)`` measured from the foot of the perpendicular
dropped from the origin.
"""

from typing import Optional, TYPE_CHECKING
import math

from .intervals import DEFAULT_TOLERANCE, IntervalsSet
from .vector import Vector2D

if TYPE_CHECKING:
    from .subline import SubLine


def _normalize_angle(angle: float) -> float:
    """Bring an angle into [0, 2*pi)."""
    angle = math.fmod(angle, 2 * math.pi)
    return angle + 2 * math.pi if angle < 0 else angle


def _scale(value: float, factor: float) -> float:
    # An infinite abscissa along a zero direction component stays at 0
    if factor == 0.0:
        return 0.0
    return value * factor


class Line:
    """Oriented line through two points.

    The direction points from ``p1`` towards ``p2``. When both points
    coincide the line is horizontal through ``p1``.

    Args:
        p1: First point on the line
        p2: Second point on the line
        tolerance: Threshold below which the line is considered parallel to
            another or a point is considered on it

    Example:
        >>> line = Line(Vector2D(-1, -7), Vector2D(7, -1))
        >>> line.to_space(0.0).distance(Vector2D(3, -4)) < 1e-10
        True
    """

    def __init__(self, p1: Vector2D, p2: Vector2D, tolerance: float = DEFAULT_TOLERANCE):
        self.tolerance = tolerance

        dx = p2.x - p1.x
        dy = p2.y - p1.y
        d = math.hypot(dx, dy)
        if d == 0.0:
            self.angle = 0.0
            self.cos = 1.0
            self.sin = 0.0
            self.origin_offset = p1.y
        else:
            self.angle = _normalize_angle(math.pi + math.atan2(-dy, -dx))
            # Components taken from the points so axis-aligned lines get exact zeros
            self.cos = dx / d
            self.sin = dy / d
            self.origin_offset = (p2.x * p1.y - p1.x * p2.y) / d

    @classmethod
    def _from_parameters(cls, angle: float, cos: float, sin: float,
                         origin_offset: float, tolerance: float) -> "Line":
        line = cls.__new__(cls)
        line.angle = angle
        line.cos = cos
        line.sin = sin
        line.origin_offset = origin_offset
        line.tolerance = tolerance
        return line

    def __repr__(self) -> str:
        return (f"Line(angle={self.angle:.6g}, origin_offset={self.origin_offset:.6g}, "
                f"tolerance={self.tolerance})")

    @property
    def direction(self) -> Vector2D:
        """Unit direction vector."""
        return Vector2D(self.cos, self.sin)

    def to_sub_space(self, point: Vector2D) -> float:
        """Abscissa of the orthogonal projection of ``point`` on the line."""
        return self.cos * point.x + self.sin * point.y

    def to_space(self, abscissa: float) -> Vector2D:
        """Point of the line at the given abscissa.

        Infinite abscissas give points at infinity; a coordinate along which
        the line does not move stays finite.
        """
        o = self.origin_offset
        return Vector2D(_scale(abscissa, self.cos) - o * self.sin,
                        _scale(abscissa, self.sin) + o * self.cos)

    def intersection(self, other: "Line") -> Optional[Vector2D]:
        """Crossing point with another line, or ``None`` when parallel."""
        d = self.sin * other.cos - other.sin * self.cos
        if abs(d) < self.tolerance:
            return None
        return Vector2D((self.cos * other.origin_offset - other.cos * self.origin_offset) / d,
                        (self.sin * other.origin_offset - other.sin * self.origin_offset) / d)

    def get_offset(self, point: Vector2D) -> float:
        """Signed distance of ``point`` to the line.

        Positive on the right side when looking along the direction.
        """
        return self.sin * point.x - self.cos * point.y + self.origin_offset

    def contains(self, point: Vector2D) -> bool:
        return abs(self.get_offset(point)) < self.tolerance

    def distance(self, point: Vector2D) -> float:
        return abs(self.get_offset(point))

    def is_parallel_to(self, other: "Line") -> bool:
        """True for parallel or coincident lines, whatever their orientation."""
        return abs(self.sin * other.cos - self.cos * other.sin) < self.tolerance

    def reverse(self) -> "Line":
        """Same line with the opposite orientation."""
        return Line._from_parameters(_normalize_angle(self.angle + math.pi), -self.cos, -self.sin,
                                     -self.origin_offset, self.tolerance)

    def whole_hyperplane(self) -> "SubLine":
        """Sub-line covering the entire line."""
        from .subline import SubLine
        return SubLine(self, IntervalsSet.whole_line(self.tolerance))
