"""
Immutable 2D vector type.

Coordinates are plain floats and may be infinite; points at infinity are how
unbounded segment ends are represented.
"""

from dataclasses import dataclass
from typing import Tuple
import math


@dataclass(frozen=True)
class Vector2D:
    """2D point or displacement."""
    x: float
    y: float

    def add(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x + other.x, self.y + other.y)

    def subtract(self, other: "Vector2D") -> "Vector2D":
        return Vector2D(self.x - other.x, self.y - other.y)

    def scalar_multiply(self, factor: float) -> "Vector2D":
        return Vector2D(self.x * factor, self.y * factor)

    def dot(self, other: "Vector2D") -> float:
        return self.x * other.x + self.y * other.y

    @property
    def norm(self) -> float:
        return math.hypot(self.x, self.y)

    def distance(self, other: "Vector2D") -> float:
        """Compute Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_infinite(self) -> bool:
        """True if any coordinate is infinite (and none is NaN)."""
        return not self.is_nan() and (math.isinf(self.x) or math.isinf(self.y))

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    def as_tuple(self) -> Tuple[float, float]:
        """Return coordinates as a tuple."""
        return (self.x, self.y)
