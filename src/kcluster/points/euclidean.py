"""
Euclidean point types.

The simplest clusterable points: fixed-length coordinate tuples compared
with the Euclidean distance. Both types are immutable and hashable so they
can be counted and looked up in member sets.
"""

import math
from dataclasses import dataclass
from typing import Collection, Iterable, Tuple

import torch


def _check_same_dimension(points: Collection["_EuclideanPoint"]) -> int:
    """Validate a non-empty collection of points and return its dimension."""
    if not points:
        raise ValueError("Cannot compute the centroid of an empty collection")
    dims = {p.dimension for p in points}
    if len(dims) != 1:
        raise ValueError(f"Points have mixed dimensions: {sorted(dims)}")
    return dims.pop()


@dataclass(frozen=True)
class _EuclideanPoint:
    coordinates: Tuple

    @property
    def dimension(self) -> int:
        return len(self.coordinates)

    def distance_from(self, other: "_EuclideanPoint") -> float:
        """Euclidean distance to another point of the same dimension."""
        if other.dimension != self.dimension:
            raise ValueError(f"Dimension mismatch: {self.dimension} vs {other.dimension}")
        return math.dist(self.coordinates, other.coordinates)

    def __len__(self) -> int:
        return len(self.coordinates)

    def __iter__(self):
        return iter(self.coordinates)

    def __getitem__(self, index):
        return self.coordinates[index]


@dataclass(frozen=True)
class EuclideanIntegerPoint(_EuclideanPoint):
    """Point with integer coordinates.

    The centroid is computed with integer division truncated toward zero, so
    it is itself an integer point (and may not be the exact mean).

    Example:
        >>> EuclideanIntegerPoint((1, 2)).distance_from(EuclideanIntegerPoint((4, 6)))
        5.0
    """
    coordinates: Tuple[int, ...]

    def __init__(self, coordinates: Iterable[int]):
        object.__setattr__(self, 'coordinates', tuple(int(c) for c in coordinates))

    def centroid_of(self, points: Collection["EuclideanIntegerPoint"]) -> "EuclideanIntegerPoint":
        """Per-coordinate sum divided by the count, truncated toward zero."""
        dimension = _check_same_dimension(points)
        n = len(points)
        sums = [0] * dimension
        for point in points:
            for i, c in enumerate(point.coordinates):
                sums[i] += c
        # Python's // floors; truncate toward zero instead
        return EuclideanIntegerPoint(
            -(-s // n) if s < 0 else s // n for s in sums
        )


@dataclass(frozen=True)
class EuclideanDoublePoint(_EuclideanPoint):
    """Point with floating point coordinates; the centroid is the mean."""
    coordinates: Tuple[float, ...]

    def __init__(self, coordinates: Iterable[float]):
        object.__setattr__(self, 'coordinates', tuple(float(c) for c in coordinates))

    def centroid_of(self, points: Collection["EuclideanDoublePoint"]) -> "EuclideanDoublePoint":
        """Arithmetic mean of the points."""
        _check_same_dimension(points)
        stacked = torch.tensor([p.coordinates for p in points], dtype=torch.float64)
        return EuclideanDoublePoint(stacked.mean(dim=0).tolist())

    def to_tensor(self, dtype: torch.dtype = torch.float64) -> torch.Tensor:
        """Coordinates as a 1D tensor."""
        return torch.tensor(self.coordinates, dtype=dtype)
