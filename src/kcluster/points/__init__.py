"""Clusterable point types."""

from .euclidean import EuclideanIntegerPoint, EuclideanDoublePoint

__all__ = [
    'EuclideanIntegerPoint',
    'EuclideanDoublePoint'
]
