"""
Core data structures for the clustering engine.

This module provides the containers returned to callers (clusters) and the
per-iteration records kept for convergence checking and debugging.
"""

from typing import Generic, List, Dict, Any
from dataclasses import dataclass, field

from .interfaces import P


@dataclass
class Cluster(Generic[P]):
    """A cluster center together with the points assigned to it.

    Clusters returned by the clusterer always satisfy
    ``center == center.centroid_of(points)`` for the last recentering,
    unless no refinement was requested (then the center is the seed).
    """

    center: P
    points: List[P] = field(default_factory=list)

    @property
    def size(self) -> int:
        """Number of member points."""
        return len(self.points)

    def is_empty(self) -> bool:
        return not self.points

    def __repr__(self) -> str:
        return f"Cluster(center={self.center!r}, size={self.size})"


@dataclass
class AlgorithmState:
    """State of a clustering run at a given iteration.

    Used for convergence checking and debugging.
    """
    iteration: int
    n_changed: int
    recovered: int
    inertia: float

    converged: bool = False
    metadata: Dict[str, Any] = field(default_factory=dict)
