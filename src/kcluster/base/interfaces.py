"""
Core interfaces for the kcluster clustering engine.

Points are described structurally: anything that can measure its distance
to a peer and reduce a collection of peers to a centroid can be clustered.
Pluggable components (seeding, convergence) keep the abstract base class
style of the rest of the framework.
"""

from abc import ABC, abstractmethod
from typing import Any, Collection, Dict, List, Optional, Protocol, TypeVar, runtime_checkable

import torch


P = TypeVar('P', bound='Clusterable')


@runtime_checkable
class Clusterable(Protocol):
    """Structural type for points that can be clustered.

    Implementations must satisfy:
    - ``a.distance_from(b) == b.distance_from(a) >= 0``
    - ``a.distance_from(a) == 0``
    - ``a.centroid_of([a])`` is equal to ``a``

    Points must also be hashable with value equality so that distinct points
    can be counted during validation.
    """

    def distance_from(self, other: Any) -> float:
        """Distance between this point and ``other``."""
        ...

    def centroid_of(self, points: Collection[Any]) -> Any:
        """Representative point of a non-empty collection of points."""
        ...


class InitializationStrategy(ABC):
    """Abstract base class for choosing initial cluster centers."""

    @abstractmethod
    def initialize(self, points: List[P], n_clusters: int,
                   generator: Optional[torch.Generator] = None) -> List[int]:
        """Choose initial centers.

        Args:
            points: Input points
            n_clusters: Number of centers to choose
            generator: Random source (torch global RNG when None)

        Returns:
            Positions in ``points`` of the chosen centers, in choice order
        """
        pass


class ConvergenceCriterion(ABC):
    """Abstract base class for convergence checking."""

    def __init__(self):
        self.history = []

    @abstractmethod
    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if algorithm has converged.

        Args:
            current_state: Dictionary containing current algorithm state

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []
