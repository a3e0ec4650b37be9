"""
Random initialization strategy for clustering algorithms.

Selects random points from the dataset as initial cluster centers.
"""

from typing import List, Optional
import torch

from ..base.interfaces import InitializationStrategy, P


class RandomInit(InitializationStrategy):
    """Random initialization by selecting points from the dataset.

    Selects n_clusters random positions (without replacement) as initial centers.
    """

    def initialize(self, points: List[P], n_clusters: int,
                   generator: Optional[torch.Generator] = None) -> List[int]:
        """Initialize clusters with random points.

        Args:
            points: Input points
            n_clusters: Number of clusters
            generator: Random source

        Returns:
            Positions of the chosen centers in ``points``
        """
        n_points = len(points)

        if n_clusters > n_points:
            raise ValueError(f"Cannot create {n_clusters} clusters from {n_points} points")

        indices = torch.randperm(n_points, generator=generator)[:n_clusters]
        return indices.tolist()
