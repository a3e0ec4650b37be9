"""
K-means++ initialization strategy.

Selects initial cluster centers using the K-means++ algorithm, which chooses
centers that are far apart to improve convergence speed and quality.
"""

from typing import List, Optional
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy, P


def _squared_distances_to(points: List[P], positions: List[int], center: P) -> Tensor:
    """Squared distances from the points at ``positions`` to ``center``."""
    return torch.tensor(
        [points[i].distance_from(center) for i in positions],
        dtype=torch.float64
    ) ** 2


class KMeansPlusPlusInit(InitializationStrategy):
    """K-means++ initialization for better starting positions.

    Algorithm:
    1. Choose first center uniformly at random
    2. For each remaining center:
       - Compute distance from each unchosen point to nearest chosen center
       - Choose next center with probability proportional to squared distance

    A chosen input position leaves the candidate pool, so it cannot be
    chosen again. When all remaining candidates coincide with chosen centers
    (zero total weight) the first remaining candidate is taken.
    """

    def initialize(self, points: List[P], n_clusters: int,
                   generator: Optional[torch.Generator] = None) -> List[int]:
        """Initialize cluster centers using K-means++.

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

        candidates = list(range(n_points))

        # Choose first center uniformly at random
        first_idx = torch.randint(n_points, (1,), generator=generator).item()
        center_indices = [candidates.pop(first_idx)]

        # Squared distance of every candidate to its nearest chosen center
        distances = _squared_distances_to(points, candidates, points[center_indices[0]])

        while len(center_indices) < n_clusters:
            total = distances.sum().item()
            if total > 0:
                pick = torch.multinomial(distances, 1, generator=generator).item()
            else:
                pick = 0

            center_indices.append(candidates.pop(pick))
            distances = torch.cat([distances[:pick], distances[pick + 1:]])

            new_center_distances = _squared_distances_to(points, candidates, points[center_indices[-1]])
            distances = torch.minimum(distances, new_center_distances)

        return center_indices
