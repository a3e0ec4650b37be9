"""
Hard assignment strategy for clustering algorithms.

Assigns each point to its nearest cluster center based on the point type's
own distance function.
"""

from typing import List, Sequence
import torch
from torch import Tensor

from ..utils.metrics import pairwise_distances


class HardAssignment:
    """Hard (discrete) assignment to nearest cluster.

    Each point is assigned to exactly one cluster based on minimum distance.
    Ties go to the cluster that comes first in center order.
    """

    def compute_assignments(self, points: Sequence, centers: List) -> Tensor:
        """Assign each point to nearest cluster.

        Args:
            points: n data points
            centers: k cluster centers

        Returns:
            (n,) long tensor of cluster indices
        """
        if not centers:
            raise ValueError("Cannot assign points without cluster centers")

        distances = pairwise_distances(points, centers)

        # argmin returns the first minimal index on ties
        return torch.argmin(distances, dim=1)
