"""
Distance and quality metrics for clustering results.

Point-level functions work with any clusterable point type through its own
``distance_from``; the tensor variants serve the array-facing estimator.
"""

from typing import Optional, Sequence
import torch
from torch import Tensor

from ..base.data_structures import Cluster


def pairwise_distances(points: Sequence, others: Optional[Sequence] = None,
                       squared: bool = False) -> Tensor:
    """Compute the distance matrix between two sequences of points.

    Args:
        points: n points
        others: m points (``points`` when None)
        squared: Whether to return squared distances

    Returns:
        (n, m) float64 tensor
    """
    if others is None:
        others = points
    distances = torch.tensor(
        [[p.distance_from(q) for q in others] for p in points],
        dtype=torch.float64
    ).reshape(len(points), len(others))
    return distances ** 2 if squared else distances


def sum_of_squares(center, points: Sequence) -> float:
    """Sum of squared distances from points to a center."""
    total = 0.0
    for point in points:
        d = point.distance_from(center)
        total += d * d
    return total


def mean_squared_distance(center, points: Sequence) -> float:
    """Mean squared distance from points to a center (0.0 for no points)."""
    if not points:
        return 0.0
    return sum_of_squares(center, points) / len(points)


def distance_variance(center, points: Sequence) -> float:
    """Unbiased sample variance of the point-to-center distances.

    Fewer than two points have no spread and give 0.0.
    """
    if len(points) < 2:
        return 0.0
    distances = torch.tensor([p.distance_from(center) for p in points], dtype=torch.float64)
    return distances.var().item()


def cluster_inertia(clusters: Sequence[Cluster]) -> float:
    """Within-cluster sum of squares over a list of clusters."""
    return sum(sum_of_squares(c.center, c.points) for c in clusters)


def inertia(X: Tensor, labels: Tensor, centers: Tensor) -> float:
    """Compute sum of squared distances to nearest centers (inertia).

    Args:
        X: (n, d) data points
        labels: (n,) cluster labels
        centers: (k, d) cluster centers

    Returns:
        Total inertia (lower is better)
    """
    total = 0.0
    n_clusters = centers.shape[0]

    for k in range(n_clusters):
        mask = labels == k
        if mask.sum() > 0:
            cluster_points = X[mask]
            distances = torch.sum((cluster_points - centers[k]) ** 2, dim=1)
            total += distances.sum().item()

    return total
