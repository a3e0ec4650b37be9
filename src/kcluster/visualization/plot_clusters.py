"""
Cluster visualization utilities.

Provides functions for visualizing 2D clustering results, either from the
clusters returned by a clusterer or from a fitted KMeans estimator.
"""

from typing import Optional, Sequence, List, Any
import torch
import matplotlib.pyplot as plt
import numpy as np

from ..base.data_structures import Cluster


def _coordinates(points: Sequence[Any]) -> np.ndarray:
    """Stack point coordinates into an (n, d) float array."""
    return np.asarray([list(p) for p in points], dtype=np.float64).reshape(len(points), -1)


def plot_clusters_2d(clusters: Sequence[Cluster],
                    ax: Optional[plt.Axes] = None,
                    colors: Optional[List[str]] = None,
                    alpha: float = 0.7,
                    center_marker: str = 'X',
                    center_size: int = 200,
                    point_size: int = 50,
                    show_centers: bool = True,
                    show_legend: bool = True,
                    title: Optional[str] = None) -> plt.Axes:
    """Plot 2D clustering results.

    Args:
        clusters: Clusters of iterable 2D points (e.g. EuclideanDoublePoint)
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        center_marker: Marker for centers
        center_size: Size of center markers
        point_size: Size of data points
        show_centers: Whether to mark cluster centers
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    n_clusters = len(clusters)

    if colors is None:
        cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
        colors = [cmap(i / max(n_clusters, 1)) for i in range(n_clusters)]

    for i, cluster in enumerate(clusters):
        if cluster.is_empty():
            continue
        coords = _coordinates(cluster.points)
        if coords.shape[1] != 2:
            raise ValueError(f"plot_clusters_2d needs 2D points, got dimension {coords.shape[1]}")
        ax.scatter(coords[:, 0], coords[:, 1],
                  c=[colors[i % len(colors)]],
                  s=point_size,
                  alpha=alpha,
                  edgecolors='black',
                  linewidth=0.5,
                  label=f'Cluster {i} ({cluster.size})')

    if show_centers and n_clusters > 0:
        centers = _coordinates([cluster.center for cluster in clusters])
        ax.scatter(centers[:, 0], centers[:, 1],
                  c='black',
                  marker=center_marker,
                  s=center_size,
                  edgecolors='white',
                  linewidth=2,
                  label='Centers',
                  zorder=10)

    ax.set_xlabel('Feature 1')
    ax.set_ylabel('Feature 2')

    if title:
        ax.set_title(title)

    if show_legend and n_clusters > 0:
        ax.legend()

    return ax


def plot_cluster_boundaries(X: torch.Tensor,
                          model: Any,
                          ax: Optional[plt.Axes] = None,
                          resolution: int = 100,
                          alpha: float = 0.3,
                          show_centers: bool = True,
                          title: Optional[str] = None) -> plt.Axes:
    """Plot nearest-center regions of a fitted estimator.

    Args:
        X: (n, 2) data points
        model: Fitted model with predict method (e.g. KMeans)
        ax: Matplotlib axes
        resolution: Grid resolution
        alpha: Boundary transparency
        show_centers: Whether to show centers
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=(10, 8))

    X_np = torch.as_tensor(X, dtype=torch.float64).cpu().numpy()

    # Create mesh grid
    x_min, x_max = X_np[:, 0].min() - 0.5, X_np[:, 0].max() + 0.5
    y_min, y_max = X_np[:, 1].min() - 0.5, X_np[:, 1].max() + 0.5

    xx, yy = np.meshgrid(np.linspace(x_min, x_max, resolution),
                        np.linspace(y_min, y_max, resolution))

    mesh_points = torch.tensor(np.c_[xx.ravel(), yy.ravel()], dtype=torch.float64)
    Z = model.predict(mesh_points).cpu().numpy().reshape(xx.shape)

    ax.contourf(xx, yy, Z, alpha=alpha, cmap='viridis')

    labels = model.predict(X_np).cpu().numpy()
    ax.scatter(X_np[:, 0], X_np[:, 1], c=labels, cmap='viridis',
              s=30, edgecolors='black', linewidth=0.5)

    if show_centers and getattr(model, 'cluster_centers_', None) is not None:
        centers_np = model.cluster_centers_.cpu().numpy()
        ax.scatter(centers_np[:, 0], centers_np[:, 1],
                  c='red',
                  marker='X',
                  s=300,
                  edgecolors='white',
                  linewidth=2,
                  zorder=10)

    ax.set_xlabel('Feature 1')
    ax.set_ylabel('Feature 2')
    ax.set_title(title or 'Cluster Decision Boundaries')

    return ax
