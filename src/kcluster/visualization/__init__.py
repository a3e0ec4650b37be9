"""Visualization utilities for clustering results and sub-lines."""

from .plot_clusters import (
    plot_clusters_2d,
    plot_cluster_boundaries
)
from .plot_geometry import plot_segments

__all__ = [
    'plot_clusters_2d',
    'plot_cluster_boundaries',
    'plot_segments'
]
