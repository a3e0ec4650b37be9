"""
kcluster: k-means++ clustering with empty-cluster recovery, and sub-line geometry.

This package provides:
- A generic k-means++ clusterer over any point type that can measure
  distances and compute centroids
- Configurable recovery of clusters that become empty during refinement
- A tensor-facing KMeans estimator
- Oriented 2D lines restricted to interval regions (sub-lines), with
  segment extraction and intersection

Example usage:
    >>> from kcluster import KMeansPlusPlusClusterer, EuclideanIntegerPoint
    >>>
    >>> points = [EuclideanIntegerPoint((x, y)) for x, y in [(0, 0), (0, 1), (9, 9), (9, 8)]]
    >>> clusterer = KMeansPlusPlusClusterer(random_state=0)
    >>> clusters = clusterer.cluster(points, k=2, max_iterations=10)
    >>> sorted(c.size for c in clusters)
    [2, 2]
"""

__version__ = '0.1.0'

# Import main algorithms
from .algorithms.kmeans_plusplus import KMeansPlusPlusClusterer
from .algorithms.multi_kmeans import MultiKMeansPlusPlusClusterer
from .algorithms.kmeans import KMeans
from .algorithms.builder import ClustererBuilder, create_clusterer

# Point types and recovery policies
from .points import EuclideanIntegerPoint, EuclideanDoublePoint
from .updates.empty_cluster import EmptyClusterStrategy, VarianceMeasure, TieBreak

# Geometry
from .geometry import (
    Vector2D,
    Line,
    Interval,
    IntervalsSet,
    Location,
    Segment,
    SubLine
)

# Import visualization
from .visualization import (
    plot_clusters_2d,
    plot_cluster_boundaries,
    plot_segments
)

# Convenience imports
from .base import (
    Clusterable,
    Cluster,
    AlgorithmState,
    InitializationStrategy,
    ConvergenceError
)

__all__ = [
    # Algorithms
    'KMeansPlusPlusClusterer',
    'MultiKMeansPlusPlusClusterer',
    'KMeans',

    # Builder
    'ClustererBuilder',
    'create_clusterer',

    # Points and policies
    'EuclideanIntegerPoint',
    'EuclideanDoublePoint',
    'EmptyClusterStrategy',
    'VarianceMeasure',
    'TieBreak',

    # Core data structures
    'Clusterable',
    'Cluster',
    'AlgorithmState',
    'InitializationStrategy',
    'ConvergenceError',

    # Geometry
    'Vector2D',
    'Line',
    'Interval',
    'IntervalsSet',
    'Location',
    'Segment',
    'SubLine',

    # Visualization
    'plot_clusters_2d',
    'plot_cluster_boundaries',
    'plot_segments',

    # Version
    '__version__'
]
