"""Clustering algorithm implementations."""

from .kmeans_plusplus import KMeansPlusPlusClusterer
from .multi_kmeans import MultiKMeansPlusPlusClusterer
from .kmeans import KMeans
from .builder import ClustererBuilder, create_clusterer

__all__ = [
    'KMeansPlusPlusClusterer',
    'MultiKMeansPlusPlusClusterer',
    'KMeans',
    'ClustererBuilder',
    'create_clusterer'
]
