"""Center update strategies for clustering algorithms."""

from .centroid import CentroidUpdater
from .empty_cluster import (
    EmptyClusterStrategy,
    VarianceMeasure,
    TieBreak,
    as_enum,
    select_donor,
    farthest_member,
    largest_variance_donor,
    largest_points_number_donor,
    farthest_point_donor
)

__all__ = [
    'CentroidUpdater',
    'EmptyClusterStrategy',
    'VarianceMeasure',
    'TieBreak',
    'as_enum',
    'select_donor',
    'farthest_member',
    'largest_variance_donor',
    'largest_points_number_donor',
    'farthest_point_donor'
]
