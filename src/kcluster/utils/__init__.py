"""Utility functions for the kcluster engine."""

from .convergence import ChangeInAssignments

from .metrics import (
    pairwise_distances,
    sum_of_squares,
    mean_squared_distance,
    distance_variance,
    cluster_inertia,
    inertia
)

from .validation import (
    validate_data,
    validate_points,
    check_n_clusters,
    check_max_iterations,
    check_random_state
)

__all__ = [
    # Convergence criteria
    'ChangeInAssignments',

    # Metrics
    'pairwise_distances',
    'sum_of_squares',
    'mean_squared_distance',
    'distance_variance',
    'cluster_inertia',
    'inertia',

    # Validation
    'validate_data',
    'validate_points',
    'check_n_clusters',
    'check_max_iterations',
    'check_random_state'
]
