"""
Input validation and preprocessing utilities.

Provides functions for validating clustering inputs before any work is done.
"""

from typing import Optional, Union, List, Sequence
import torch
from torch import Tensor
import numpy as np

from ..base.interfaces import Clusterable


def validate_data(X: Union[Tensor, np.ndarray, list],
                  dtype: torch.dtype = torch.float64,
                  ensure_2d: bool = True,
                  ensure_finite: bool = True,
                  ensure_min_samples: int = 1) -> Tensor:
    """Validate and convert input data to tensor.

    Args:
        X: Input data (tensor, numpy array, or list)
        dtype: Target data type
        ensure_2d: Whether to ensure 2D shape
        ensure_finite: Whether to check for inf/nan
        ensure_min_samples: Minimum number of samples required

    Returns:
        Validated tensor on the CPU

    Raises:
        ValueError: If validation fails
    """
    if isinstance(X, Tensor):
        X = X.detach().to(dtype=dtype, device='cpu')
    elif isinstance(X, np.ndarray):
        X = torch.from_numpy(X).to(dtype=dtype)
    elif isinstance(X, (list, tuple)):
        X = torch.tensor(X, dtype=dtype)
    else:
        raise TypeError(f"Cannot convert {type(X)} to tensor")

    if ensure_2d:
        if X.dim() == 1:
            X = X.unsqueeze(1)
        elif X.dim() != 2:
            raise ValueError(f"Expected 2D array, got {X.dim()}D")

        n_samples = X.shape[0]
        if n_samples < ensure_min_samples:
            raise ValueError(f"Found {n_samples} samples, but need at least "
                             f"{ensure_min_samples}")

    if ensure_finite:
        if torch.isnan(X).any():
            raise ValueError("Input contains NaN values")
        if torch.isinf(X).any():
            raise ValueError("Input contains infinite values")

    return X


def validate_points(points: Sequence) -> List:
    """Check that points form a non-empty sequence of clusterable values.

    Returns:
        The points as a list (input order preserved)
    """
    if points is None:
        raise ValueError("points must not be None")
    points = list(points)
    if not points:
        raise ValueError("Cannot cluster an empty collection of points")
    if not isinstance(points[0], Clusterable):
        raise TypeError(f"{type(points[0]).__name__} does not implement distance_from/centroid_of")
    return points


def check_n_clusters(n_clusters: int, n_samples: int,
                     n_distinct: Optional[int] = None) -> None:
    """Validate number of clusters.

    Args:
        n_clusters: Number of clusters
        n_samples: Number of samples
        n_distinct: Number of distinct samples, if known

    Raises:
        TypeError: If n_clusters is not an int
        ValueError: If invalid
    """
    if isinstance(n_clusters, bool) or not isinstance(n_clusters, int):
        raise TypeError(f"n_clusters must be int, got {type(n_clusters)}")

    if n_clusters <= 0:
        raise ValueError(f"n_clusters must be positive, got {n_clusters}")

    if n_clusters > n_samples:
        raise ValueError(f"n_clusters ({n_clusters}) cannot be larger than "
                         f"n_samples ({n_samples})")

    if n_distinct is not None and n_clusters > n_distinct:
        raise ValueError(f"n_clusters ({n_clusters}) cannot be larger than the "
                         f"number of distinct points ({n_distinct})")


def check_max_iterations(max_iterations: int) -> None:
    """Validate an iteration budget; 0 is allowed (seeding only)."""
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, int):
        raise TypeError(f"max_iterations must be int, got {type(max_iterations)}")
    if max_iterations < 0:
        raise ValueError(f"max_iterations must be non-negative, got {max_iterations}")


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> Optional[torch.Generator]:
    """Create generator from random state.

    Args:
        random_state: Seed or generator

    Returns:
        Generator or None
    """
    if random_state is None:
        return None
    elif isinstance(random_state, bool):
        raise TypeError("random_state must be int or Generator, got bool")
    elif isinstance(random_state, (int, np.integer)):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    elif isinstance(random_state, torch.Generator):
        return random_state
    else:
        raise TypeError(f"random_state must be int or Generator, got {type(random_state)}")

