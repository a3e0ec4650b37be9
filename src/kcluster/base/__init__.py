"""Base classes and interfaces for the kcluster clustering engine."""

from .interfaces import (
    Clusterable,
    InitializationStrategy,
    ConvergenceCriterion
)

from .data_structures import (
    Cluster,
    AlgorithmState
)

from .exceptions import ConvergenceError

__all__ = [
    # Interfaces
    'Clusterable',
    'InitializationStrategy',
    'ConvergenceCriterion',

    # Data structures
    'Cluster',
    'AlgorithmState',

    # Errors
    'ConvergenceError'
]
