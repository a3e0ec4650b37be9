"""
Builder pattern for configuring clusterers.

Provides a fluent interface for combining a seeding method, an empty-cluster
strategy and its policy points into a ready-to-use clusterer.
"""

from typing import Optional, Union
import torch

from ..base.interfaces import InitializationStrategy
from ..initialization import RandomInit, KMeansPlusPlusInit
from ..updates.empty_cluster import EmptyClusterStrategy, VarianceMeasure, TieBreak, as_enum
from .kmeans import KMeans
from .kmeans_plusplus import KMeansPlusPlusClusterer
from .multi_kmeans import MultiKMeansPlusPlusClusterer


class ClustererBuilder:
    """Fluent builder for creating clusterers.

    Examples
    --------
    >>> clusterer = (ClustererBuilder()
    ...     .with_random_state(42)
    ...     .with_empty_cluster_strategy('farthest_point')
    ...     .with_kmeans_plusplus_init()
    ...     .build())

    >>> # Largest-variance recovery measured as a mean, last maximum wins
    >>> clusterer = (ClustererBuilder()
    ...     .with_variance_measure(VarianceMeasure.MEAN_SQUARED)
    ...     .with_tie_break('last')
    ...     .build())
    """

    def __init__(self):
        """Initialize builder with defaults."""
        self._initialization_strategy: InitializationStrategy = KMeansPlusPlusInit()
        self._empty_cluster_strategy = EmptyClusterStrategy.LARGEST_VARIANCE
        self._variance_measure = VarianceMeasure.SUM_SQUARED
        self._tie_break = TieBreak.FIRST

        self._verbose = 0
        self._random_state = None

    def with_random_state(self, random_state: Optional[Union[int, torch.Generator]]) -> 'ClustererBuilder':
        """Set the seed or generator used for seeding."""
        self._random_state = random_state
        return self

    def with_empty_cluster_strategy(self, strategy: Union[EmptyClusterStrategy, str]) -> 'ClustererBuilder':
        """Set how empty clusters are refilled."""
        self._empty_cluster_strategy = as_enum(EmptyClusterStrategy, strategy)
        return self

    def with_variance_measure(self, measure: Union[VarianceMeasure, str]) -> 'ClustererBuilder':
        """Set the spread measure for largest-variance recovery."""
        self._variance_measure = as_enum(VarianceMeasure, measure)
        return self

    def with_tie_break(self, tie_break: Union[TieBreak, str]) -> 'ClustererBuilder':
        """Set which candidate wins ties during recovery."""
        self._tie_break = as_enum(TieBreak, tie_break)
        return self

    def with_kmeans_plusplus_init(self) -> 'ClustererBuilder':
        """Use K-means++ seeding."""
        self._initialization_strategy = KMeansPlusPlusInit()
        return self

    def with_random_init(self) -> 'ClustererBuilder':
        """Use uniform random seeding."""
        self._initialization_strategy = RandomInit()
        return self

    def with_initialization(self, strategy: InitializationStrategy) -> 'ClustererBuilder':
        """Use a custom initialization strategy."""
        if not isinstance(strategy, InitializationStrategy):
            raise TypeError(f"Expected InitializationStrategy, got {type(strategy)}")
        self._initialization_strategy = strategy
        return self

    def with_verbose(self, verbose: int) -> 'ClustererBuilder':
        """Set verbosity level."""
        self._verbose = verbose
        return self

    def build(self) -> KMeansPlusPlusClusterer:
        """Build the configured clusterer."""
        return KMeansPlusPlusClusterer(
            random_state=self._random_state,
            empty_cluster_strategy=self._empty_cluster_strategy,
            init=self._initialization_strategy,
            variance_measure=self._variance_measure,
            tie_break=self._tie_break,
            verbose=self._verbose
        )

    def build_multi(self, num_trials: int) -> MultiKMeansPlusPlusClusterer:
        """Build a best-of-``num_trials`` clusterer."""
        return MultiKMeansPlusPlusClusterer(self.build(), num_trials)

    def build_estimator(self, n_clusters: int, max_iter: int = 100, n_init: int = 1) -> KMeans:
        """Build an array-facing K-means estimator.

        Only the built-in seeding methods carry over to the estimator.
        """
        if isinstance(self._initialization_strategy, RandomInit):
            init = 'random'
        elif isinstance(self._initialization_strategy, KMeansPlusPlusInit):
            init = 'k-means++'
        else:
            raise ValueError("KMeans estimator supports only 'k-means++' and 'random' initialization")

        return KMeans(
            n_clusters=n_clusters,
            init=init,
            max_iter=max_iter,
            n_init=n_init,
            empty_cluster_strategy=self._empty_cluster_strategy,
            variance_measure=self._variance_measure,
            tie_break=self._tie_break,
            verbose=self._verbose,
            random_state=self._random_state
        )


def create_clusterer(empty_cluster_strategy: Union[EmptyClusterStrategy, str] = EmptyClusterStrategy.LARGEST_VARIANCE,
                     random_state: Optional[Union[int, torch.Generator]] = None,
                     init: str = 'k-means++',
                     verbose: int = 0) -> KMeansPlusPlusClusterer:
    """Create a clusterer with the given settings.

    Convenience function that uses the builder.
    """
    builder = (ClustererBuilder()
               .with_empty_cluster_strategy(empty_cluster_strategy)
               .with_random_state(random_state)
               .with_verbose(verbose))

    if init == 'k-means++':
        builder.with_kmeans_plusplus_init()
    elif init == 'random':
        builder.with_random_init()
    else:
        raise ValueError(f"Unknown init method: {init}")

    return builder.build()
