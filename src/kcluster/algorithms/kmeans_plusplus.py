"""
K-means++ clusterer for arbitrary clusterable points.

Seeds centers with k-means++ (or uniformly at random), then alternates
assignment and recentering steps until no point changes cluster or the
iteration budget is spent. Clusters that lose all their points are refilled
by a configurable empty-cluster strategy.
"""

from typing import Generic, List, Optional, Sequence, Union
import time
import warnings

import torch

from ..base.interfaces import InitializationStrategy, P
from ..base.data_structures import Cluster, AlgorithmState
from ..assignments.hard import HardAssignment
from ..initialization.kmeans_plusplus import KMeansPlusPlusInit
from ..initialization.random import RandomInit
from ..updates.centroid import CentroidUpdater
from ..updates.empty_cluster import EmptyClusterStrategy, VarianceMeasure, TieBreak
from ..utils.convergence import ChangeInAssignments
from ..utils.metrics import sum_of_squares
from ..utils.validation import (
    validate_points, check_n_clusters, check_max_iterations, check_random_state
)


class KMeansPlusPlusClusterer(Generic[P]):
    """Clustering engine with k-means++ seeding and Lloyd refinement.

    Parameters
    ----------
    random_state : int, torch.Generator or None, default=None
        Random source for seeding. An int seeds a private generator, a
        generator is used as is, None uses the torch global RNG.
    empty_cluster_strategy : EmptyClusterStrategy or str, default=LARGEST_VARIANCE
        How to refill clusters that become empty during refinement.
    init : str or InitializationStrategy, default='k-means++'
        Seeding method:
        - 'k-means++' : K-means++ seeding
        - 'random' : uniform seeding without replacement
    variance_measure : VarianceMeasure or str, default=SUM_SQUARED
        Spread measure for the LARGEST_VARIANCE strategy.
    tie_break : TieBreak or str, default=FIRST
        Which candidate wins ties in the recovery strategies.
    verbose : int, default=0
        Verbosity level (0=silent, 1=summary, 2=per iteration)

    Attributes
    ----------
    history_ : list of AlgorithmState
        One record per round of the last ``cluster`` call
    n_iter_ : int
        Number of refinement rounds run by the last call
    converged_ : bool
        Whether the last call stopped because assignments were stable
    labels_ : Tensor of shape (n_samples,)
        Final cluster index of every input point

    Notes
    -----
    Each ``cluster`` call uses its own working state, but the generator is
    shared mutable state: calling one instance from several threads needs
    external synchronization.
    """

    def __init__(self,
                 random_state: Optional[Union[int, torch.Generator]] = None,
                 empty_cluster_strategy: Union[EmptyClusterStrategy, str] = EmptyClusterStrategy.LARGEST_VARIANCE,
                 init: Union[str, InitializationStrategy] = 'k-means++',
                 variance_measure: Union[VarianceMeasure, str] = VarianceMeasure.SUM_SQUARED,
                 tie_break: Union[TieBreak, str] = TieBreak.FIRST,
                 verbose: int = 0):
        self.random_state = random_state
        self.generator = check_random_state(random_state)
        self.init = init
        self.verbose = verbose

        self.initialization_strategy = self._create_initialization(init)
        self.assignment_strategy = HardAssignment()
        self.update_strategy = CentroidUpdater(
            empty_cluster_strategy=empty_cluster_strategy,
            variance_measure=variance_measure,
            tie_break=tie_break
        )

        self.history_: List[AlgorithmState] = []
        self.n_iter_ = 0
        self.converged_ = False
        self.labels_ = None

    @staticmethod
    def _create_initialization(init) -> InitializationStrategy:
        if isinstance(init, InitializationStrategy):
            return init
        if init == 'k-means++':
            return KMeansPlusPlusInit()
        elif init == 'random':
            return RandomInit()
        raise ValueError(f"Unknown init method: {init}")

    @property
    def empty_cluster_strategy(self) -> EmptyClusterStrategy:
        return self.update_strategy.empty_cluster_strategy

    @property
    def variance_measure(self) -> VarianceMeasure:
        return self.update_strategy.variance_measure

    @property
    def tie_break(self) -> TieBreak:
        return self.update_strategy.tie_break

    def cluster(self, points: Sequence[P], k: int, max_iterations: int) -> List[Cluster[P]]:
        """Partition points into k clusters.

        Args:
            points: Non-empty sequence of clusterable points
            k: Number of clusters, at most the number of distinct points
            max_iterations: Maximum refinement rounds; 0 only seeds and
                assigns each point to its nearest seed

        Returns:
            k clusters in seed order

        Raises:
            ValueError: On empty input, non-positive k, k larger than the
                number of distinct points, or negative max_iterations
            TypeError: On non-integer k / max_iterations or non-clusterable points
            ConvergenceError: If an empty cluster cannot be refilled
        """
        points = validate_points(points)
        check_n_clusters(k, len(points), n_distinct=len(set(points)))
        check_max_iterations(max_iterations)

        start_time = time.time()
        if self.verbose:
            print(f"Initializing {k} clusters from {len(points)} points...")

        seeds = self.initialization_strategy.initialize(points, k, generator=self.generator)
        centers = [points[i] for i in seeds]

        labels = self.assignment_strategy.compute_assignments(points, centers)
        members = self._members(labels, k)

        convergence = ChangeInAssignments(min_change_fraction=0.0)
        convergence.check({'iteration': 0, 'assignments': labels})

        self.history_ = [self._record(0, len(points), 0, points, centers, members)]
        self.n_iter_ = 0
        self.converged_ = False

        for iteration in range(1, max_iterations + 1):
            iter_start_time = time.time()

            recovered = self.update_strategy.update(points, centers, members, labels)
            self.n_iter_ = iteration

            if iteration == max_iterations:
                # Stop on a recentering so centers match membership
                state = self._record(iteration, 0, recovered, points, centers, members)
                state.metadata['reassigned'] = False
                self.history_.append(state)
                break

            new_labels = self.assignment_strategy.compute_assignments(points, centers)
            n_changed = (new_labels != labels).sum().item()
            labels = new_labels
            members = self._members(labels, k)

            self.converged_ = convergence.check({
                'iteration': iteration,
                'assignments': labels,
                'recovered': recovered
            })
            state = self._record(iteration, n_changed, recovered, points, centers, members)
            state.converged = self.converged_
            self.history_.append(state)

            if self.verbose >= 2:
                print(f"Iteration {iteration:3d}: changed = {n_changed}, recovered = {recovered}, "
                      f"inertia = {state.inertia:.6f} ({time.time() - iter_start_time:.3f}s)")

            if self.converged_:
                if self.verbose:
                    print(f"Converged at iteration {iteration}")
                break

        if self.verbose:
            if max_iterations > 0 and not self.converged_:
                warnings.warn(f"Failed to converge after {max_iterations} iterations")
            print(f"Total clustering time: {time.time() - start_time:.3f}s")

        self.labels_ = labels
        return [
            Cluster(center=centers[c], points=[points[i] for i in members[c]])
            for c in range(k)
        ]

    @staticmethod
    def _members(labels: torch.Tensor, k: int) -> List[List[int]]:
        """Member positions per cluster, in input order."""
        members: List[List[int]] = [[] for _ in range(k)]
        for position, label in enumerate(labels.tolist()):
            members[label].append(position)
        return members

    @staticmethod
    def _record(iteration: int, n_changed: int, recovered: int,
                points: Sequence, centers: List, members: List[List[int]]) -> AlgorithmState:
        inertia = sum(
            sum_of_squares(centers[c], [points[i] for i in member_positions])
            for c, member_positions in enumerate(members)
        )
        return AlgorithmState(
            iteration=iteration,
            n_changed=n_changed,
            recovered=recovered,
            inertia=inertia
        )

    def get_params(self, deep: bool = True) -> dict:
        """Get parameters (sklearn compatibility)."""
        return {
            'random_state': self.random_state,
            'empty_cluster_strategy': self.empty_cluster_strategy,
            'init': self.init,
            'variance_measure': self.variance_measure,
            'tie_break': self.tie_break,
            'verbose': self.verbose
        }

    def __repr__(self) -> str:
        return (f"KMeansPlusPlusClusterer(empty_cluster_strategy={self.empty_cluster_strategy.name}, "
                f"init={self.init!r})")
