"""
Best-of-N wrapper around the k-means++ clusterer.

K-means++ seeding is randomized, so a single run can settle in a poor local
optimum. Running several trials and keeping the best-scoring partition makes
the result far less sensitive to the seed.
"""

from typing import Callable, List, Optional, Sequence

from ..base.data_structures import Cluster
from ..base.interfaces import P
from ..utils.metrics import cluster_inertia
from .kmeans_plusplus import KMeansPlusPlusClusterer


class MultiKMeansPlusPlusClusterer:
    """Run a clusterer several times and keep the lowest-scoring result.

    Args:
        clusterer: Underlying clusterer; its generator advances across trials
        num_trials: Number of independent runs
        evaluator: Score of a list of clusters, lower is better
            (within-cluster sum of squares by default)
    """

    def __init__(self, clusterer: KMeansPlusPlusClusterer, num_trials: int,
                 evaluator: Optional[Callable[[List[Cluster]], float]] = None):
        if num_trials < 1:
            raise ValueError(f"num_trials must be at least 1, got {num_trials}")
        self.clusterer = clusterer
        self.num_trials = num_trials
        self.evaluator = evaluator or cluster_inertia
        self.best_score_ = None
        self.scores_: List[float] = []
        self.n_iter_ = 0

    def cluster(self, points: Sequence[P], k: int, max_iterations: int) -> List[Cluster[P]]:
        """Cluster ``num_trials`` times and return the best partition."""
        best = None
        self.scores_ = []
        for trial in range(self.num_trials):
            clusters = self.clusterer.cluster(points, k, max_iterations)
            score = self.evaluator(clusters)
            self.scores_.append(score)
            if best is None or score < self.best_score_:
                best, self.best_score_ = clusters, score
                self.n_iter_ = self.clusterer.n_iter_

            if self.clusterer.verbose >= 2:
                print(f"Trial {trial:3d}: score = {score:.6f}")

        return best
