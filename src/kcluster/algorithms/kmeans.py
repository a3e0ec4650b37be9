"""
K-means estimator for array data.

Array-facing front end of the k-means++ clusterer: rows of a tensor or
array become Euclidean points, and results come back as tensors.
"""

from typing import Optional, List, Union
import torch
from torch import Tensor
import numpy as np

from ..base.data_structures import Cluster
from ..updates.empty_cluster import EmptyClusterStrategy, VarianceMeasure, TieBreak
from ..utils.metrics import inertia
from ..points import EuclideanDoublePoint
from ..utils.validation import validate_data
from .kmeans_plusplus import KMeansPlusPlusClusterer
from .multi_kmeans import MultiKMeansPlusPlusClusterer


class KMeans:
    """K-means clustering algorithm.

    Partitions data into K clusters by minimizing within-cluster sum of
    squared distances, seeded with k-means++ and refilling empty clusters
    with the chosen strategy.

    Parameters
    ----------
    n_clusters : int
        Number of clusters
    init : str, default='k-means++'
        Initialization method:
        - 'k-means++' : K-means++ initialization
        - 'random' : Random initialization
    max_iter : int, default=100
        Maximum number of refinement rounds
    n_init : int, default=1
        Number of seeded runs; the one with the lowest inertia is kept
    empty_cluster_strategy : EmptyClusterStrategy or str, default=LARGEST_VARIANCE
        How to refill clusters that become empty
    variance_measure : VarianceMeasure or str, default=SUM_SQUARED
        Spread measure for the LARGEST_VARIANCE strategy
    tie_break : TieBreak or str, default=FIRST
        Which candidate wins ties during recovery
    verbose : int, default=0
        Verbosity level
    random_state : int or torch.Generator, optional
        Random seed for reproducibility

    Attributes
    ----------
    cluster_centers_ : Tensor of shape (n_clusters, n_features)
        Cluster centroids
    labels_ : Tensor of shape (n_samples,)
        Cluster assignments for training data
    inertia_ : float
        Sum of squared distances to the assigned cluster center
    n_iter_ : int
        Number of iterations run
    clusters_ : list of Cluster
        The underlying clusters of EuclideanDoublePoint
    """

    def __init__(self,
                 n_clusters: int,
                 init: str = 'k-means++',
                 max_iter: int = 100,
                 n_init: int = 1,
                 empty_cluster_strategy: Union[EmptyClusterStrategy, str] = EmptyClusterStrategy.LARGEST_VARIANCE,
                 variance_measure: Union[VarianceMeasure, str] = VarianceMeasure.SUM_SQUARED,
                 tie_break: Union[TieBreak, str] = TieBreak.FIRST,
                 verbose: int = 0,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        """Initialize K-means algorithm."""
        self.n_clusters = n_clusters
        self.init = init
        self.max_iter = max_iter
        self.n_init = n_init
        self.empty_cluster_strategy = empty_cluster_strategy
        self.variance_measure = variance_measure
        self.tie_break = tie_break
        self.verbose = verbose
        self.random_state = random_state

        self.fitted_ = False
        self.labels_ = None
        self.cluster_centers_ = None
        self.inertia_ = None
        self.n_iter_ = 0
        self.clusters_: Optional[List[Cluster]] = None

    def _create_clusterer(self):
        clusterer = KMeansPlusPlusClusterer(
            random_state=self.random_state,
            empty_cluster_strategy=self.empty_cluster_strategy,
            init=self.init,
            variance_measure=self.variance_measure,
            tie_break=self.tie_break,
            verbose=self.verbose
        )
        if self.n_init > 1:
            return MultiKMeansPlusPlusClusterer(clusterer, self.n_init)
        return clusterer

    def fit(self, X: Union[Tensor, np.ndarray, list], y: Optional[Tensor] = None) -> 'KMeans':
        """Fit K-means clustering.

        Parameters
        ----------
        X : Tensor, ndarray or list of shape (n_samples, n_features)
            Training data
        y : Ignored
            Not used, present for API consistency

        Returns
        -------
        self : KMeans
            Fitted estimator
        """
        X = validate_data(X)
        points = [EuclideanDoublePoint(row) for row in X.tolist()]

        clusterer = self._create_clusterer()
        clusters = clusterer.cluster(points, self.n_clusters, self.max_iter)

        # Map each input row to the cluster holding that exact point object
        owner = {id(p): c for c, cluster in enumerate(clusters) for p in cluster.points}
        self.labels_ = torch.tensor([owner[id(p)] for p in points], dtype=torch.long)
        self.cluster_centers_ = torch.tensor(
            [cluster.center.coordinates for cluster in clusters], dtype=torch.float64
        )
        self.inertia_ = inertia(X, self.labels_, self.cluster_centers_)
        self.n_iter_ = clusterer.n_iter_
        self.clusters_ = clusters
        self.fitted_ = True
        return self

    def fit_predict(self, X: Union[Tensor, np.ndarray, list], y: Optional[Tensor] = None) -> Tensor:
        """Fit and return labels.

        Parameters
        ----------
        X : Tensor of shape (n_samples, n_features)
            Training data
        y : Ignored
            Not used

        Returns
        -------
        labels : Tensor of shape (n_samples,)
            Cluster labels
        """
        self.fit(X, y)
        return self.labels_

    def predict(self, X: Union[Tensor, np.ndarray, list]) -> Tensor:
        """Predict cluster labels for new data.

        Parameters
        ----------
        X : Tensor of shape (n_samples, n_features)
            New data to predict

        Returns
        -------
        labels : Tensor of shape (n_samples,)
            Index of the nearest cluster center
        """
        if not self.fitted_:
            raise RuntimeError("Model must be fitted before calling predict")

        X = validate_data(X)
        if X.shape[1] != self.cluster_centers_.shape[1]:
            raise ValueError(f"Expected dimension {self.cluster_centers_.shape[1]}, got {X.shape[1]}")

        distances = torch.cdist(X, self.cluster_centers_)
        return torch.argmin(distances, dim=1)

    def score(self, X: Union[Tensor, np.ndarray, list], y: Optional[Tensor] = None) -> float:
        """Opposite of the value of X on the K-means objective.

        Parameters
        ----------
        X : Tensor of shape (n_samples, n_features)
            New data
        y : Ignored
            Not used

        Returns
        -------
        score : float
            Negative of sum of squared distances to centers
        """
        labels = self.predict(X)
        return -inertia(validate_data(X), labels, self.cluster_centers_)

    def get_params(self, deep: bool = True) -> dict:
        """Get parameters (sklearn compatibility)."""
        return {
            'n_clusters': self.n_clusters,
            'init': self.init,
            'max_iter': self.max_iter,
            'n_init': self.n_init,
            'empty_cluster_strategy': self.empty_cluster_strategy,
            'variance_measure': self.variance_measure,
            'tie_break': self.tie_break,
            'verbose': self.verbose,
            'random_state': self.random_state
        }

    def set_params(self, **params) -> 'KMeans':
        """Set parameters (sklearn compatibility)."""
        for key, value in params.items():
            if key not in self.get_params():
                raise ValueError(f"Invalid parameter {key!r} for KMeans")
            setattr(self, key, value)
        return self
