
import numpy as np
import pytest
import torch

from kcluster.algorithms import KMeans
from kcluster.base import Cluster
from kcluster.updates.empty_cluster import TieBreak, VarianceMeasure
from kcluster.points import EuclideanDoublePoint

from data_gen import make_blobs_2d
from utils import perm_invariant_accuracy


def test_kmeans_fits_simple_blobs():
    X, y = make_blobs_2d(n_per=100, seed=0)

    km = KMeans(n_clusters=2, random_state=0)
    km.fit(X)

    assert hasattr(km, "labels_"), "Expected labels_ after fit"
    assert len(km.labels_) == X.shape[0]
    assert km.labels_.dtype == torch.long
    assert km.cluster_centers_.shape == (2, 2)
    assert km.cluster_centers_.dtype == torch.float64
    assert perm_invariant_accuracy(km.labels_, 100) == 1.0
    assert np.isfinite(km.inertia_)
    assert km.fitted_


def test_centers_near_blob_means():
    X, _ = make_blobs_2d(n_per=200, centers=((0.0, 0.0), (5.0, 0.0), (0.0, 5.0)), seed=1)
    km = KMeans(n_clusters=3, n_init=3, random_state=4).fit(X)
    centers = sorted(tuple(round(v) for v in c) for c in km.cluster_centers_.tolist())
    assert centers == [(0, 0), (0, 5), (5, 0)]


def test_clusters_are_double_points():
    X, _ = make_blobs_2d(n_per=20, seed=2)
    km = KMeans(n_clusters=2, random_state=0).fit(X)
    assert len(km.clusters_) == 2
    assert all(isinstance(c, Cluster) for c in km.clusters_)
    assert all(isinstance(c.center, EuclideanDoublePoint) for c in km.clusters_)
    assert sum(c.size for c in km.clusters_) == 40


def test_predict_matches_training_labels():
    X, _ = make_blobs_2d(n_per=50, seed=3)
    km = KMeans(n_clusters=2, random_state=0)
    labels = km.fit_predict(X)
    assert torch.equal(labels, km.labels_)
    assert torch.equal(km.predict(X), km.labels_)


def test_score_is_negative_inertia():
    X, _ = make_blobs_2d(n_per=50, seed=3)
    km = KMeans(n_clusters=2, random_state=0).fit(X)
    assert km.score(X) == pytest.approx(-km.inertia_)


def test_accepts_tensor_and_list_input():
    X, _ = make_blobs_2d(n_per=10, seed=4)
    a = KMeans(n_clusters=2, random_state=9).fit(torch.from_numpy(X))
    b = KMeans(n_clusters=2, random_state=9).fit(X.tolist())
    assert torch.equal(a.labels_, b.labels_)
    assert torch.allclose(a.cluster_centers_, b.cluster_centers_)


def test_fit_rejects_invalid_data():
    with pytest.raises(ValueError):
        KMeans(n_clusters=2).fit([[0.0, 1.0], [float('nan'), 2.0], [3.0, 4.0]])
    with pytest.raises(ValueError):
        KMeans(n_clusters=2).fit(np.zeros((2, 2, 2)))
    with pytest.raises(TypeError):
        KMeans(n_clusters=2).fit("not data")


def test_duplicate_rows_each_get_a_label():
    X = np.array([[0.0, 0.0]] * 5 + [[10.0, 10.0]] * 5)
    km = KMeans(n_clusters=2, random_state=0).fit(X)
    assert km.labels_[:5].unique().numel() == 1
    assert km.labels_[5:].unique().numel() == 1
    assert km.labels_[0] != km.labels_[5]
    assert km.inertia_ == pytest.approx(0.0)


def test_predict_before_fit_raises():
    with pytest.raises(RuntimeError):
        KMeans(n_clusters=2).predict(np.zeros((3, 2)))


def test_predict_dimension_mismatch():
    X, _ = make_blobs_2d(n_per=10, seed=5)
    km = KMeans(n_clusters=2, random_state=0).fit(X)
    with pytest.raises(ValueError):
        km.predict(np.zeros((3, 3)))


def test_too_many_clusters():
    with pytest.raises(ValueError):
        KMeans(n_clusters=3).fit(np.array([[0.0], [0.0], [1.0]]))


def test_params_roundtrip():
    km = KMeans(n_clusters=3, max_iter=7, random_state=1)
    params = km.get_params()
    assert params['n_clusters'] == 3 and params['max_iter'] == 7 and params['n_init'] == 1
    assert params['variance_measure'] is VarianceMeasure.SUM_SQUARED and params['tie_break'] is TieBreak.FIRST

    km.set_params(n_clusters=4, init='random')
    assert km.n_clusters == 4 and km.init == 'random'

    with pytest.raises(ValueError):
        km.set_params(n_components=2)


def test_n_init_keeps_best_run():
    X, _ = make_blobs_2d(n_per=30, centers=((0.0, 0.0), (4.0, 0.0), (8.0, 0.0), (12.0, 0.0)), seed=6)
    single = KMeans(n_clusters=4, n_init=1, random_state=3).fit(X)
    multi = KMeans(n_clusters=4, n_init=5, random_state=3).fit(X)
    # The first trial of the multi run is the single run
    assert multi.inertia_ <= single.inertia_ + 1e-9
