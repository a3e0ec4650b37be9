# tests/test_initialization.py
"""
Seeding strategies: k-means++ and uniform random.
"""

from __future__ import annotations

import pytest
import torch

from kcluster.initialization import KMeansPlusPlusInit, RandomInit
from kcluster.points import EuclideanIntegerPoint

from data_gen import make_three_groups_2d, make_close_points


def _gen(seed: int) -> torch.Generator:
    return torch.Generator().manual_seed(seed)


@pytest.mark.parametrize("strategy", [KMeansPlusPlusInit(), RandomInit()])
def test_positions_are_distinct_and_in_range(strategy, seed_all):
    points = make_three_groups_2d()
    for k in range(1, len(points) + 1):
        seeds = strategy.initialize(points, k, generator=_gen(seed_all + k))
        assert len(seeds) == k
        assert len(set(seeds)) == k
        assert all(0 <= i < len(points) for i in seeds)


@pytest.mark.parametrize("strategy", [KMeansPlusPlusInit(), RandomInit()])
def test_same_generator_seed_same_positions(strategy):
    points = make_three_groups_2d()
    assert strategy.initialize(points, 3, _gen(7)) == strategy.initialize(points, 3, _gen(7))


@pytest.mark.parametrize("strategy", [KMeansPlusPlusInit(), RandomInit()])
def test_too_many_clusters_rejected(strategy):
    points = [EuclideanIntegerPoint((i,)) for i in range(3)]
    with pytest.raises(ValueError):
        strategy.initialize(points, 4)


def test_kmeans_plusplus_never_repeats_a_zero_weight_candidate():
    # Two distinct values only: after both are chosen all weights are zero
    points = [EuclideanIntegerPoint((0,))] * 3 + [EuclideanIntegerPoint((5,))]
    seeds = KMeansPlusPlusInit().initialize(points, 3, _gen(0))
    assert len(set(seeds)) == 3
    # The far point always gets picked before any zero-weight duplicate
    assert 3 in seeds


def test_kmeans_plusplus_spreads_over_separated_groups():
    """With well separated groups the second and third seeds land in other groups."""
    points = make_three_groups_2d()
    group_of = [0] * 8 + [1] * 5 + [2] * 8
    hits = 0
    trials = 50
    for s in range(trials):
        seeds = KMeansPlusPlusInit().initialize(points, 3, _gen(s))
        if len({group_of[i] for i in seeds}) == 3:
            hits += 1
    assert hits >= trials * 0.75


def test_kmeans_plusplus_picks_isolated_point_at_tiny_distances():
    points, unique = make_close_points(n_repeated=200)
    for s in range(5):
        seeds = KMeansPlusPlusInit().initialize(points, 2, _gen(s))
        assert len(points) - 1 in seeds


def test_uses_global_rng_without_generator():
    points = make_three_groups_2d()
    torch.manual_seed(123)
    a = KMeansPlusPlusInit().initialize(points, 3)
    torch.manual_seed(123)
    b = KMeansPlusPlusInit().initialize(points, 3)
    assert a == b
