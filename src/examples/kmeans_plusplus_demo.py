"""
Demo of k-means++ clustering with empty-cluster recovery.

This example shows how to:
1. Cluster integer points with the generic clusterer
2. Compare the empty-cluster recovery strategies on data that empties clusters
3. Fit the tensor-facing KMeans estimator and visualize the result
"""

import torch
import matplotlib.pyplot as plt

# Add parent directory to path for imports
import sys
sys.path.append('..')

from kcluster import (
    ClustererBuilder,
    KMeans,
    KMeansPlusPlusClusterer,
    EmptyClusterStrategy,
)
from kcluster.points import EuclideanIntegerPoint
from kcluster.utils.metrics import cluster_inertia
from kcluster.visualization import plot_clusters_2d, plot_cluster_boundaries
from sklearn.metrics import adjusted_rand_score


def generate_blobs(n_points_per_cluster=150, centers=((0.0, 0.0), (4.0, 1.0), (1.5, 4.0)),
                   scale=0.6):
    """Isotropic Gaussian blobs in the plane."""
    torch.manual_seed(42)

    data_list = []
    true_labels = []
    for k, center in enumerate(centers):
        points = torch.randn(n_points_per_cluster, 2, dtype=torch.float64) * scale
        points = points + torch.tensor(center, dtype=torch.float64)
        data_list.append(points)
        true_labels.extend([k] * n_points_per_cluster)

    X = torch.cat(data_list, dim=0)
    true_labels = torch.tensor(true_labels)

    # Shuffle
    perm = torch.randperm(len(X))
    return X[perm], true_labels[perm]


def generate_breaking_points(n_points=27, multiplier=1_000_000):
    """Collinear, evenly spaced 4D points far from the origin."""
    points = []
    for i in range(n_points):
        p = 1 + n_points * i
        points.append(EuclideanIntegerPoint([(p + j * n_points) * multiplier for j in range(4)]))
    return points


def integer_groups():
    coords = [
        (-15, 3), (-15, 4), (-15, 5), (-14, 3), (-14, 5), (-13, 3), (-13, 4), (-13, 5),
        (-1, 0), (-1, -1), (0, -1), (1, -1), (1, -2),
        (13, 3), (13, 4), (14, 4), (14, 7), (16, 5), (16, 6), (17, 4), (17, 7),
    ]
    return [EuclideanIntegerPoint(c) for c in coords]


def compare_strategies(points, k=9, max_iterations=100):
    """Run every recovery strategy and report recoveries and final inertia."""
    print(f"\n=== Empty-cluster strategies (n={len(points)}, k={k}) ===")
    for strategy in EmptyClusterStrategy:
        clusterer = KMeansPlusPlusClusterer(random_state=42, empty_cluster_strategy=strategy)
        clusters = clusterer.cluster(points, k, max_iterations)
        recovered = sum(state.recovered for state in clusterer.history_)
        print(f"{strategy.name:>22}: {clusterer.n_iter_:3d} rounds, "
              f"{recovered:2d} recoveries, inertia = {cluster_inertia(clusters):.4e}")


def main():
    """Run the demo."""
    print("=== k-means++ Clustering Demo ===\n")

    # Generic clusterer on integer points
    points = integer_groups()
    clusterer = (ClustererBuilder()
                 .with_random_state(42)
                 .with_empty_cluster_strategy('largest_variance')
                 .with_verbose(1)
                 .build_multi(10))
    clusters = clusterer.cluster(points, 3, 10)

    print("\nInteger groups:")
    for cluster in clusters:
        print(f"  center {tuple(cluster.center)} with {cluster.size} points")
    print(f"Best of {clusterer.num_trials} trials, inertia = {clusterer.best_score_:.2f}")

    compare_strategies(generate_breaking_points())

    # Estimator on tensors
    print("\nFitting KMeans on Gaussian blobs...")
    X, true_labels = generate_blobs()
    kmeans = KMeans(n_clusters=3, n_init=5, max_iter=100, random_state=42)
    kmeans.fit(X)

    print(f"KMeans completed in {kmeans.n_iter_} iterations")
    print(f"Final objective: {kmeans.inertia_:.4f}")
    print(f"Adjusted Rand Index: {adjusted_rand_score(true_labels.numpy(), kmeans.labels_.numpy()):.3f}")

    # Visualize
    print("\nPlotting results...")
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))
    plot_clusters_2d(clusters, ax=ax1, title='Integer groups')
    plot_cluster_boundaries(X, kmeans, ax=ax2, title='KMeans on Gaussian blobs')
    plt.tight_layout()
    plt.show()


if __name__ == "__main__":
    main()
