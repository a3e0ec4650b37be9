# tests/utils.py
"""
Small, reusable helpers used across the kcluster test suite.

Functions:
- center_tuple(cluster): cluster center coordinates as a tuple.
- member_multiset(clusters): every member of every cluster, as a sorted list of tuples.
- labels_equal_up_to_perm(y1, y2): whether two labelings agree after relabeling.
- perm_invariant_accuracy(y_pred, split_index): best accuracy over label swap for 2-way splits.
- time_block(label, meta=None): context manager that prints wall-clock time with optional metadata.
- print_timing(label, seconds, **meta): convenience printer for timings (used by time_block).
"""

from __future__ import annotations

import json
import itertools
import time
from contextlib import contextmanager
from typing import Any, Dict, List, Sequence, Tuple

import numpy as np
import torch


def center_tuple(cluster) -> Tuple:
    """Coordinates of a cluster center as a plain tuple."""
    return tuple(cluster.center)


def member_multiset(clusters: Sequence) -> List[Tuple]:
    """Sorted coordinates of all members across clusters (duplicates kept)."""
    return sorted(tuple(p) for c in clusters for p in c.points)


def labels_equal_up_to_perm(y1, y2) -> bool:
    """Return True if y2 can be relabeled to equal y1 exactly."""
    if isinstance(y1, torch.Tensor):
        y1 = y1.detach().cpu().numpy()
    if isinstance(y2, torch.Tensor):
        y2 = y2.detach().cpu().numpy()
    y1 = np.asarray(y1)
    y2 = np.asarray(y2)
    if y1.shape != y2.shape:
        return False
    k = int(max(y1.max(initial=0), y2.max(initial=0))) + 1
    for perm in itertools.permutations(range(k)):
        mapping = np.array(perm)
        if np.array_equal(y1, mapping[y2]):
            return True
    return False


def perm_invariant_accuracy(y_pred: np.ndarray, split_index: int) -> float:
    """
    Best accuracy over label swaps for 2-way synthetic datasets where the
    first `split_index` points belong to class 0 and the rest to class 1.

    Parameters
    ----------
    y_pred : (n,) predicted integer labels (0/1)
    split_index : int, number of points in the first (true) class

    Returns
    -------
    float in [0, 1]
    """
    if isinstance(y_pred, torch.Tensor):
        y_pred = y_pred.detach().cpu().numpy()
    y_pred = np.asarray(y_pred)
    if y_pred.ndim != 1:
        raise ValueError(f"y_pred must be 1D, got shape {y_pred.shape}")
    n = y_pred.size
    if not (0 <= split_index <= n):
        raise ValueError(f"split_index must be in [0, {n}], got {split_index}")

    first = y_pred[:split_index]
    second = y_pred[split_index:]

    # Map A: first→0, second→1
    acc_a = (np.sum(first == 0) + np.sum(second == 1)) / max(1, n)
    # Map B: first→1, second→0
    acc_b = (np.sum(first == 1) + np.sum(second == 0)) / max(1, n)

    return float(max(acc_a, acc_b))


@contextmanager
def time_block(label: str, meta: Dict[str, Any] | None = None):
    """
    Context manager to time a block and print a single-line summary.

    Example
    -------
    >>> with time_block("cluster", {"n": 27, "k": 5}):
    ...     clusterer.cluster(points, 5, 100)

    Output
    ------
    [timing] cluster {"n":27,"k":5} 0.012s
    """
    t0 = time.perf_counter()
    try:
        yield
    finally:
        dt = time.perf_counter() - t0
        print_timing(label, dt, **(meta or {}))


def print_timing(label: str, seconds: float, **meta: Any) -> None:
    """
    Print timing in a compact, machine-readable single line.

    Example:
    [timing] cluster {"n":27,"k":5} 0.012s
    """
    meta_str = ""
    if meta:
        meta_str = " " + json.dumps(meta, separators=(",", ":"), default=str)
    print(f"[timing] {label}{meta_str} {seconds:.3f}s")
