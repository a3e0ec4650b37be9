"""
Centroid update strategy for center-based clustering.
"""

from typing import List, Sequence, Union
from torch import Tensor

from .empty_cluster import (
    EmptyClusterStrategy, TieBreak, VarianceMeasure, select_donor, as_enum
)


class CentroidUpdater:
    """Moves every center to the centroid of its members.

    Clusters left without members are refilled according to the bound
    empty-cluster strategy, in cluster order. Afterwards every cluster has
    at least one member and ``centers[k]`` is the centroid of ``members[k]``.
    """

    def __init__(self,
                 empty_cluster_strategy: Union[EmptyClusterStrategy, str] = EmptyClusterStrategy.LARGEST_VARIANCE,
                 variance_measure: Union[VarianceMeasure, str] = VarianceMeasure.SUM_SQUARED,
                 tie_break: Union[TieBreak, str] = TieBreak.FIRST):
        self.empty_cluster_strategy = as_enum(EmptyClusterStrategy, empty_cluster_strategy)
        self.variance_measure = as_enum(VarianceMeasure, variance_measure)
        self.tie_break = as_enum(TieBreak, tie_break)

    @staticmethod
    def centroid(points: Sequence, member_positions: List[int], center):
        """Centroid of the given members, computed by the center's own type."""
        return center.centroid_of([points[i] for i in member_positions])

    def update(self, points: Sequence, centers: List,
               members: List[List[int]], labels: Tensor) -> int:
        """Recenter clusters in place.

        Args:
            points: All input points
            centers: Current centers, replaced in place
            members: Member positions per cluster, updated in place on recovery
            labels: (n,) cluster index per point, updated in place on recovery

        Returns:
            Number of empty clusters that were refilled

        Raises:
            ConvergenceError: If an empty cluster cannot be refilled
        """
        for k, member_positions in enumerate(members):
            if member_positions:
                centers[k] = self.centroid(points, member_positions, centers[k])

        recovered = 0
        for k, member_positions in enumerate(members):
            if member_positions:
                continue

            donor, slot = select_donor(
                self.empty_cluster_strategy, points, centers, members,
                tie_break=self.tie_break,
                variance_measure=self.variance_measure
            )
            position = members[donor].pop(slot)
            member_positions.append(position)
            labels[position] = k
            centers[k] = points[position]
            centers[donor] = self.centroid(points, members[donor], centers[donor])
            recovered += 1

        return recovered
