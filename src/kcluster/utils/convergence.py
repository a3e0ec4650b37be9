"""
Convergence criteria for the Lloyd refinement loop.

Rounds are stable when no (or few enough) points change cluster.
"""

from typing import Dict, Any
import torch
from torch import Tensor

from ..base.interfaces import ConvergenceCriterion


class ChangeInAssignments(ConvergenceCriterion):
    """Convergence based on the points that change clusters between rounds.

    A round that had to refill an empty cluster (``current_state['recovered']
    > 0``) never counts as stable.
    """

    def __init__(self, min_change_fraction: float = 0.0,
                 patience: int = 1):
        """
        Args:
            min_change_fraction: Rounds where a smaller fraction of points
                changed count as stable. With 0.0 only rounds with no change
                at all are stable.
            patience: Number of consecutive stable rounds before convergence
        """
        super().__init__()
        if min_change_fraction < 0:
            raise ValueError(f"min_change_fraction must be non-negative, got {min_change_fraction}")
        if patience < 1:
            raise ValueError(f"patience must be at least 1, got {patience}")
        self.min_change_fraction = min_change_fraction
        self.patience = patience
        self._prev_assignments = None
        self._stable_count = 0

    def check(self, current_state: Dict[str, Any]) -> bool:
        """Check if assignments have stabilized."""
        assignments = current_state['assignments']
        if not isinstance(assignments, Tensor):
            assignments = torch.as_tensor(assignments, dtype=torch.long)

        if self._prev_assignments is None:
            self._prev_assignments = assignments.clone()
            return False

        n_changed = (assignments != self._prev_assignments).sum().item()
        n_total = len(assignments)
        change_fraction = n_changed / n_total if n_total else 0.0
        recovered = current_state.get('recovered', 0)

        self.history.append({
            'iteration': current_state.get('iteration', len(self.history)),
            'n_changed': n_changed,
            'change_fraction': change_fraction,
            'recovered': recovered
        })

        stable = (n_changed == 0 or change_fraction < self.min_change_fraction) and not recovered
        if stable:
            self._stable_count += 1
            converged = self._stable_count >= self.patience
        else:
            self._stable_count = 0
            converged = False

        self._prev_assignments = assignments.clone()

        return converged

    def reset(self):
        super().reset()
        self._prev_assignments = None
        self._stable_count = 0

