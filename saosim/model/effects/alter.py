"""Alter influence effects: the ego's behavior times its alters' behavior."""

from __future__ import annotations

from collections.abc import Sequence

from saosim.model.effects.base import NetworkDependentBehaviorEffect


class TotalAlterEffect(NetworkDependentBehaviorEffect):
    """Statistic ``v_i * sum_j v_j`` over the alters ``j`` of ``i``."""

    def change_contribution(self, actor: int, difference: int) -> float:
        if difference == 0 or self.network.out_degree(actor) == 0:
            return 0.0
        return difference * self._alter_total(actor)

    def ego_statistic(self, ego: int, current_values: Sequence[float]) -> float:
        total = 0.0
        for alter in self.network.out_ties(ego):
            total += current_values[alter]
        return float(current_values[ego] * total)

    def _alter_total(self, actor: int) -> float:
        total = 0.0
        for alter in self.network.out_ties(actor):
            total += self.centered_value(alter)
        return total


class AverageAlterEffect(TotalAlterEffect):
    """Statistic ``v_i * mean_j v_j``; actors without alters contribute 0."""

    def change_contribution(self, actor: int, difference: int) -> float:
        degree = self.network.out_degree(actor)
        if difference == 0 or degree == 0:
            return 0.0
        return difference * self._alter_total(actor) / degree

    def ego_statistic(self, ego: int, current_values: Sequence[float]) -> float:
        degree = self.network.out_degree(ego)
        if degree == 0:
            return 0.0
        return super().ego_statistic(ego, current_values) / degree
