"""Similarity effects: the ego's preference for behaving like its alters.

Similarities are centered with the constant stored on the data object for
the effect's network (``similarity_network``). Effects without a network
name use the unconditional similarity mean instead.
"""

from __future__ import annotations

from collections.abc import Sequence

from saosim.model.effects.base import NetworkDependentBehaviorEffect


class TotalSimilarityEffect(NetworkDependentBehaviorEffect):
    """Statistic ``sum_j sim(v_i, v_j)`` over the alters ``j`` of ``i``."""

    def change_contribution(self, actor: int, difference: int) -> float:
        if difference == 0 or self.network.out_degree(actor) == 0:
            return 0.0
        return self._similarity_change(actor, difference)

    def ego_statistic(self, ego: int, current_values: Sequence[float]) -> float:
        ego_value = current_values[ego]
        total = 0.0
        for alter in self.network.out_ties(ego):
            total += self._similarity(ego_value, current_values[alter])
        return total

    def _similarity(self, a: float, b: float) -> float:
        name = self.network_name
        if name is None:
            return self.data.similarity(a, b)
        return self.data.similarity_network(a, b, name)

    def _similarity_change(self, actor: int, difference: int) -> float:
        old = self.value(actor)
        new = old + difference
        change = 0.0
        for alter in self.network.out_ties(actor):
            alter_value = self.value(alter)
            change += self._similarity(new, alter_value) - self._similarity(old, alter_value)
        return change


class AverageSimilarityEffect(TotalSimilarityEffect):
    """Statistic ``mean_j sim(v_i, v_j)``; actors without alters contribute 0."""

    def change_contribution(self, actor: int, difference: int) -> float:
        degree = self.network.out_degree(actor)
        if difference == 0 or degree == 0:
            return 0.0
        return self._similarity_change(actor, difference) / degree

    def ego_statistic(self, ego: int, current_values: Sequence[float]) -> float:
        degree = self.network.out_degree(ego)
        if degree == 0:
            return 0.0
        return super().ego_statistic(ego, current_values) / degree
