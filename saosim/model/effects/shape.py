"""Shape effects: the tendency towards high (or extreme) behavior values."""

from __future__ import annotations

from collections.abc import Sequence

from saosim.model.effects.base import BehaviorEffect


class LinearShapeEffect(BehaviorEffect):
    """Statistic ``v_i``; the change contribution is the difference itself."""

    def change_contribution(self, actor: int, difference: int) -> float:
        return float(difference)

    def ego_statistic(self, ego: int, current_values: Sequence[float]) -> float:
        return float(current_values[ego])


class QuadraticShapeEffect(BehaviorEffect):
    """Statistic ``v_i ** 2`` on centered values."""

    def change_contribution(self, actor: int, difference: int) -> float:
        # (c + d)^2 - c^2
        return difference * (2.0 * self.centered_value(actor) + difference)

    def ego_statistic(self, ego: int, current_values: Sequence[float]) -> float:
        return float(current_values[ego]) ** 2
