"""Maximum (or minimum) alter effect."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from saosim.model.effect_info import EffectInfo
from saosim.model.effects.base import NetworkDependentBehaviorEffect


class MaxAlterEffect(NetworkDependentBehaviorEffect):
    """The most extreme behavior among an actor's alters.

    The statistic of ego ``i`` is ``v_i * max_j v_j`` over the alters ``j``
    of ``i``, or the minimum when ``minim`` is set. Actors without outgoing
    ties contribute 0. When several alters share the extreme value the one
    met first in the network's iteration order is kept.

    Args:
        effect_info: Metadata of the effect.
        minim: Aggregate with the minimum instead of the maximum.
    """

    def __init__(self, effect_info: EffectInfo | None = None, minim: bool = False):
        super().__init__(effect_info)
        self._minim = minim

    @property
    def minim(self) -> bool:
        return self._minim

    def change_contribution(self, actor: int, difference: int) -> float:
        network = self.network
        if difference == 0 or network.out_degree(actor) == 0:
            return 0.0
        extreme = self._extreme(
            self.centered_value(alter) for alter in network.out_ties(actor)
        )
        return extreme * difference

    def ego_statistic(self, ego: int, current_values: Sequence[float]) -> float:
        network = self.network
        if network.out_degree(ego) == 0:
            return 0.0
        extreme = self._extreme(current_values[alter] for alter in network.out_ties(ego))
        return float(extreme * current_values[ego])

    def _extreme(self, alter_values: Iterable[float]) -> float:
        """Strict minimum or maximum, keeping the first of equal values."""
        best: float | None = None
        for candidate in alter_values:
            if best is None:
                best = candidate
            elif self._minim:
                if candidate < best:
                    best = candidate
            elif candidate > best:
                best = candidate
        return float(best)
