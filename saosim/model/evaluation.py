"""Evaluation function of a behavior variable.

Combines an ordered list of behavior effects with their parameters. The
simulation driver asks for the evaluation change of candidate micro-steps;
the estimation driver asks for the effect statistics of a full state.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

import numpy as np

from saosim.data.behavior_data import BehaviorLongitudinalData
from saosim.model.effects.base import BehaviorEffect, NetworkDependentBehaviorEffect
from saosim.network.network import Network

logger = logging.getLogger(__name__)


class BehaviorEvaluation:
    """Parameter-weighted sum of behavior effects.

    Args:
        effects: The effects, in parameter order.
        parameters: One weight per effect. Defaults to the ``parameter`` of
            each effect's EffectInfo (0 for effects without metadata).
    """

    def __init__(
        self,
        effects: Sequence[BehaviorEffect],
        parameters: Sequence[float] | None = None,
    ):
        self.effects = list(effects)
        if parameters is None:
            parameters = [
                effect.effect_info.parameter if effect.effect_info else 0.0
                for effect in self.effects
            ]
        if len(parameters) != len(self.effects):
            raise ValueError(
                f"got {len(parameters)} parameters for {len(self.effects)} effects"
            )
        self.parameters = np.asarray(parameters, dtype=float)
        self._data: BehaviorLongitudinalData | None = None
        self._values: Sequence[int] | None = None

    def initialize(
        self,
        data: BehaviorLongitudinalData,
        values: Sequence[int],
        networks: Mapping[str, Network] | None = None,
    ) -> None:
        """Bind every effect to the data, the current values and its network.

        Network-dependent effects get the network named by their
        ``interaction_name``.

        Raises:
            KeyError: If a network-dependent effect names no known network.
        """
        networks = networks or {}
        for effect in self.effects:
            network = None
            if isinstance(effect, NetworkDependentBehaviorEffect):
                name = effect.network_name
                if name not in networks:
                    raise KeyError(f"{effect!r} needs network {name!r}, which was not supplied")
                network = networks[name]
            effect.initialize(data, values, network)
        self._data = data
        self._values = values
        logger.debug(
            "Evaluation of '%s' initialized with %d effects", data.name, len(self.effects)
        )

    def change_contributions(self, actor: int, difference: int) -> np.ndarray:
        """Change contribution of every effect for one candidate step."""
        return np.array(
            [effect.change_contribution(actor, difference) for effect in self.effects],
            dtype=float,
        )

    def evaluation_change(self, actor: int, difference: int) -> float:
        """Change of the evaluation function for one candidate step."""
        return float(self.parameters @ self.change_contributions(actor, difference))

    def centered_values(self) -> np.ndarray:
        """Current values minus the overall mean of the data."""
        return np.asarray(self._values, dtype=float) - self._data.overall_mean

    def statistics(self, current_values: Sequence[float] | None = None) -> np.ndarray:
        """Sum over all actors of each effect's ego statistic.

        Args:
            current_values: Full assignment to evaluate; defaults to the
                centered current values.
        """
        if current_values is None:
            current_values = self.centered_values()
        n = self._data.n
        return np.array(
            [
                sum(effect.ego_statistic(ego, current_values) for ego in range(n))
                for effect in self.effects
            ],
            dtype=float,
        )
