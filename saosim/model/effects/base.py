"""Base classes for behavior effects.

A behavior effect contributes one statistic to the evaluation function of a
behavior variable. Every effect answers two questions:

- change_contribution: how much would the statistic change if an actor
  moved its behavior by ``difference``? Called for every candidate
  micro-step of a simulation.
- ego_statistic: what does one actor contribute to the statistic, given a
  full assignment of (usually centered) behavior values?

Before evaluation an effect is bound to a behavior data object and to the
caller-owned list of current behavior values with ``initialize()``. The
caller may keep mutating that list; effects always read the live values.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence

from saosim.data.behavior_data import BehaviorLongitudinalData
from saosim.model.effect_info import EffectInfo
from saosim.network.network import Network

logger = logging.getLogger(__name__)


class BehaviorEffect(ABC):
    """An effect on the evaluation function of a behavior variable.

    Args:
        effect_info: Metadata of the effect; not interpreted by the
            statistic computations.
    """

    def __init__(self, effect_info: EffectInfo | None = None):
        self._effect_info = effect_info
        self._data: BehaviorLongitudinalData | None = None
        self._values: Sequence[int] | None = None

    @property
    def effect_info(self) -> EffectInfo | None:
        return self._effect_info

    @property
    def data(self) -> BehaviorLongitudinalData | None:
        return self._data

    def initialize(
        self,
        data: BehaviorLongitudinalData,
        values: Sequence[int],
        network: Network | None = None,
    ) -> None:
        """Bind the effect to a behavior variable and its current values.

        Args:
            data: Observed data; its properties must be calculated.
            values: Current raw behavior value of every actor.
            network: Ignored by effects that use no network.

        Raises:
            ValueError: If ``values`` does not have one entry per actor.
            RuntimeError: If ``data`` has no derived statistics yet.
        """
        if len(values) != data.n:
            raise ValueError(f"expected {data.n} current values, got {len(values)}")
        if not data.properties_calculated:
            raise RuntimeError(
                f"properties of '{data.name}' must be calculated before initializing effects"
            )
        self._data = data
        self._values = values
        logger.debug("Initialized %s for '%s'", type(self).__name__, data.name)

    def value(self, actor: int) -> int:
        """Current raw behavior value of ``actor``."""
        return self._values[actor]

    def centered_value(self, actor: int) -> float:
        """Current behavior value of ``actor`` minus the data's current
        overall mean."""
        return self._values[actor] - self._data.overall_mean

    @abstractmethod
    def change_contribution(self, actor: int, difference: int) -> float:
        """Change of the statistic if ``actor`` changed its value by ``difference``.

        Must be exactly 0 when ``difference`` is 0.
        """

    @abstractmethod
    def ego_statistic(self, ego: int, current_values: Sequence[float]) -> float:
        """Contribution of ``ego`` to the statistic for the given assignment.

        Args:
            ego: The actor.
            current_values: One value per actor, usually centered.
        """

    def __repr__(self) -> str:
        name = self._effect_info.effect_name if self._effect_info else None
        return f"{type(self).__name__}(effect_name={name!r})"


class NetworkDependentBehaviorEffect(BehaviorEffect):
    """A behavior effect whose statistic depends on the ego's network ties."""

    def __init__(self, effect_info: EffectInfo | None = None):
        super().__init__(effect_info)
        self._network: Network | None = None

    @property
    def network(self) -> Network | None:
        return self._network

    @property
    def network_name(self) -> str | None:
        """Name of the network the effect reads ties from."""
        return self._effect_info.interaction_name if self._effect_info else None

    def initialize(
        self,
        data: BehaviorLongitudinalData,
        values: Sequence[int],
        network: Network | None = None,
    ) -> None:
        if network is None:
            raise ValueError(f"{type(self).__name__} requires a network")
        if network.n != data.n:
            raise ValueError(
                f"network has {network.n} actors but '{data.name}' has {data.n}"
            )
        super().initialize(data, values)
        self._network = network
