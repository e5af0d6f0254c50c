"""Registry owning the actor sets and behavior variables of one data set."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, Literal

from saosim.data.actor_set import ActorSet
from saosim.data.behavior_data import BehaviorLongitudinalData, DataIntegrityError

logger = logging.getLogger(__name__)

ErrorPolicy = Literal["raise", "skip"]


class Data:
    """All variables observed at the same ``observation_count`` moments.

    Actor sets and behavior variables are registered by unique name and get
    increasing ids in registration order.

    Args:
        observation_count: Number of observation moments shared by every
            variable (at least 1).
    """

    def __init__(self, observation_count: int):
        if observation_count < 1:
            raise ValueError(
                f"observation_count must be at least 1, got {observation_count}"
            )
        self.observation_count = observation_count
        self._actor_sets: dict[str, ActorSet] = {}
        self._behavior: dict[str, BehaviorLongitudinalData] = {}
        self._next_id = 0

    def create_actor_set(self, name: str, n: int) -> ActorSet:
        if name in self._actor_sets:
            raise ValueError(f"actor set '{name}' already exists")
        actor_set = ActorSet(id=len(self._actor_sets), name=name, n=n)
        self._actor_sets[name] = actor_set
        return actor_set

    def actor_set(self, name: str) -> ActorSet:
        return self._actor_sets[name]

    def create_behavior_data(self, name: str, actor_set: ActorSet) -> BehaviorLongitudinalData:
        """Register an empty behavior variable (all zeros, nothing missing)."""
        self._check_new_variable(name, actor_set)
        data = BehaviorLongitudinalData(
            self._allocate_id(), name, actor_set, self.observation_count
        )
        self._behavior[name] = data
        return data

    def add_behavior_frame(
        self,
        name: str,
        actor_set: ActorSet,
        frame: Any,
        structural: Any = None,
    ) -> BehaviorLongitudinalData:
        """Register a behavior variable loaded from an actors-by-observations
        DataFrame (see ``BehaviorLongitudinalData.from_frame``)."""
        self._check_new_variable(name, actor_set)
        # the id is only taken once the frame is accepted
        data = BehaviorLongitudinalData.from_frame(
            self._next_id, name, actor_set, frame, structural
        )
        if data.observation_count != self.observation_count:
            raise ValueError(
                f"'{name}' has {data.observation_count} observations, "
                f"expected {self.observation_count}"
            )
        self._allocate_id()
        self._behavior[name] = data
        return data

    def behavior_data(self, name: str) -> BehaviorLongitudinalData:
        return self._behavior[name]

    def remove_behavior_data(self, name: str) -> BehaviorLongitudinalData:
        return self._behavior.pop(name)

    @property
    def behavior_names(self) -> list[str]:
        return list(self._behavior)

    def __iter__(self) -> Iterator[BehaviorLongitudinalData]:
        return iter(list(self._behavior.values()))

    def __len__(self) -> int:
        return len(self._behavior)

    def __contains__(self, name: object) -> bool:
        return name in self._behavior

    def calculate_properties(self, on_error: ErrorPolicy = "raise") -> list[str]:
        """Calculate the derived statistics of every behavior variable.

        Args:
            on_error: ``"raise"`` aborts the whole load on the first
                DataIntegrityError. ``"skip"`` logs a warning, drops the
                failing variable from the registry and continues.

        Returns:
            Names of the variables dropped under the ``"skip"`` policy.
        """
        if on_error not in ("raise", "skip"):
            raise ValueError(f"on_error must be 'raise' or 'skip', got {on_error!r}")

        skipped: list[str] = []
        for data in self:
            try:
                data.calculate_properties()
            except DataIntegrityError as exc:
                if on_error == "raise":
                    raise
                logger.warning("Skipping behavior variable '%s': %s", data.name, exc)
                del self._behavior[data.name]
                skipped.append(data.name)
        return skipped

    def freeze(self) -> None:
        """Freeze every behavior variable (see BehaviorLongitudinalData.freeze)."""
        for data in self:
            data.freeze()

    def _allocate_id(self) -> int:
        new_id = self._next_id
        self._next_id += 1
        return new_id

    def _check_new_variable(self, name: str, actor_set: ActorSet) -> None:
        if name in self._behavior:
            raise ValueError(f"behavior variable '{name}' already exists")
        if self._actor_sets.get(actor_set.name) is not actor_set:
            raise ValueError(
                f"actor set '{actor_set.name}' is not registered with this data set"
            )
