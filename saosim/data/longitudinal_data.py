"""Common base for variables observed repeatedly over an actor set."""

from __future__ import annotations

from saosim.data.actor_set import ActorSet


class LongitudinalData:
    """A variable observed at ``observation_count`` moments for every actor.

    Subclasses own the storage of the observed values; this base only
    carries identity and shape.

    Args:
        id: Identifier, unique among the variables of one registry.
        name: Variable name.
        actor_set: The actors the variable is observed on.
        observation_count: Number of observation moments (at least 1).
    """

    def __init__(self, id: int, name: str, actor_set: ActorSet, observation_count: int):
        if observation_count < 1:
            raise ValueError(
                f"observation_count must be at least 1, got {observation_count}"
            )
        self._id = id
        self._name = name
        self._actor_set = actor_set
        self._observation_count = observation_count

    @property
    def id(self) -> int:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def actor_set(self) -> ActorSet:
        return self._actor_set

    @property
    def n(self) -> int:
        """Number of actors."""
        return self._actor_set.n

    @property
    def observation_count(self) -> int:
        return self._observation_count

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self._id}, name={self._name!r}, "
            f"n={self.n}, observations={self._observation_count})"
        )
