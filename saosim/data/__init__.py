"""Observed data: actor sets, behavior variables and their centering constants."""

from saosim.data.actor_set import ActorSet
from saosim.data.longitudinal_data import LongitudinalData
from saosim.data.behavior_data import BehaviorLongitudinalData, DataIntegrityError
from saosim.data.registry import Data
from saosim.data.similarity import (
    alter_similarity_mean,
    center_similarities,
    similarity_mean,
)

__all__ = [
    "ActorSet",
    "LongitudinalData",
    "BehaviorLongitudinalData",
    "DataIntegrityError",
    "Data",
    "alter_similarity_mean",
    "center_similarities",
    "similarity_mean",
]
