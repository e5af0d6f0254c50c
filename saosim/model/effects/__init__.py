"""Behavior effects evaluated by the simulation and estimation drivers."""

from saosim.model.effects.base import BehaviorEffect, NetworkDependentBehaviorEffect
from saosim.model.effects.shape import LinearShapeEffect, QuadraticShapeEffect
from saosim.model.effects.alter import AverageAlterEffect, TotalAlterEffect
from saosim.model.effects.similarity import AverageSimilarityEffect, TotalSimilarityEffect
from saosim.model.effects.max_alter import MaxAlterEffect

__all__ = [
    "BehaviorEffect",
    "NetworkDependentBehaviorEffect",
    "LinearShapeEffect",
    "QuadraticShapeEffect",
    "AverageAlterEffect",
    "TotalAlterEffect",
    "AverageSimilarityEffect",
    "TotalSimilarityEffect",
    "MaxAlterEffect",
]
