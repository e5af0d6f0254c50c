"""Behavior model: effect metadata, effects and the evaluation function."""

from saosim.model.effect_info import EffectInfo
from saosim.model.effects import (
    AverageAlterEffect,
    AverageSimilarityEffect,
    BehaviorEffect,
    LinearShapeEffect,
    MaxAlterEffect,
    NetworkDependentBehaviorEffect,
    QuadraticShapeEffect,
    TotalAlterEffect,
    TotalSimilarityEffect,
)
from saosim.model.factory import create_effect, effect_names
from saosim.model.evaluation import BehaviorEvaluation

__all__ = [
    "EffectInfo",
    "BehaviorEffect",
    "NetworkDependentBehaviorEffect",
    "LinearShapeEffect",
    "QuadraticShapeEffect",
    "AverageAlterEffect",
    "TotalAlterEffect",
    "AverageSimilarityEffect",
    "TotalSimilarityEffect",
    "MaxAlterEffect",
    "create_effect",
    "effect_names",
    "BehaviorEvaluation",
]
