"""Create behavior effects from their metadata."""

from __future__ import annotations

from typing import Callable

from saosim.model.effect_info import EffectInfo
from saosim.model.effects import (
    AverageAlterEffect,
    AverageSimilarityEffect,
    BehaviorEffect,
    LinearShapeEffect,
    MaxAlterEffect,
    QuadraticShapeEffect,
    TotalAlterEffect,
    TotalSimilarityEffect,
)

_EFFECTS: dict[str, Callable[[EffectInfo], BehaviorEffect]] = {
    "linear": LinearShapeEffect,
    "quad": QuadraticShapeEffect,
    "avAlt": AverageAlterEffect,
    "totAlt": TotalAlterEffect,
    "avSim": AverageSimilarityEffect,
    "totSim": TotalSimilarityEffect,
    "maxAlt": lambda info: MaxAlterEffect(info, minim=False),
    "minAlt": lambda info: MaxAlterEffect(info, minim=True),
}


def effect_names() -> list[str]:
    """Effect names understood by ``create_effect``."""
    return list(_EFFECTS)


def create_effect(info: EffectInfo) -> BehaviorEffect:
    """Return a new effect of the kind named by ``info.effect_name``.

    Raises:
        KeyError: If the effect name is unknown.
    """
    try:
        factory = _EFFECTS[info.effect_name]
    except KeyError:
        raise KeyError(
            f"Unknown behavior effect '{info.effect_name}'. "
            f"Available: {', '.join(_EFFECTS)}"
        ) from None
    return factory(info)
