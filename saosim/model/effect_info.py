"""Metadata describing one effect of a behavior model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EffectInfo:
    """Identifies an effect and the variables it refers to.

    Attributes:
        effect_name: Short name of the effect kind (e.g. "maxAlt").
        variable_name: The behavior variable the effect belongs to.
        interaction_name: The network a network-dependent effect reads ties
            from, None for effects that use no network.
        parameter: Weight of the effect in the evaluation function.
        internal_parameter: Effect-specific integer parameter.
    """

    effect_name: str
    variable_name: str
    interaction_name: str | None = None
    parameter: float = 0.0
    internal_parameter: int = 0
