"""saosim: behavior statistics for stochastic actor-oriented models.

Stores longitudinal observations of behavior variables, derives the
centering statistics that behavior effects depend on, and computes the
change contributions and ego statistics that a network/behavior
co-evolution simulator evaluates for every candidate micro-step.

The library is silent by default; see ``saosim.logging_config``.
"""

import logging

from saosim.data import (
    ActorSet,
    BehaviorLongitudinalData,
    Data,
    DataIntegrityError,
    LongitudinalData,
    alter_similarity_mean,
    center_similarities,
    similarity_mean,
)
from saosim.network import Network
from saosim.model import (
    AverageAlterEffect,
    AverageSimilarityEffect,
    BehaviorEffect,
    BehaviorEvaluation,
    EffectInfo,
    LinearShapeEffect,
    MaxAlterEffect,
    NetworkDependentBehaviorEffect,
    QuadraticShapeEffect,
    TotalAlterEffect,
    TotalSimilarityEffect,
    create_effect,
    effect_names,
)
from saosim.logging_config import (
    configure_from_env,
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)

logging.getLogger("saosim").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Data
    "ActorSet",
    "LongitudinalData",
    "BehaviorLongitudinalData",
    "DataIntegrityError",
    "Data",
    "similarity_mean",
    "alter_similarity_mean",
    "center_similarities",
    # Network
    "Network",
    # Model
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
    # Logging
    "configure_from_env",
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]
