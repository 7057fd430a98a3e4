from genloop.evolution.termination.base import TerminationCondition
from genloop.evolution.termination.conditions import (
    ElapsedTime,
    GenerationCount,
    Stagnation,
    TargetFitness,
    UserAbort,
)

__all__ = [
    "ElapsedTime",
    "GenerationCount",
    "Stagnation",
    "TargetFitness",
    "TerminationCondition",
    "UserAbort",
]
