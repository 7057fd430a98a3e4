"""genloop: a generic evolutionary-computation engine."""

from genloop.evolution.engine import (
    EngineConfig,
    EvolutionEngine,
    GenerationalEvolutionEngine,
)
from genloop.evolution.evaluation import (
    EvaluationStrategy,
    FitnessEvaluator,
    IndividualFitnessEvaluationStrategy,
)
from genloop.evolution.factories import AbstractCandidateFactory, CandidateFactory
from genloop.evolution.observers import EvolutionObserver
from genloop.evolution.termination import TerminationCondition
from genloop.exceptions import (
    ContractViolationError,
    EvaluationFailedError,
    EvolutionError,
    GenLoopError,
    InvalidArgumentError,
    NotTerminatedError,
)
from genloop.population import EvaluatedCandidate, PopulationSnapshot

__version__ = "0.1.0"

__all__ = [
    "AbstractCandidateFactory",
    "CandidateFactory",
    "ContractViolationError",
    "EngineConfig",
    "EvaluatedCandidate",
    "EvaluationFailedError",
    "EvaluationStrategy",
    "EvolutionEngine",
    "EvolutionError",
    "EvolutionObserver",
    "FitnessEvaluator",
    "GenLoopError",
    "GenerationalEvolutionEngine",
    "IndividualFitnessEvaluationStrategy",
    "InvalidArgumentError",
    "NotTerminatedError",
    "PopulationSnapshot",
    "TerminationCondition",
]
