from genloop.evolution.engine import (
    EngineConfig,
    EngineMetrics,
    EngineState,
    EvolutionEngine,
    GenerationalEvolutionEngine,
    TerminationReason,
)
from genloop.evolution.evaluation import (
    EvaluationStrategy,
    FitnessEvaluator,
    IndividualFitnessEvaluationStrategy,
)
from genloop.evolution.factories import AbstractCandidateFactory, CandidateFactory
from genloop.evolution.observers import EvolutionObserver
from genloop.evolution.operators import EvolutionaryOperator, EvolutionPipeline
from genloop.evolution.strategies import SelectionStrategy
from genloop.evolution.termination import TerminationCondition

__all__ = [
    "AbstractCandidateFactory",
    "CandidateFactory",
    "EngineConfig",
    "EngineMetrics",
    "EngineState",
    "EvaluationStrategy",
    "EvolutionEngine",
    "EvolutionObserver",
    "EvolutionPipeline",
    "EvolutionaryOperator",
    "FitnessEvaluator",
    "GenerationalEvolutionEngine",
    "IndividualFitnessEvaluationStrategy",
    "SelectionStrategy",
    "TerminationCondition",
    "TerminationReason",
]
