from genloop.evolution.evaluation.base import EvaluationStrategy, FitnessEvaluator
from genloop.evolution.evaluation.individual import IndividualFitnessEvaluationStrategy
from genloop.evolution.evaluation.worker import get_shared_executor

__all__ = [
    "EvaluationStrategy",
    "FitnessEvaluator",
    "IndividualFitnessEvaluationStrategy",
    "get_shared_executor",
]
