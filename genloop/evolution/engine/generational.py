from __future__ import annotations

import random
from typing import TypeVar

from loguru import logger

from genloop.evolution.engine.core import EvolutionEngine
from genloop.evolution.evaluation.base import EvaluationStrategy, FitnessEvaluator
from genloop.evolution.evaluation.individual import IndividualFitnessEvaluationStrategy
from genloop.evolution.factories.base import CandidateFactory
from genloop.evolution.operators.base import EvolutionaryOperator
from genloop.evolution.strategies.base import SelectionStrategy
from genloop.exceptions import ContractViolationError
from genloop.population.models import EvaluatedCandidate

__all__ = ["GenerationalEvolutionEngine"]

T = TypeVar("T")


class GenerationalEvolutionEngine(EvolutionEngine[T]):
    """
    Replaces the whole population every generation, except for the elite.

    Each step keeps the ``elite_count`` fittest candidates with their scores,
    selects parents for the remaining slots, runs them through the evolution
    scheme and evaluates only the resulting offspring.
    """

    def __init__(
        self,
        candidate_factory: CandidateFactory[T],
        evolution_scheme: EvolutionaryOperator[T],
        evaluation: EvaluationStrategy[T] | FitnessEvaluator[T],
        selection_strategy: SelectionStrategy,
        rng: random.Random | None = None,
    ):
        if isinstance(evaluation, FitnessEvaluator):
            evaluation = IndividualFitnessEvaluationStrategy(evaluation)
        super().__init__(candidate_factory, evaluation, rng)
        self.evolution_scheme = evolution_scheme
        self.selection_strategy = selection_strategy

    def next_evolution_step(
        self,
        evaluated_population: list[EvaluatedCandidate[T]],
        elite_count: int,
        rng: random.Random,
    ) -> list[EvaluatedCandidate[T]]:
        elite = evaluated_population[:elite_count]
        offspring_count = len(evaluated_population) - elite_count

        selection = self.selection_strategy.select(
            evaluated_population, self.natural, offspring_count, rng
        )
        offspring = self.evolution_scheme.apply(selection, rng)
        if len(offspring) != offspring_count:
            raise ContractViolationError(
                f"Evolution scheme returned {len(offspring)} offspring, "
                f"expected {offspring_count}"
            )

        logger.debug(
            "[GenerationalEvolutionEngine] Step | elite={}, offspring={}",
            len(elite),
            len(offspring),
        )
        return [*elite, *self.evaluate_population(offspring)]
