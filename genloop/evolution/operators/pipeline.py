from collections.abc import Sequence
import random
from typing import TypeVar

from loguru import logger

from genloop.evolution.operators.base import EvolutionaryOperator

T = TypeVar("T")


class IdentityOperator(EvolutionaryOperator[T]):
    """Passes candidates through unchanged."""

    def apply(self, selected_candidates: list[T], rng: random.Random) -> list[T]:
        return list(selected_candidates)


class EvolutionPipeline(EvolutionaryOperator[T]):
    """Applies a fixed sequence of operators, each to the previous one's output."""

    def __init__(self, operators: Sequence[EvolutionaryOperator[T]]):
        if not operators:
            raise ValueError("EvolutionPipeline requires at least one operator")
        self.operators = list(operators)

    def apply(self, selected_candidates: list[T], rng: random.Random) -> list[T]:
        population = list(selected_candidates)
        for operator in self.operators:
            population = operator.apply(population, rng)
            logger.trace(
                "[EvolutionPipeline] {} -> {} candidate(s)",
                type(operator).__name__,
                len(population),
            )
        return population
