from collections.abc import Sequence
import math
import random
from typing import TypeVar

from loguru import logger

from genloop.evolution.strategies.base import SelectionStrategy
from genloop.population.models import EvaluatedCandidate

T = TypeVar("T")


class TournamentSelection(SelectionStrategy):
    """
    Binary tournaments: two random candidates meet, the fitter one wins with
    probability ``selection_probability`` and the weaker one wins otherwise.
    """

    def __init__(self, selection_probability: float = 0.7):
        if not 0.5 < selection_probability <= 1.0:
            raise ValueError(
                f"selection_probability must be in (0.5, 1], got {selection_probability}"
            )
        self.selection_probability = selection_probability

    def select(
        self,
        population: Sequence[EvaluatedCandidate[T]],
        natural: bool,
        selection_size: int,
        rng: random.Random,
    ) -> list[T]:
        selection = []
        for _ in range(selection_size):
            first = population[rng.randrange(len(population))]
            second = population[rng.randrange(len(population))]
            if natural:
                first_wins = first.fitness > second.fitness
            else:
                first_wins = first.fitness < second.fitness
            fitter, weaker = (first, second) if first_wins else (second, first)
            winner = fitter if rng.random() < self.selection_probability else weaker
            selection.append(winner.candidate)
        return selection


class TruncationSelection(SelectionStrategy):
    """Keeps the top ``selection_ratio`` of the ranking, repeated in rank order."""

    def __init__(self, selection_ratio: float):
        if not 0.0 < selection_ratio <= 1.0:
            raise ValueError(
                f"selection_ratio must be in (0, 1], got {selection_ratio}"
            )
        self.selection_ratio = selection_ratio

    def select(
        self,
        population: Sequence[EvaluatedCandidate[T]],
        natural: bool,
        selection_size: int,
        rng: random.Random,
    ) -> list[T]:
        eligible = max(1, round(len(population) * self.selection_ratio))
        logger.trace(
            "[TruncationSelection] {} eligible of {}", eligible, len(population)
        )
        selection: list[T] = []
        while len(selection) < selection_size:
            count = min(eligible, selection_size - len(selection))
            selection.extend(ec.candidate for ec in population[:count])
        return selection


class RouletteWheelSelection(SelectionStrategy):
    """
    Fitness-proportional selection.

    Natural scores are used as weights directly. Non-natural scores are
    inverted; a zero score counts as infinitely fit, so when any candidate
    scores zero only those candidates are eligible.
    """

    def select(
        self,
        population: Sequence[EvaluatedCandidate[T]],
        natural: bool,
        selection_size: int,
        rng: random.Random,
    ) -> list[T]:
        if any(ec.fitness < 0 for ec in population):
            raise ValueError("RouletteWheelSelection requires non-negative fitness")

        candidates = [ec.candidate for ec in population]
        if natural:
            weights = [ec.fitness for ec in population]
        else:
            perfect = [ec.candidate for ec in population if ec.fitness == 0]
            if perfect:
                candidates = perfect
                weights = [1.0] * len(perfect)
            else:
                weights = [1.0 / ec.fitness for ec in population]

        total = math.fsum(weights)
        if total <= 0:
            logger.debug("[RouletteWheelSelection] All weights zero, selecting uniformly")
            weights = [1.0] * len(candidates)

        return rng.choices(candidates, weights=weights, k=selection_size)
