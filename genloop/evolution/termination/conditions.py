from __future__ import annotations

import threading

from loguru import logger

from genloop.evolution.termination.base import TerminationCondition
from genloop.population.models import PopulationSnapshot


class GenerationCount(TerminationCondition):
    """Stops once ``generation_count`` generations (initial population included) exist."""

    def __init__(self, generation_count: int):
        if generation_count < 1:
            raise ValueError(
                f"generation_count must be at least 1, got {generation_count}"
            )
        self.generation_count = generation_count

    def should_terminate(self, snapshot: PopulationSnapshot) -> bool:
        return snapshot.generation_index + 1 >= self.generation_count

    def __repr__(self) -> str:
        return f"GenerationCount({self.generation_count})"


class TargetFitness(TerminationCondition):
    def __init__(self, target_fitness: float, natural: bool):
        self.target_fitness = target_fitness
        self.natural = natural

    def should_terminate(self, snapshot: PopulationSnapshot) -> bool:
        if self.natural:
            return snapshot.best_fitness >= self.target_fitness
        return snapshot.best_fitness <= self.target_fitness

    def __repr__(self) -> str:
        return f"TargetFitness({self.target_fitness}, natural={self.natural})"


class ElapsedTime(TerminationCondition):
    """Stops once the run has lasted at least ``max_duration_ms`` milliseconds."""

    def __init__(self, max_duration_ms: float):
        if max_duration_ms <= 0:
            raise ValueError(f"max_duration_ms must be positive, got {max_duration_ms}")
        self.max_duration_ms = max_duration_ms

    def should_terminate(self, snapshot: PopulationSnapshot) -> bool:
        return snapshot.elapsed_time >= self.max_duration_ms

    def __repr__(self) -> str:
        return f"ElapsedTime({self.max_duration_ms}ms)"


class Stagnation(TerminationCondition):
    """
    Stops when fitness has not improved for ``generation_limit`` generations.

    Tracks the best score seen so far (or the best mean, with
    ``use_population_average``). State is reset whenever generation 0 is seen,
    so a single instance can be reused across runs.
    """

    def __init__(
        self,
        generation_limit: int,
        natural: bool,
        use_population_average: bool = False,
    ):
        if generation_limit < 1:
            raise ValueError(
                f"generation_limit must be at least 1, got {generation_limit}"
            )
        self.generation_limit = generation_limit
        self.natural = natural
        self.use_population_average = use_population_average
        self._best_fitness: float | None = None
        self._improved_at = 0

    def should_terminate(self, snapshot: PopulationSnapshot) -> bool:
        fitness = (
            snapshot.mean_fitness
            if self.use_population_average
            else snapshot.best_fitness
        )
        if snapshot.generation_index == 0 or self._best_fitness is None:
            self._best_fitness = fitness
            self._improved_at = snapshot.generation_index
            return False

        if self._is_improvement(fitness):
            self._best_fitness = fitness
            self._improved_at = snapshot.generation_index
            return False

        stagnant_for = snapshot.generation_index - self._improved_at
        if stagnant_for >= self.generation_limit:
            logger.debug(
                "[Stagnation] No improvement for {} generation(s) (best={})",
                stagnant_for,
                self._best_fitness,
            )
            return True
        return False

    def _is_improvement(self, fitness: float) -> bool:
        if self.natural:
            return fitness > self._best_fitness
        return fitness < self._best_fitness

    def __repr__(self) -> str:
        return f"Stagnation({self.generation_limit}, natural={self.natural})"


class UserAbort(TerminationCondition):
    """Lets any thread request a clean stop; reported as a satisfied condition."""

    def __init__(self):
        self._aborted = threading.Event()

    def abort(self) -> None:
        self._aborted.set()

    def reset(self) -> None:
        self._aborted.clear()

    @property
    def is_aborted(self) -> bool:
        return self._aborted.is_set()

    def should_terminate(self, snapshot: PopulationSnapshot) -> bool:
        return self._aborted.is_set()
