from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
import random
import threading
import time
from typing import Any, Generic, TypeVar

from loguru import logger

from genloop.evolution.engine.config import EngineConfig
from genloop.evolution.engine.metrics import EngineMetrics
from genloop.evolution.engine.state import (
    EngineState,
    TerminationReason,
    validate_transition,
)
from genloop.evolution.evaluation.base import EvaluationStrategy
from genloop.evolution.factories.base import CandidateFactory
from genloop.evolution.observers.base import EvolutionObserver, ObserverRegistry
from genloop.evolution.termination.base import TerminationCondition
from genloop.exceptions import (
    ContractViolationError,
    EvolutionError,
    EvolutionInterrupted,
    NotTerminatedError,
)
from genloop.population.models import EvaluatedCandidate, PopulationSnapshot
from genloop.population.ranking import (
    build_snapshot,
    collect_satisfied_conditions,
    sort_evaluated_population,
)

__all__ = ["EvolutionEngine"]

T = TypeVar("T")


class EvolutionEngine(ABC, Generic[T]):
    """
    Generation loop shared by all evolution engines:

        init -> evaluate -> rank -> observe -> test conditions -> step -> ...

    Subclasses supply the step (``next_evolution_step``). The loop runs on the
    caller's thread; only fitness evaluation fans out to worker threads.

    The single ``rng`` feeds the candidate factory and the step. Fitness
    evaluation never draws from it, so a seeded rng with a deterministic
    evaluator reproduces a run exactly.
    """

    def __init__(
        self,
        candidate_factory: CandidateFactory[T],
        evaluation_strategy: EvaluationStrategy[T],
        rng: random.Random | None = None,
    ):
        self.candidate_factory = candidate_factory
        self.evaluation_strategy = evaluation_strategy
        self.rng = rng if rng is not None else random.Random()

        self._observers = ObserverRegistry()
        self._abort = threading.Event()
        self._state = EngineState.IDLE
        self._termination_reason: TerminationReason | None = None
        self._satisfied_conditions: list[TerminationCondition] | None = None
        self._natural: bool | None = None
        self._current_population: list[EvaluatedCandidate[T]] = []

        self.metrics = EngineMetrics()

        logger.debug(
            "[EvolutionEngine] Init | engine={}, factory={}, strategy={}",
            type(self).__name__,
            type(self.candidate_factory).__name__,
            type(self.evaluation_strategy).__name__,
        )

    # Public API

    def evolve_best(
        self,
        population_size: int,
        elite_count: int,
        conditions: Sequence[TerminationCondition],
        seed_candidates: Sequence[T] | None = None,
    ) -> T:
        """Run evolution and return the fittest candidate of the final population."""
        population = self.evolve_population(
            population_size, elite_count, conditions, seed_candidates
        )
        if not population:
            raise EvolutionError(
                "Run was interrupted before the initial population was ranked"
            )
        return population[0].candidate

    def evolve_population(
        self,
        population_size: int,
        elite_count: int,
        conditions: Sequence[TerminationCondition],
        seed_candidates: Sequence[T] | None = None,
    ) -> list[EvaluatedCandidate[T]]:
        """Run evolution and return the final ranked population, fittest first.

        Raises:
            InvalidArgumentError: elite_count outside [0, population_size),
                no conditions, or more seeds than population_size
        """
        config = EngineConfig.build(
            population_size=population_size,
            elite_count=elite_count,
            conditions=conditions,
            seed_candidates=seed_candidates,
        )
        return self.run(config)

    def run(self, config: EngineConfig) -> list[EvaluatedCandidate[T]]:
        """Run evolution with a validated configuration."""
        self._begin()
        logger.info(
            "[EvolutionEngine] Start | population_size={}, elite_count={}, seeds={}, conditions={}",
            config.population_size,
            config.elite_count,
            len(config.seed_candidates),
            config.conditions,
        )

        try:
            return self._evolve(config)
        except EvolutionInterrupted:
            ranked = self._current_population
            self._finish(TerminationReason.INTERRUPTED, [])
            logger.warning(
                "[EvolutionEngine] Interrupted | returning last ranked population ({} candidate(s))",
                len(ranked),
            )
            return ranked
        except BaseException as exc:
            self._fail(exc)
            raise

    def satisfied_termination_conditions(self) -> list[TerminationCondition]:
        """Conditions that ended the last run, in the order they were supplied.

        Empty if the last run was interrupted.

        Raises:
            NotTerminatedError: no run has completed yet, or one is in progress
        """
        if self._satisfied_conditions is None:
            raise NotTerminatedError("EvolutionEngine has not terminated.")
        return list(self._satisfied_conditions)

    def add_evolution_observer(self, observer: EvolutionObserver) -> None:
        self._observers.add(observer)

    def remove_evolution_observer(self, observer: EvolutionObserver) -> None:
        self._observers.remove(observer)

    def abort(self) -> None:
        """Request cancellation of the current run. Safe to call from any thread."""
        self._abort.set()

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def termination_reason(self) -> TerminationReason | None:
        return self._termination_reason

    def get_status(self) -> dict[str, Any]:
        """Light status for UIs and health checks."""
        return {
            "state": self._state.value,
            "termination_reason": (
                self._termination_reason.value if self._termination_reason else None
            ),
            "observers": len(self._observers),
            **self.metrics.to_dict(),
        }

    # Extension points

    @abstractmethod
    def next_evolution_step(
        self,
        evaluated_population: list[EvaluatedCandidate[T]],
        elite_count: int,
        rng: random.Random,
    ) -> list[EvaluatedCandidate[T]]:
        """
        Produce the next generation from the current one.

        Args:
            evaluated_population: Current population, ranked fittest first
            elite_count: Number of leading candidates that must be carried over
                unchanged, with their existing scores
            rng: The only source of randomness the step may use

        Returns:
            Evaluated candidates of the next generation, same size, in any order
        """

    def evaluate_population(self, population: Sequence[T]) -> list[EvaluatedCandidate[T]]:
        """Score raw candidates through the evaluation strategy, honouring abort()."""
        evaluated = self.evaluation_strategy.evaluate_population(
            population, cancel_event=self._abort
        )
        self.metrics.record_evaluations(len(population))
        return evaluated

    @property
    def natural(self) -> bool:
        """Polarity of the current (or last) run."""
        if self._natural is None:
            return self.evaluation_strategy.is_natural()
        return self._natural

    # Internals

    def _evolve(self, config: EngineConfig) -> list[EvaluatedCandidate[T]]:
        start_time = time.time()
        generation_index = 0
        natural = self._natural = self.evaluation_strategy.is_natural()

        population = self.candidate_factory.generate_initial_population(
            config.population_size, list(config.seed_candidates), self.rng
        )
        self._check_size(population, config.population_size, "Candidate factory")
        evaluated = self.evaluate_population(population)

        while True:
            self._check_polarity(natural)
            ranked = sort_evaluated_population(evaluated, natural)
            self._current_population = ranked
            self.metrics.record_generation()

            snapshot = build_snapshot(
                ranked,
                natural=natural,
                elite_count=config.elite_count,
                generation_index=generation_index,
                start_time=start_time,
            )
            self._notify(snapshot)

            satisfied = collect_satisfied_conditions(snapshot, config.conditions)
            if satisfied:
                self._finish(TerminationReason.CONDITIONS_MET, satisfied)
                logger.info(
                    "[EvolutionEngine] Stop: {} | generations={}, best_fitness={}",
                    satisfied,
                    generation_index + 1,
                    snapshot.best_fitness,
                )
                return ranked

            if self._abort.is_set():
                raise EvolutionInterrupted("Evolution aborted")

            generation_index += 1
            evaluated = self.next_evolution_step(
                list(ranked), config.elite_count, self.rng
            )
            self._check_size(evaluated, config.population_size, "Evolution step")

    def _notify(self, snapshot: PopulationSnapshot) -> None:
        logger.debug(
            "[EvolutionEngine] Generation {} | best={}, mean={:.4f}, std={:.4f}",
            snapshot.generation_index,
            snapshot.best_fitness,
            snapshot.mean_fitness,
            snapshot.fitness_std_dev,
        )
        self._observers.notify(snapshot)

    def _begin(self) -> None:
        validate_transition(self._state, EngineState.RUNNING)
        self._state = EngineState.RUNNING
        self._satisfied_conditions = None
        self._termination_reason = None
        self._natural = None
        self._current_population = []
        self._abort.clear()
        self.metrics.runs_started += 1

    def _finish(
        self, reason: TerminationReason, satisfied: list[TerminationCondition]
    ) -> None:
        validate_transition(self._state, EngineState.TERMINATED)
        self._state = EngineState.TERMINATED
        self._termination_reason = reason
        self._satisfied_conditions = list(satisfied)
        if reason is TerminationReason.INTERRUPTED:
            self.metrics.runs_interrupted += 1
        else:
            self.metrics.runs_completed += 1

    def _fail(self, exc: BaseException) -> None:
        self._state = EngineState.FAILED
        self._termination_reason = None
        self._satisfied_conditions = None
        self.metrics.runs_failed += 1
        logger.error("[EvolutionEngine] Run failed: {}: {}", type(exc).__name__, exc)

    def _check_polarity(self, natural: bool) -> None:
        if self.evaluation_strategy.is_natural() != natural:
            raise ContractViolationError(
                "Evaluation strategy changed fitness polarity during a run"
            )

    @staticmethod
    def _check_size(population: Sequence[Any], expected: int, source: str) -> None:
        if len(population) != expected:
            raise ContractViolationError(
                f"{source} returned {len(population)} candidates, expected {expected}"
            )
