from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import Executor, Future, wait
import math
import threading
from typing import TypeVar

from loguru import logger

from genloop.evolution.evaluation.base import EvaluationStrategy, FitnessEvaluator
from genloop.evolution.evaluation.worker import get_shared_executor
from genloop.exceptions import (
    ContractViolationError,
    EvaluationFailedError,
    EvolutionInterrupted,
)
from genloop.population.models import EvaluatedCandidate

__all__ = ["IndividualFitnessEvaluationStrategy"]

T = TypeVar("T")

# How often a pending future re-checks the cancel token, in seconds.
CANCEL_POLL_INTERVAL = 0.05


class IndividualFitnessEvaluationStrategy(EvaluationStrategy[T]):
    """
    Scores every candidate independently with a single FitnessEvaluator.

    - Sequential mode: candidates are scored on the calling thread, in order.
    - Parallel mode: one task per candidate is submitted to a worker pool
      (the process-wide shared pool unless an executor is injected) and the
      results are collected in submission order.

    Every evaluator call receives the same immutable tuple over the full
    population.
    """

    def __init__(
        self,
        fitness_evaluator: FitnessEvaluator[T],
        *,
        single_threaded: bool = False,
        executor: Executor | None = None,
    ):
        self.fitness_evaluator = fitness_evaluator
        self._single_threaded = single_threaded
        self._executor = executor

    @property
    def single_threaded(self) -> bool:
        return self._single_threaded

    def set_single_threaded(self, single_threaded: bool) -> None:
        self._single_threaded = single_threaded

    def is_natural(self) -> bool:
        return self.fitness_evaluator.is_natural()

    def evaluate_population(
        self,
        population: Sequence[T],
        cancel_event: threading.Event | None = None,
    ) -> list[EvaluatedCandidate[T]]:
        view = tuple(population)
        natural = self.is_natural()

        if self._single_threaded:
            scores = self._evaluate_sequential(view, cancel_event)
        else:
            scores = self._evaluate_parallel(view, cancel_event)

        return [
            self._wrap(candidate, fitness, natural)
            for candidate, fitness in zip(view, scores)
        ]

    def _evaluate_sequential(
        self, view: tuple[T, ...], cancel_event: threading.Event | None
    ) -> list[float]:
        scores = []
        for candidate in view:
            if cancel_event is not None and cancel_event.is_set():
                raise EvolutionInterrupted("Evaluation cancelled")
            try:
                scores.append(self.fitness_evaluator.get_fitness(candidate, view))
            except Exception as exc:
                logger.debug("[FitnessEvaluation] Evaluator raised: {}", exc)
                raise EvaluationFailedError(
                    f"Fitness evaluation failed: {exc}", candidate=candidate
                ) from exc
        return scores

    def _evaluate_parallel(
        self, view: tuple[T, ...], cancel_event: threading.Event | None
    ) -> list[float]:
        executor = self._executor or get_shared_executor()
        futures: list[Future] = [
            executor.submit(self.fitness_evaluator.get_fitness, candidate, view)
            for candidate in view
        ]
        logger.debug("[FitnessEvaluation] Submitted {} task(s)", len(futures))

        try:
            scores = []
            for candidate, future in zip(view, futures):
                self._await(future, cancel_event)
                exc = future.exception()
                if exc is not None:
                    logger.debug("[FitnessEvaluation] Task raised: {}", exc)
                    raise EvaluationFailedError(
                        f"Fitness evaluation failed: {exc}", candidate=candidate
                    ) from exc
                scores.append(future.result())
            return scores
        except BaseException:
            cancelled = sum(1 for f in futures if f.cancel())
            if cancelled:
                logger.debug("[FitnessEvaluation] Cancelled {} pending task(s)", cancelled)
            raise

    @staticmethod
    def _await(future: Future, cancel_event: threading.Event | None) -> None:
        if cancel_event is None:
            wait([future])
            return
        while True:
            if cancel_event.is_set():
                raise EvolutionInterrupted("Evaluation cancelled")
            done, _ = wait([future], timeout=CANCEL_POLL_INTERVAL)
            if done:
                return

    @staticmethod
    def _wrap(candidate: T, fitness: float, natural: bool) -> EvaluatedCandidate[T]:
        try:
            valid = math.isfinite(fitness) and (fitness >= 0 or not natural)
        except TypeError:
            valid = False
        if not valid:
            raise ContractViolationError(
                f"Evaluator returned invalid fitness {fitness!r} "
                f"(natural={natural}) for candidate {candidate!r}"
            )
        return EvaluatedCandidate(candidate=candidate, fitness=fitness)
