from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
import threading
from typing import Generic, TypeVar

from genloop.population.models import EvaluatedCandidate

T = TypeVar("T")


class FitnessEvaluator(ABC, Generic[T]):
    """Scores a single candidate."""

    @abstractmethod
    def get_fitness(self, candidate: T, population: Sequence[T]) -> float:
        """
        Calculate the fitness score of ``candidate``.

        Args:
            candidate: The candidate to score
            population: Read-only view of the whole population the candidate
                belongs to, for scores that depend on siblings

        Returns:
            A finite score; non-negative when ``is_natural()`` is True
        """

    @abstractmethod
    def is_natural(self) -> bool:
        """True if a higher score means a fitter candidate. Must not change."""


class EvaluationStrategy(ABC, Generic[T]):
    """Maps a raw population to evaluated candidates."""

    @abstractmethod
    def evaluate_population(
        self,
        population: Sequence[T],
        cancel_event: threading.Event | None = None,
    ) -> list[EvaluatedCandidate[T]]:
        """
        Assign a fitness score to each member of ``population``.

        Results are returned in population order; ranking is the caller's job.

        Raises:
            EvaluationFailedError: a fitness evaluation raised
            EvolutionInterrupted: ``cancel_event`` was set before all scores arrived
        """

    @abstractmethod
    def is_natural(self) -> bool:
        """True if a higher score means a fitter candidate."""

    @abstractmethod
    def set_single_threaded(self, single_threaded: bool) -> None:
        """Force evaluation onto the calling thread (True) or the worker pool (False)."""
