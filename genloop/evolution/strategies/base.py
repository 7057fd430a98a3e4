from abc import ABC, abstractmethod
from collections.abc import Sequence
import random
from typing import TypeVar

from genloop.population.models import EvaluatedCandidate

T = TypeVar("T")


class SelectionStrategy(ABC):
    """Picks the candidates that will breed the next generation."""

    @abstractmethod
    def select(
        self,
        population: Sequence[EvaluatedCandidate[T]],
        natural: bool,
        selection_size: int,
        rng: random.Random,
    ) -> list[T]:
        """
        Args:
            population: Ranked population, fittest first
            natural: True if a higher score means a fitter candidate
            selection_size: Number of candidates to return (repeats allowed)
            rng: The only source of randomness the strategy may use

        Returns:
            Selected candidates (unwrapped from their scores)
        """
