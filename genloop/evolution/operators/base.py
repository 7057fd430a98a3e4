from abc import ABC, abstractmethod
import random
from typing import Generic, TypeVar

T = TypeVar("T")


class EvolutionaryOperator(ABC, Generic[T]):
    """Transforms a batch of selected candidates into offspring."""

    @abstractmethod
    def apply(self, selected_candidates: list[T], rng: random.Random) -> list[T]:
        """
        Args:
            selected_candidates: Candidates picked by the selection strategy.
                Operators must not modify them in place.
            rng: The only source of randomness the operator may use

        Returns:
            Offspring, one per selected candidate
        """
