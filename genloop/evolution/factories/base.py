from abc import ABC, abstractmethod
from collections.abc import Sequence
import random
from typing import Generic, TypeVar

from loguru import logger

from genloop.exceptions import InvalidArgumentError

T = TypeVar("T")


class CandidateFactory(ABC, Generic[T]):
    """Creates the initial population of a run."""

    @abstractmethod
    def generate_initial_population(
        self,
        population_size: int,
        seed_candidates: Sequence[T],
        rng: random.Random,
    ) -> list[T]:
        """
        Create exactly ``population_size`` candidates.

        Args:
            population_size: Number of candidates to return
            seed_candidates: Candidates that must appear verbatim in the result
            rng: The only source of randomness for the generated remainder

        Returns:
            List of candidates, seeds included
        """


class AbstractCandidateFactory(CandidateFactory[T]):
    """Seeds first, in the order given, then random candidates to fill the population."""

    @abstractmethod
    def generate_random_candidate(self, rng: random.Random) -> T:
        """Create a single random candidate using ``rng``."""

    def generate_initial_population(
        self,
        population_size: int,
        seed_candidates: Sequence[T] = (),
        rng: random.Random | None = None,
    ) -> list[T]:
        if rng is None:
            raise InvalidArgumentError("rng is required")
        if len(seed_candidates) > population_size:
            raise InvalidArgumentError(
                f"Too many seed candidates ({len(seed_candidates)}) "
                f"for population size {population_size}"
            )

        population = list(seed_candidates)
        while len(population) < population_size:
            population.append(self.generate_random_candidate(rng))

        logger.debug(
            "[{}] Initial population: {} seeded, {} random",
            type(self).__name__,
            len(seed_candidates),
            population_size - len(seed_candidates),
        )
        return population
