from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from genloop.exceptions import ContractViolationError

T = TypeVar("T")


@dataclass(frozen=True)
class EvaluatedCandidate(Generic[T]):
    """A candidate paired with the fitness score it was assigned."""

    candidate: T
    fitness: float

    def __post_init__(self):
        try:
            finite = math.isfinite(self.fitness)
        except TypeError:
            finite = False
        if not finite:
            raise ContractViolationError(
                f"Fitness must be a finite number, got {self.fitness!r}"
            )


class PopulationSnapshot(BaseModel):
    """Immutable statistics of one ranked population, shared with observers and conditions."""

    best_candidate: Any = Field(description="Fittest candidate (index 0 of the ranking)")
    best_fitness: float = Field(description="Fitness of the fittest candidate")
    mean_fitness: float = Field(description="Arithmetic mean of all fitness scores")
    fitness_std_dev: float = Field(
        ge=0, description="Population standard deviation of all fitness scores"
    )
    population_size: int = Field(gt=0)
    elite_count: int = Field(ge=0)
    natural: bool = Field(description="True if higher fitness is better")
    generation_index: int = Field(ge=0, description="0 for the initial population")
    start_time: float = Field(description="Run start, seconds since the epoch")
    elapsed_time: float = Field(ge=0, description="Milliseconds since the run started")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
