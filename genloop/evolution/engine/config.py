from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from genloop.evolution.termination.base import TerminationCondition
from genloop.exceptions import InvalidArgumentError


class EngineConfig(BaseModel):
    """Parameters of a single evolution run."""

    population_size: int = Field(gt=0, description="Number of candidates per generation")
    elite_count: int = Field(
        default=0,
        ge=0,
        description="Fittest candidates carried forward unchanged each generation",
    )
    seed_candidates: list[Any] = Field(
        default_factory=list,
        description="Candidates placed verbatim in the initial population",
    )
    conditions: list[TerminationCondition] = Field(
        min_length=1, description="Termination conditions, consulted in this order"
    )

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    @model_validator(mode="after")
    def validate_sizes(self):
        if self.elite_count >= self.population_size:
            raise ValueError(
                f"elite_count ({self.elite_count}) must be less than "
                f"population_size ({self.population_size})"
            )
        if len(self.seed_candidates) > self.population_size:
            raise ValueError(
                f"Too many seed candidates ({len(self.seed_candidates)}) "
                f"for population size {self.population_size}"
            )
        return self

    @classmethod
    def build(
        cls,
        population_size: int,
        elite_count: int,
        conditions: Sequence[TerminationCondition],
        seed_candidates: Sequence[Any] | None = None,
    ) -> EngineConfig:
        """Validate raw engine arguments, reporting problems as InvalidArgumentError."""
        try:
            return cls(
                population_size=population_size,
                elite_count=elite_count,
                seed_candidates=list(seed_candidates or []),
                conditions=list(conditions),
            )
        except ValidationError as exc:
            raise InvalidArgumentError(str(exc)) from exc
