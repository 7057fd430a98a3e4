from __future__ import annotations

from pydantic import BaseModel, Field


class EngineMetrics(BaseModel):
    """Counters accumulated over the lifetime of one engine instance."""

    runs_started: int = Field(default=0, description="Runs that passed validation")
    runs_completed: int = Field(
        default=0, description="Runs stopped by a termination condition"
    )
    runs_interrupted: int = Field(default=0, description="Runs stopped by abort()")
    runs_failed: int = Field(default=0, description="Runs aborted by an error")
    total_generations: int = Field(
        default=0, description="Generations ranked, initial populations included"
    )
    candidates_evaluated: int = Field(
        default=0, description="Fitness evaluations requested from the strategy"
    )

    def record_generation(self) -> None:
        self.total_generations += 1

    def record_evaluations(self, count: int) -> None:
        self.candidates_evaluated += count

    def to_dict(self) -> dict[str, int]:
        return self.model_dump()
