from __future__ import annotations

from collections.abc import Sequence
import statistics
import time
from typing import TYPE_CHECKING

from genloop.population.models import EvaluatedCandidate, PopulationSnapshot

if TYPE_CHECKING:
    from genloop.evolution.termination.base import TerminationCondition


def sort_evaluated_population(
    population: Sequence[EvaluatedCandidate], natural: bool
) -> list[EvaluatedCandidate]:
    """Return the population ordered fittest-first.

    Descending fitness for natural scores, ascending otherwise. The sort is
    stable, so equal scores keep their incoming order.
    """
    return sorted(population, key=lambda ec: ec.fitness, reverse=natural)


def build_snapshot(
    ranked_population: Sequence[EvaluatedCandidate],
    *,
    natural: bool,
    elite_count: int,
    generation_index: int,
    start_time: float,
) -> PopulationSnapshot:
    """Derive generation statistics from an already ranked population."""
    if not ranked_population:
        raise ValueError("Cannot build a snapshot of an empty population")

    fitnesses = [ec.fitness for ec in ranked_population]
    best = ranked_population[0]
    elapsed_ms = max(0.0, (time.time() - start_time) * 1000.0)

    return PopulationSnapshot(
        best_candidate=best.candidate,
        best_fitness=best.fitness,
        mean_fitness=statistics.mean(fitnesses),
        fitness_std_dev=statistics.pstdev(fitnesses),
        population_size=len(ranked_population),
        elite_count=elite_count,
        natural=natural,
        generation_index=generation_index,
        start_time=start_time,
        elapsed_time=elapsed_ms,
    )


def collect_satisfied_conditions(
    snapshot: PopulationSnapshot, conditions: Sequence["TerminationCondition"]
) -> list["TerminationCondition"]:
    """Consult every condition in order; return those that fired, each once."""
    satisfied: list[TerminationCondition] = []
    for condition in conditions:
        if any(condition is seen for seen in satisfied):
            continue
        if condition.should_terminate(snapshot):
            satisfied.append(condition)
    return satisfied
