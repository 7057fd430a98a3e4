"""Plug-in doubles shared by the test suite."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
import random
import time

from genloop.evolution.engine.core import EvolutionEngine
from genloop.evolution.evaluation.base import FitnessEvaluator
from genloop.evolution.evaluation.individual import IndividualFitnessEvaluationStrategy
from genloop.evolution.factories.base import AbstractCandidateFactory, CandidateFactory
from genloop.evolution.observers.base import EvolutionObserver
from genloop.evolution.operators.base import EvolutionaryOperator
from genloop.evolution.termination.base import TerminationCondition
from genloop.population.models import EvaluatedCandidate, PopulationSnapshot


@dataclass(frozen=True)
class Item:
    value: float


class FixedFactory(CandidateFactory[Item]):
    """Seeds first, then values from a fixed list."""

    def __init__(self, values: Sequence[float]):
        self.values = list(values)
        self.calls = 0

    def generate_initial_population(self, population_size, seed_candidates, rng):
        self.calls += 1
        population = list(seed_candidates)
        for value in self.values:
            if len(population) >= population_size:
                break
            population.append(Item(value))
        return population


class RandomIntFactory(AbstractCandidateFactory[int]):
    def __init__(self, low: int = 0, high: int = 100):
        self.low = low
        self.high = high

    def generate_random_candidate(self, rng: random.Random) -> int:
        return rng.randint(self.low, self.high)


class ValueEvaluator(FitnessEvaluator):
    """Fitness is the candidate itself (ints) or its ``value`` attribute."""

    def __init__(self, natural: bool = True, delay: Callable[[float], float] | None = None):
        self.natural = natural
        self.delay = delay
        self.seen_populations: list[Sequence] = []

    def get_fitness(self, candidate, population) -> float:
        self.seen_populations.append(population)
        value = candidate.value if isinstance(candidate, Item) else candidate
        if self.delay is not None:
            time.sleep(self.delay(value))
        return float(value)

    def is_natural(self) -> bool:
        return self.natural


class RecordingObserver(EvolutionObserver):
    def __init__(self, on_update: Callable[[PopulationSnapshot], None] | None = None):
        self.snapshots: list[PopulationSnapshot] = []
        self.on_update = on_update

    def population_update(self, snapshot: PopulationSnapshot) -> None:
        self.snapshots.append(snapshot)
        if self.on_update is not None:
            self.on_update(snapshot)


class GenerationAtLeast(TerminationCondition):
    def __init__(self, generation: int):
        self.generation = generation

    def should_terminate(self, snapshot: PopulationSnapshot) -> bool:
        return snapshot.generation_index >= self.generation


class Constant(TerminationCondition):
    def __init__(self, result: bool):
        self.result = result
        self.calls = 0

    def should_terminate(self, snapshot: PopulationSnapshot) -> bool:
        self.calls += 1
        return self.result


class ScriptedEngine(EvolutionEngine):
    """Engine whose next step is an arbitrary function."""

    def __init__(self, factory, strategy, step, rng=None):
        super().__init__(factory, strategy, rng)
        self.step = step

    def next_evolution_step(self, evaluated_population, elite_count, rng):
        return self.step(self, evaluated_population, elite_count, rng)


def keep_population(engine, evaluated_population, elite_count, rng):
    return list(evaluated_population)


def zero_non_elite(engine, evaluated_population, elite_count, rng):
    elite = evaluated_population[:elite_count]
    clones = [
        EvaluatedCandidate(candidate=Item(0.0), fitness=0.0)
        for _ in evaluated_population[elite_count:]
    ]
    return [*elite, *clones]


def sequential(evaluator: FitnessEvaluator) -> IndividualFitnessEvaluationStrategy:
    return IndividualFitnessEvaluationStrategy(evaluator, single_threaded=True)


class RandomStep(EvolutionaryOperator[int]):
    """Adds a random offset in [-spread, spread] to every candidate."""

    def __init__(self, spread: int = 3):
        self.spread = spread

    def apply(self, selected_candidates, rng):
        return [c + rng.randint(-self.spread, self.spread) for c in selected_candidates]


class Doubler(EvolutionaryOperator[int]):
    def apply(self, selected_candidates, rng):
        return [c * 2 for c in selected_candidates]


class DistanceEvaluator(FitnessEvaluator):
    """Non-natural: absolute distance of an integer candidate from ``target``."""

    def __init__(self, target: int):
        self.target = target

    def get_fitness(self, candidate, population) -> float:
        return float(abs(candidate - self.target))

    def is_natural(self) -> bool:
        return False
