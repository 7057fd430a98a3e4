"""End-to-end tests for GenerationalEvolutionEngine."""

from concurrent.futures import ThreadPoolExecutor
import random

import pytest

from genloop.evolution.engine.generational import GenerationalEvolutionEngine
from genloop.evolution.evaluation.individual import IndividualFitnessEvaluationStrategy
from genloop.evolution.operators import EvolutionPipeline, IdentityOperator
from genloop.evolution.strategies import TournamentSelection, TruncationSelection
from genloop.evolution.termination import GenerationCount, TargetFitness
from genloop.exceptions import ContractViolationError
from tests.helpers import (
    DistanceEvaluator,
    RandomIntFactory,
    RandomStep,
    RecordingObserver,
)

TARGET = 50


class RecordingEngine(GenerationalEvolutionEngine):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.steps = []

    def next_evolution_step(self, evaluated_population, elite_count, rng):
        result = super().next_evolution_step(evaluated_population, elite_count, rng)
        self.steps.append((list(evaluated_population), result))
        return result


def make_engine(
    seed=123,
    strategy=None,
    engine_cls=GenerationalEvolutionEngine,
    scheme=None,
    factory=None,
):
    evaluator = DistanceEvaluator(TARGET)
    return engine_cls(
        factory or RandomIntFactory(0, 1000),
        scheme or EvolutionPipeline([RandomStep(5)]),
        strategy or IndividualFitnessEvaluationStrategy(evaluator, single_threaded=True),
        TournamentSelection(0.8),
        rng=random.Random(seed),
    )


def test_seeded_runs_are_identical():
    first = make_engine().evolve_population(20, 2, [GenerationCount(15)])
    second = make_engine().evolve_population(20, 2, [GenerationCount(15)])
    assert first == second


def test_parallel_matches_sequential():
    sequential = make_engine().evolve_population(20, 2, [GenerationCount(10)])
    with ThreadPoolExecutor(max_workers=4) as pool:
        strategy = IndividualFitnessEvaluationStrategy(
            DistanceEvaluator(TARGET), executor=pool
        )
        parallel = make_engine(strategy=strategy).evolve_population(
            20, 2, [GenerationCount(10)]
        )
    assert parallel == sequential


def test_elites_carried_forward_unchanged():
    engine = make_engine(engine_cls=RecordingEngine)
    engine.evolve_population(10, 3, [GenerationCount(6)])

    assert len(engine.steps) == 5
    for ranked, next_generation in engine.steps:
        assert next_generation[:3] == ranked[:3]
        for elite in ranked[:3]:
            assert any(elite is candidate for candidate in next_generation)


def test_best_fitness_never_worsens_with_elitism():
    # Start far from the target so there is room to improve.
    engine = make_engine(seed=5, factory=RandomIntFactory(500, 1000))
    observer = RecordingObserver()
    engine.add_evolution_observer(observer)

    engine.evolve_population(30, 1, [GenerationCount(40), TargetFitness(0, natural=False)])

    best = [s.best_fitness for s in observer.snapshots]
    assert all(later <= earlier for earlier, later in zip(best, best[1:]))
    assert best[-1] < best[0]


def test_only_offspring_are_evaluated():
    engine = make_engine()
    engine.evolve_population(10, 4, [GenerationCount(3)])
    # initial population + two steps of (10 - 4) offspring
    assert engine.metrics.candidates_evaluated == 10 + 2 * 6


def test_accepts_bare_fitness_evaluator():
    engine = GenerationalEvolutionEngine(
        RandomIntFactory(),
        IdentityOperator(),
        DistanceEvaluator(TARGET),
        TruncationSelection(0.5),
        rng=random.Random(1),
    )
    assert isinstance(engine.evaluation_strategy, IndividualFitnessEvaluationStrategy)
    assert engine.evaluation_strategy.single_threaded is False
    assert engine.natural is False


def test_seeds_survive_into_initial_population():
    engine = make_engine()
    observer = RecordingObserver()
    engine.add_evolution_observer(observer)

    best = engine.evolve_best(10, 1, [GenerationCount(1)], seed_candidates=[TARGET])

    assert best == TARGET
    assert observer.snapshots[0].best_fitness == 0


def test_scheme_returning_wrong_offspring_count():
    class Dropper(IdentityOperator):
        def apply(self, selected_candidates, rng):
            return list(selected_candidates)[1:]

    engine = make_engine(scheme=Dropper())
    with pytest.raises(ContractViolationError, match="offspring"):
        engine.evolve_population(10, 1, [GenerationCount(3)])
