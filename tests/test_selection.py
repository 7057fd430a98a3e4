"""Tests for the selection strategies."""

from collections import Counter
import random

import pytest

from genloop.evolution.strategies import (
    RouletteWheelSelection,
    TournamentSelection,
    TruncationSelection,
)
from genloop.population.models import EvaluatedCandidate


def ranked(*pairs):
    return [EvaluatedCandidate(candidate, fitness) for candidate, fitness in pairs]


class TestTournamentSelection:
    def test_certain_tournament_never_picks_the_weakest(self, rng):
        population = ranked(("a", 3.0), ("b", 2.0), ("c", 1.0))
        selection = TournamentSelection(1.0).select(population, True, 200, rng)

        assert len(selection) == 200
        # "c" can only win a tournament against itself.
        counts = Counter(selection)
        assert counts["a"] > counts["c"]

    def test_non_natural_prefers_low_scores(self, rng):
        population = ranked(("low", 1.0), ("high", 100.0))
        selection = TournamentSelection(1.0).select(population, False, 500, rng)
        counts = Counter(selection)
        assert counts["low"] > counts["high"]

    def test_deterministic_with_seed(self):
        population = ranked(("a", 3.0), ("b", 2.0), ("c", 1.0))
        strategy = TournamentSelection(0.8)
        first = strategy.select(population, True, 20, random.Random(7))
        second = strategy.select(population, True, 20, random.Random(7))
        assert first == second

    @pytest.mark.parametrize("probability", [0.5, 0.0, 1.1])
    def test_rejects_invalid_probability(self, probability):
        with pytest.raises(ValueError):
            TournamentSelection(probability)


class TestTruncationSelection:
    def test_repeats_top_fraction_in_rank_order(self, rng):
        population = ranked(("a", 4.0), ("b", 3.0), ("c", 2.0), ("d", 1.0))
        selection = TruncationSelection(0.5).select(population, True, 5, rng)
        assert selection == ["a", "b", "a", "b", "a"]

    def test_at_least_one_eligible(self, rng):
        population = ranked(("a", 4.0), ("b", 3.0))
        selection = TruncationSelection(0.1).select(population, True, 3, rng)
        assert selection == ["a", "a", "a"]

    @pytest.mark.parametrize("ratio", [0.0, 1.5])
    def test_rejects_invalid_ratio(self, ratio):
        with pytest.raises(ValueError):
            TruncationSelection(ratio)


class TestRouletteWheelSelection:
    def test_zero_weight_never_selected(self, rng):
        population = ranked(("a", 5.0), ("b", 0.0))
        selection = RouletteWheelSelection().select(population, True, 100, rng)
        assert set(selection) == {"a"}

    def test_non_natural_zero_cost_is_perfect(self, rng):
        population = ranked(("perfect", 0.0), ("ok", 1.0), ("bad", 10.0))
        selection = RouletteWheelSelection().select(population, False, 50, rng)
        assert set(selection) == {"perfect"}

    def test_non_natural_uses_inverse_weights(self, rng):
        population = ranked(("cheap", 1.0), ("expensive", 100.0))
        selection = RouletteWheelSelection().select(population, False, 500, rng)
        counts = Counter(selection)
        assert counts["cheap"] > counts["expensive"]

    def test_all_zero_falls_back_to_uniform(self, rng):
        population = ranked(("a", 0.0), ("b", 0.0))
        selection = RouletteWheelSelection().select(population, True, 100, rng)
        assert set(selection) == {"a", "b"}

    def test_negative_fitness_rejected(self, rng):
        with pytest.raises(ValueError):
            RouletteWheelSelection().select(ranked(("a", -1.0)), False, 1, rng)
