import pytest

from genloop.evolution.operators import EvolutionPipeline, IdentityOperator
from tests.helpers import Doubler, RandomStep


def test_identity_returns_a_copy(rng):
    selected = [1, 2, 3]
    result = IdentityOperator().apply(selected, rng)
    assert result == selected
    assert result is not selected


def test_pipeline_applies_operators_in_order(rng):
    pipeline = EvolutionPipeline([Doubler(), IdentityOperator(), Doubler()])
    assert pipeline.apply([1, 2, 3], rng) == [4, 8, 12]


def test_pipeline_does_not_touch_input(rng):
    selected = [1, 2]
    EvolutionPipeline([RandomStep(), Doubler()]).apply(selected, rng)
    assert selected == [1, 2]


def test_empty_pipeline_rejected():
    with pytest.raises(ValueError):
        EvolutionPipeline([])
