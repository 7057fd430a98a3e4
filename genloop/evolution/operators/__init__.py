from genloop.evolution.operators.base import EvolutionaryOperator
from genloop.evolution.operators.pipeline import EvolutionPipeline, IdentityOperator

__all__ = ["EvolutionPipeline", "EvolutionaryOperator", "IdentityOperator"]
