from __future__ import annotations

from genloop.evolution.engine.config import EngineConfig
from genloop.evolution.engine.core import EvolutionEngine
from genloop.evolution.engine.generational import GenerationalEvolutionEngine
from genloop.evolution.engine.metrics import EngineMetrics
from genloop.evolution.engine.state import EngineState, TerminationReason

__all__ = [
    "EngineConfig",
    "EngineMetrics",
    "EngineState",
    "EvolutionEngine",
    "GenerationalEvolutionEngine",
    "TerminationReason",
]
