from genloop.evolution.strategies.base import SelectionStrategy
from genloop.evolution.strategies.selectors import (
    RouletteWheelSelection,
    TournamentSelection,
    TruncationSelection,
)

__all__ = [
    "RouletteWheelSelection",
    "SelectionStrategy",
    "TournamentSelection",
    "TruncationSelection",
]
