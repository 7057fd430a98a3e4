from genloop.evolution.observers.base import EvolutionObserver, ObserverRegistry
from genloop.evolution.observers.progress import ProgressLogObserver
from genloop.evolution.observers.tracking import TrackerObserver

__all__ = [
    "EvolutionObserver",
    "ObserverRegistry",
    "ProgressLogObserver",
    "TrackerObserver",
]
