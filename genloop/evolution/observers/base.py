from __future__ import annotations

from abc import ABC, abstractmethod
import threading

from genloop.population.models import PopulationSnapshot


class EvolutionObserver(ABC):
    """Receives a snapshot of every generation, synchronously on the engine's thread."""

    @abstractmethod
    def population_update(self, snapshot: PopulationSnapshot) -> None:
        """
        Called once per generation, after ranking and before termination checks.

        Exceptions propagate to the caller of the engine and abort the run.
        """


class ObserverRegistry:
    """
    Copy-on-write observer set, iterated in registration order.

    Writers replace the stored tuple under a lock; a notification pass keeps
    the tuple it started with, so concurrent add/remove never affects it.
    """

    def __init__(self):
        self._observers: tuple[EvolutionObserver, ...] = ()
        self._lock = threading.Lock()

    def add(self, observer: EvolutionObserver) -> None:
        with self._lock:
            if any(o is observer for o in self._observers):
                return
            self._observers = (*self._observers, observer)

    def remove(self, observer: EvolutionObserver) -> None:
        with self._lock:
            self._observers = tuple(o for o in self._observers if o is not observer)

    def snapshot(self) -> tuple[EvolutionObserver, ...]:
        return self._observers

    def notify(self, snapshot: PopulationSnapshot) -> None:
        for observer in self._observers:
            observer.population_update(snapshot)

    def __len__(self) -> int:
        return len(self._observers)
