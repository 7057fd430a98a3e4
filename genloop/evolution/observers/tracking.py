from genloop.evolution.observers.base import EvolutionObserver
from genloop.population.models import PopulationSnapshot
from genloop.utils.trackers.base import LogWriter


class TrackerObserver(EvolutionObserver):
    """Writes per-generation statistics as scalars, stepped by generation index."""

    def __init__(self, writer: LogWriter, path: str = "evolution"):
        self._writer = writer.bind(path=[path])

    def population_update(self, snapshot: PopulationSnapshot) -> None:
        step = snapshot.generation_index
        self._writer.scalar("best_fitness", snapshot.best_fitness, step=step)
        self._writer.scalar("mean_fitness", snapshot.mean_fitness, step=step)
        self._writer.scalar("fitness_std_dev", snapshot.fitness_std_dev, step=step)
        self._writer.scalar("elapsed_ms", snapshot.elapsed_time, step=step)
