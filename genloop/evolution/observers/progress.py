from loguru import logger

from genloop.evolution.observers.base import EvolutionObserver
from genloop.population.models import PopulationSnapshot


class ProgressLogObserver(EvolutionObserver):
    """Logs generation statistics every ``every`` generations."""

    def __init__(self, every: int = 1, level: str = "INFO"):
        if every < 1:
            raise ValueError(f"every must be at least 1, got {every}")
        self.every = every
        self.level = level

    def population_update(self, snapshot: PopulationSnapshot) -> None:
        if snapshot.generation_index % self.every != 0:
            return
        logger.log(
            self.level,
            "[Evolution] gen={} | best={:.4f} | mean={:.4f} | std={:.4f} | elapsed={:.0f}ms",
            snapshot.generation_index,
            snapshot.best_fitness,
            snapshot.mean_fitness,
            snapshot.fitness_std_dev,
            snapshot.elapsed_time,
        )
