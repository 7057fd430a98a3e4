from abc import ABC, abstractmethod

from genloop.population.models import PopulationSnapshot


class TerminationCondition(ABC):
    """Decides, once per generation, whether a run should stop."""

    @abstractmethod
    def should_terminate(self, snapshot: PopulationSnapshot) -> bool:
        """
        Args:
            snapshot: Statistics of the current ranked population

        Returns:
            True if evolution should stop after this generation
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
