from genloop.population.models import EvaluatedCandidate, PopulationSnapshot
from genloop.population.ranking import (
    build_snapshot,
    collect_satisfied_conditions,
    sort_evaluated_population,
)

__all__ = [
    "EvaluatedCandidate",
    "PopulationSnapshot",
    "build_snapshot",
    "collect_satisfied_conditions",
    "sort_evaluated_population",
]
