from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Sequence

from marblevo.exceptions import EmptyPopulationError

if TYPE_CHECKING:
    from marblevo.evolution.individual import MarbleIndividual


class Population:
    """Ordered individuals of one generation."""

    def __init__(self, individuals: Sequence[MarbleIndividual] = ()):
        self._individuals: list[MarbleIndividual] = list(individuals)

    def __len__(self) -> int:
        return len(self._individuals)

    def __iter__(self) -> Iterator[MarbleIndividual]:
        return iter(self._individuals)

    def __getitem__(self, index: int) -> MarbleIndividual:
        return self._individuals[index]

    @property
    def individuals(self) -> list[MarbleIndividual]:
        return list(self._individuals)

    def is_empty(self) -> bool:
        return not self._individuals

    def append(self, individual: MarbleIndividual) -> None:
        self._individuals.append(individual)

    def all_stopped(self) -> bool:
        return all(not individual.is_moving() for individual in self._individuals)

    def fitness_values(self) -> list[float]:
        return [individual.fitness() for individual in self._individuals]

    def distances(self) -> list[float]:
        if not self._individuals:
            raise EmptyPopulationError("Population is empty: no distances to aggregate")
        return [individual.distance_to_goal() for individual in self._individuals]

    def average_distance(self) -> float:
        distances = self.distances()
        return sum(distances) / len(distances)

    def best_distance(self) -> float:
        return min(self.distances())
