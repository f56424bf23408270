from __future__ import annotations

from abc import ABC, abstractmethod
import math
from typing import TYPE_CHECKING, Sequence

from loguru import logger

from marblevo.evolution.random_source import RandomSource
from marblevo.exceptions import EmptyPopulationError, EvolutionError

if TYPE_CHECKING:
    from marblevo.evolution.individual import MarbleIndividual


class ParentSelector(ABC):
    """Base class for picking a reproduction partner from a population."""

    @abstractmethod
    def select(
        self,
        population: Sequence[MarbleIndividual],
        fitness_values: Sequence[float],
        rng: RandomSource,
    ) -> MarbleIndividual:
        """Select one individual.

        Args:
            population: Individuals of the evaluated generation, in order
            fitness_values: Fitness of each individual, computed once per generation
            rng: Shared random source

        Returns:
            The selected individual
        """


def cumulative_cut_offs(fitness_values: Sequence[float]) -> list[float]:
    """Ascending cut-offs in (0, 1]; each step is proportional to one fitness value.

    Infinite fitness (goal reached) restricts the wheel to those individuals,
    all equally likely. A zero total spreads the wheel uniformly. Weights
    are scaled by the largest one so that huge finite values cannot
    overflow the total.
    """
    n = len(fitness_values)
    if any(math.isinf(f) for f in fitness_values):
        weights = [1.0 if math.isinf(f) else 0.0 for f in fitness_values]
    else:
        weights = list(fitness_values)

    peak = max(weights, default=0.0)
    if peak > 0:
        weights = [weight / peak for weight in weights]

    total = sum(weights)
    if total <= 0:
        logger.debug("RouletteWheelSelector: zero total fitness, uniform wheel")
        weights, total = [1.0] * n, float(n)

    cut_offs = []
    previous = 0.0
    for weight in weights:
        previous = previous + weight / total
        cut_offs.append(previous)
    return cut_offs


class RouletteWheelSelector(ParentSelector):
    """Fitness proportionate selection.

    An individual owns a slice of [0, 1) proportional to its fitness; the
    first slice whose cut-off exceeds a uniform draw wins. When rounding
    leaves the draw above every cut-off, the last individual is returned.
    """

    def select(
        self,
        population: Sequence[MarbleIndividual],
        fitness_values: Sequence[float],
        rng: RandomSource,
    ) -> MarbleIndividual:
        if not population:
            raise EmptyPopulationError("Cannot select from an empty population")
        if len(fitness_values) != len(population):
            raise EvolutionError(
                f"Got {len(fitness_values)} fitness values for {len(population)} individuals"
            )

        return population[self.select_index(fitness_values, rng)]

    def select_index(self, fitness_values: Sequence[float], rng: RandomSource) -> int:
        if not fitness_values:
            raise EmptyPopulationError("Cannot select from an empty population")
        cut_offs = cumulative_cut_offs(fitness_values)
        selection = rng.random()
        for index, cut_off in enumerate(cut_offs):
            if selection < cut_off:
                return index

        logger.debug(
            "RouletteWheelSelector: draw {} above last cut-off {}, falling back to last",
            selection,
            cut_offs[-1],
        )
        return len(cut_offs) - 1
