from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from loguru import logger

from marblevo.evolution.engine.config import GeneticAlgorithmConfig
from marblevo.evolution.engine.metrics import ControllerMetrics, GenerationStats
from marblevo.evolution.engine.state import ControllerState
from marblevo.evolution.population import Population
from marblevo.evolution.random_source import DefaultRandomSource, RandomSource
from marblevo.evolution.selection import ParentSelector, RouletteWheelSelector
from marblevo.exceptions import EmptyPopulationError, EvolutionError, InvalidTransitionError

if TYPE_CHECKING:
    from marblevo.evolution.individual import MarbleIndividual

__all__ = ["GenerationController"]


class GenerationController:
    """
    Owns the current population and drives one generation at a time:
    - start_iteration() launches every individual (IDLE -> EVALUATING)
    - tick() polls the simulation once per frame and finishes the generation
      as soon as every individual has stopped
    - stop_iteration() evaluates, selects, reproduces, mutates and replaces
      the population (EVALUATING -> REPRODUCING -> IDLE)
    """

    def __init__(
        self,
        config: GeneticAlgorithmConfig,
        rng: RandomSource | None = None,
        selector: ParentSelector | None = None,
    ):
        self.config = config
        self.rng = rng or DefaultRandomSource(config.seed)
        self.selector = selector or RouletteWheelSelector()

        self._population = Population()
        self._state = ControllerState.IDLE
        self.metrics = ControllerMetrics()

        logger.info(
            "[GenerationController] Init | individuals={}, selector={}, mutation_delta={}",
            config.individual_count,
            type(self.selector).__name__,
            config.mutation_delta.value,
        )

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def population(self) -> list[MarbleIndividual]:
        return self._population.individuals

    @property
    def iteration(self) -> int:
        return self.metrics.total_generations

    def _set_state(self, new: ControllerState) -> None:
        if not self._state.can_become(new):
            allowed = sorted(s.value for s in self._state.next_states())
            msg = f"Invalid state change {self._state.value} -> {new.value} (allowed: {allowed})"
            logger.error("[GenerationController] {}", msg)
            raise InvalidTransitionError(msg)
        logger.trace("[GenerationController] {} -> {}", self._state.value, new.value)
        self._state = new

    def _require_state(self, expected: ControllerState, action: str) -> None:
        if self._state is not expected:
            msg = f"Cannot {action} while {self._state.value} (expected {expected.value})"
            logger.error("[GenerationController] {}", msg)
            raise InvalidTransitionError(msg)

    def initialize_algorithm(self, initial_population: Sequence[MarbleIndividual] = ()) -> None:
        """Install a new initial population, destroying any previous one."""
        if initial_population and len(initial_population) != self.config.individual_count:
            raise EvolutionError(
                f"Initial population has {len(initial_population)} individuals, "
                f"expected {self.config.individual_count}"
            )

        retired = [
            individual
            for individual in self._population
            if not any(individual is kept for kept in initial_population)
        ]
        for individual in retired:
            individual.destroy()
        if retired:
            self.metrics.individuals_destroyed += len(retired)
            logger.info(
                "[GenerationController] Previous population destroyed ({})", len(retired)
            )

        self._population = Population(initial_population)
        self._state = ControllerState.IDLE
        logger.info(
            "[GenerationController] Algorithm initialized; Population length: {}",
            len(self._population),
        )

    def start_iteration(self) -> None:
        self._require_state(ControllerState.IDLE, "start an iteration")
        if self._population.is_empty():
            msg = "Cannot start an iteration without individuals"
            logger.error("[GenerationController] {}", msg)
            raise EmptyPopulationError(msg)
        self._set_state(ControllerState.EVALUATING)
        for individual in self._population:
            individual.start()
        logger.info(
            "[GenerationController] Iteration {} started", self.iteration + 1
        )

    def tick(self) -> bool:
        """Poll once per simulation frame. Returns True when a generation finished."""
        if self._state is not ControllerState.EVALUATING:
            return False
        if not self.all_stopped():
            return False
        self.stop_iteration()
        return True

    def stop_iteration(self) -> None:
        """Stop the current iteration and replace the population with its offspring."""
        self._require_state(ControllerState.EVALUATING, "stop an iteration")
        for individual in self._population:
            individual.stop()

        if not self.all_stopped():
            msg = "Individuals are still moving after stop()"
            logger.error("[GenerationController] {}", msg)
            raise EvolutionError(msg)

        logger.info("[GenerationController] Current iteration stopped")
        for individual in self._population:
            logger.debug("{}", individual)

        self._iteration_finished()

    def all_stopped(self) -> bool:
        return self._population.all_stopped()

    def kill_all(self) -> None:
        """Destroy every individual regardless of evaluation state. Use with care."""
        destroyed = len(self._population)
        for individual in self._population:
            individual.destroy()
        self.metrics.individuals_destroyed += destroyed
        self._population = Population()
        self._state = ControllerState.IDLE
        logger.info("[GenerationController] Entire population killed ({})", destroyed)

    def compute_avg_distance(self) -> float:
        return self._population.average_distance()

    def get_best_distance(self) -> float:
        return self._population.best_distance()

    def _iteration_finished(self) -> None:
        evaluated = self._population
        fitness_values = evaluated.fitness_values()
        stats = GenerationStats(
            iteration=self.iteration + 1,
            population_size=len(evaluated),
            average_distance=evaluated.average_distance(),
            best_distance=evaluated.best_distance(),
            best_fitness=max(fitness_values),
        )

        self._set_state(ControllerState.REPRODUCING)
        next_population, mutated, changes = self._reproduce(evaluated, fitness_values)
        stats.mutated_children = mutated

        # old generation is torn down only once the next one is complete
        self.kill_all()
        self._population = next_population

        self.metrics.record_reproduction_metrics(len(next_population), changes)
        self.metrics.record_generation(stats)
        logger.info(
            "[GenerationController] Iteration {} done | avg={:.4f}, best={:.4f}, mutated={}",
            stats.iteration,
            stats.average_distance,
            stats.best_distance,
            mutated,
        )

    def _reproduce(
        self, evaluated: Population, fitness_values: list[float]
    ) -> tuple[Population, int, int]:
        parents = evaluated.individuals
        general = self.config.mutation_probability.general

        next_population = Population()
        mutated = 0
        changes = 0
        for _ in range(self.config.individual_count):
            father = self.selector.select(parents, fitness_values, self.rng)
            mother = self.selector.select(parents, fitness_values, self.rng)

            child = father.reproduce_with(
                mother, self.config.father_genes_probability, self.rng
            )
            if self.rng.random() < general:
                mutated += 1
                changes += len(child.mutate(self.config, self.rng))

            next_population.append(child)

        return next_population, mutated, changes
