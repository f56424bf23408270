"""
Shared fixtures for the Marble Evolution test-suite.

Provides:
- a scripted random source returning preset draws
- fake simulation bodies whose distance and motion are set by the test
- helpers building individuals and controllers around those bodies
"""
from __future__ import annotations

import itertools

import pytest

from marblevo.evolution import GenerationController, MarbleDNA, MarbleIndividual
from marblevo.evolution.engine.config import (
    BoundSpecification,
    GeneProbabilities,
    GeneticAlgorithmConfig,
    MutationProbabilities,
    MutationRanges,
)
from marblevo.simulation.geometry import Coordinate, Goal

START = Coordinate(x=250.0, y=490.0)


class ScriptedRandom:
    """Random source replaying a fixed sequence of draws (cycled)."""

    def __init__(self, values):
        self._values = itertools.cycle(values)
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        return next(self._values)

    def uniform(self, a: float, b: float) -> float:
        return a + (b - a) * self.random()


class FakeBody:
    """Simulation body with a distance and motion controlled by the test."""

    def __init__(self, start_position: Coordinate, diameter: float, events: list):
        self.start_position = start_position
        self.diameter = diameter
        self.distance = 100.0
        self.moving = False
        self.launched_with: tuple[float, float] | None = None
        self.destroyed = False
        self._events = events
        self._events.append(("spawn", self))

    @property
    def position(self) -> Coordinate:
        return self.start_position

    def start(self, power: float, angle: float) -> None:
        self.launched_with = (power, angle)

    def stop(self) -> None:
        self.moving = False

    def reset(self) -> None:
        self.stop()

    def is_moving(self) -> bool:
        return self.moving

    def distance_to(self, point: Coordinate) -> float:
        return self.distance

    def destroy(self) -> None:
        self.destroyed = True
        self._events.append(("destroy", self))


@pytest.fixture
def events():
    """Chronological log of fake body spawns and destructions."""
    return []


@pytest.fixture
def spawn_body(events):
    def _spawn(start_position: Coordinate, diameter: float) -> FakeBody:
        return FakeBody(start_position, diameter, events)

    return _spawn


@pytest.fixture
def goal():
    return Goal(position=Coordinate(x=250.0, y=40.0), diameter=20.0)


@pytest.fixture
def make_individual(goal, spawn_body):
    def _make(power: float, angle: float, distance: float = 100.0) -> MarbleIndividual:
        individual = MarbleIndividual.create_from_genome(
            MarbleDNA(power=power, angle=angle), goal, spawn_body, START
        )
        individual.body.distance = distance
        return individual

    return _make


def make_config(
    individual_count: int = 4,
    general: float = 0.18,
    father_power: float = 0.5,
    father_angle: float = 0.5,
    mutation_power: float = 0.5,
    mutation_angle: float = 0.5,
    power_range: tuple[float, float] = (-3.0, 3.0),
    angle_range: tuple[float, float] = (-0.5, 0.5),
    **kwargs,
) -> GeneticAlgorithmConfig:
    return GeneticAlgorithmConfig(
        individual_count=individual_count,
        father_genes_probability=GeneProbabilities(power=father_power, angle=father_angle),
        mutation_probability=MutationProbabilities(
            general=general, power=mutation_power, angle=mutation_angle
        ),
        mutation_range=MutationRanges(
            power=BoundSpecification(lower_bound=power_range[0], upper_bound=power_range[1]),
            angle=BoundSpecification(lower_bound=angle_range[0], upper_bound=angle_range[1]),
        ),
        **kwargs,
    )


@pytest.fixture
def fixed_population(make_individual):
    """Four individuals with injected genomes and distances."""
    return [
        make_individual(10.0, 0.1, distance=10.0),
        make_individual(5.0, 0.2, distance=5.0),
        make_individual(20.0, 0.5, distance=50.0),
        make_individual(1.0, 1.0, distance=100.0),
    ]


@pytest.fixture
def controller():
    return GenerationController(make_config(seed=1234))
