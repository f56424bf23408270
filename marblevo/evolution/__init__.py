"""Genetic algorithm evolving marble launch parameters."""

from marblevo.evolution.engine import (
    ControllerState,
    GenerationController,
    GeneticAlgorithmConfig,
)
from marblevo.evolution.genome import ANGLE_DOMAIN, POWER_DOMAIN, MarbleDNA
from marblevo.evolution.individual import MarbleIndividual
from marblevo.evolution.population import Population
from marblevo.evolution.random_source import DefaultRandomSource, RandomSource
from marblevo.evolution.selection import ParentSelector, RouletteWheelSelector

__all__ = [
    "ANGLE_DOMAIN",
    "POWER_DOMAIN",
    "ControllerState",
    "DefaultRandomSource",
    "GenerationController",
    "GeneticAlgorithmConfig",
    "MarbleDNA",
    "MarbleIndividual",
    "ParentSelector",
    "Population",
    "RandomSource",
    "RouletteWheelSelector",
]
