from __future__ import annotations

import math
from typing import Callable
import uuid

from loguru import logger

from marblevo.evolution.crossover import crossover_genomes
from marblevo.evolution.engine.config import GeneProbabilities, GeneticAlgorithmConfig
from marblevo.evolution.fitness import fitness_from_distance
from marblevo.evolution.genome import ANGLE_DOMAIN, POWER_DOMAIN, MarbleDNA
from marblevo.evolution.mutation import GeneChange, mutate_genome
from marblevo.evolution.random_source import RandomSource
from marblevo.simulation.base import SimulationBody
from marblevo.simulation.geometry import Coordinate, Goal

BodyFactory = Callable[[Coordinate, float], SimulationBody]


class MarbleIndividual:
    """Marble controlled by the genetic algorithm.

    The DNA holds the launch parameters. Movement, position and removal from
    the scene are delegated to a simulation body owned by the physics layer;
    `spawn_body` creates the body of a child at the father's start position.

    Texture name, diameter and start position are presentation attributes
    copied to children unchanged.
    """

    def __init__(
        self,
        dna: MarbleDNA,
        goal: Goal,
        body: SimulationBody,
        spawn_body: BodyFactory,
        start_position: Coordinate,
        texture_name: str = "individual",
        diameter: float = 5.0,
    ):
        self.id = str(uuid.uuid4())
        self.dna = dna
        self.goal = goal
        self.body = body
        self.spawn_body = spawn_body
        self.start_position = start_position
        self.texture_name = texture_name
        self.diameter = diameter
        logger.debug("[{}]: Individual created: {}", self.id, self.dna.model_dump())

    @classmethod
    def create_random(
        cls,
        goal: Goal,
        spawn_body: BodyFactory,
        start_position: Coordinate,
        rng: RandomSource,
        texture_name: str = "individual",
        diameter: float = 5.0,
    ) -> MarbleIndividual:
        dna = MarbleDNA(
            power=rng.random() * POWER_DOMAIN[1],
            angle=rng.random() * ANGLE_DOMAIN[1],
        )
        return cls.create_from_genome(
            dna, goal, spawn_body, start_position, texture_name, diameter
        )

    @classmethod
    def create_from_genome(
        cls,
        dna: MarbleDNA,
        goal: Goal,
        spawn_body: BodyFactory,
        start_position: Coordinate,
        texture_name: str = "individual",
        diameter: float = 5.0,
    ) -> MarbleIndividual:
        body = spawn_body(start_position, diameter)
        return cls(dna, goal, body, spawn_body, start_position, texture_name, diameter)

    # simulation delegates

    def start(self) -> None:
        self.body.start(self.dna.power, self.dna.angle)

    def stop(self) -> None:
        self.body.stop()

    def is_moving(self) -> bool:
        return self.body.is_moving()

    def destroy(self) -> None:
        self.body.destroy()

    def distance_to_goal(self) -> float:
        return self.body.distance_to(self.goal.position)

    def fitness(self) -> float:
        """Reciprocal squared distance to the goal (infinite on the goal)."""
        value = fitness_from_distance(self.distance_to_goal())
        if math.isinf(value):
            logger.info("[{}]: Goal reached", self.id)
        return value

    # genetic operators

    def reproduce_with(
        self,
        mother: MarbleIndividual,
        father_genes_probability: GeneProbabilities,
        rng: RandomSource,
    ) -> MarbleIndividual:
        """Create a child with this individual acting as the father."""
        child_dna = crossover_genomes(self.dna, mother.dna, father_genes_probability, rng)
        child = MarbleIndividual.create_from_genome(
            child_dna,
            self.goal,
            self.spawn_body,
            self.start_position,
            self.texture_name,
            self.diameter,
        )
        logger.debug(
            "[{}]: Reproduced with {} and created {}", self.id, mother.id, child.id
        )
        return child

    def mutate(self, config: GeneticAlgorithmConfig, rng: RandomSource) -> list[GeneChange]:
        """Mutate the DNA in place. A call does not guarantee that any gene changes."""
        changes = mutate_genome(
            self.dna,
            config.mutation_probability,
            config.mutation_range,
            config.mutation_delta,
            rng,
        )
        for change in changes:
            logger.debug(
                "[{}]: {} changes by {} from {} to {}",
                self.id,
                change.gene,
                change.delta,
                change.old_value,
                change.new_value,
            )
        return changes

    def __str__(self) -> str:
        return (
            f"[{self.id}]: DNA: {self.dna.model_dump()}; "
            f"Distance to goal: {self.distance_to_goal()}"
        )
