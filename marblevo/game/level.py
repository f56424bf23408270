from __future__ import annotations

import math

from loguru import logger

from marblevo.config.models import LevelConfiguration, WorldSettings
from marblevo.evolution.individual import MarbleIndividual
from marblevo.evolution.random_source import RandomSource
from marblevo.simulation.geometry import Coordinate, Goal
from marblevo.simulation.kinematic import KinematicBody, KinematicWorld

MAX_DRAG_LENGTH = 250.0
DRAG_POWER_SCALE = 10.0


def build_world(settings: WorldSettings, level: LevelConfiguration) -> KinematicWorld:
    world = KinematicWorld(
        width=settings.width,
        height=settings.height,
        friction=settings.friction,
        restitution=settings.restitution,
        moving_threshold=settings.moving_threshold,
    )
    for obstacle in level.obstacles:
        world.add_obstacle(obstacle.position, obstacle.size)
    logger.debug(
        "[Level] '{}' built with {} obstacle(s)", level.name, len(level.obstacles)
    )
    return world


def build_goal(level: LevelConfiguration) -> Goal:
    return Goal(position=level.goal.position, diameter=level.goal.diameter)


def build_initial_population(
    world: KinematicWorld,
    level: LevelConfiguration,
    goal: Goal,
    individual_count: int,
    rng: RandomSource,
) -> list[MarbleIndividual]:
    return [
        MarbleIndividual.create_random(
            goal,
            world.add_body,
            level.marble.position,
            rng,
            texture_name="individual",
            diameter=level.marble.diameter,
        )
        for _ in range(individual_count)
    ]


def build_human_marble(world: KinematicWorld, level: LevelConfiguration) -> KinematicBody:
    return world.add_body(level.marble.position, level.marble.diameter)


def launch_from_drag(start: Coordinate, pointer: Coordinate) -> tuple[float, float]:
    """Power and angle for a marble launched by dragging from *start* to *pointer*.

    Power is the drag length (capped) divided by ten; the angle is measured
    against the positive x axis, so it stays within [0, π].
    """
    dx, dy = pointer.x - start.x, pointer.y - start.y
    length = math.hypot(dx, dy)
    if length == 0:
        return 0.0, 0.0
    power = min(length, MAX_DRAG_LENGTH) / DRAG_POWER_SCALE
    angle = math.acos(max(-1.0, min(1.0, dx / length)))
    return power, angle
