from __future__ import annotations

import numpy as np
from loguru import logger

from marblevo.exceptions import SimulationError
from marblevo.simulation.geometry import Coordinate, Size, launch_velocity

DEFAULT_MOVING_THRESHOLD = 0.075


class RectObstacle:
    """Static axis-aligned rectangle, positioned by its centre."""

    def __init__(self, position: Coordinate, size: Size):
        self.center = np.array(position.as_tuple(), dtype=float)
        self.half = np.array([size.width / 2.0, size.height / 2.0], dtype=float)


class KinematicBody:
    """Circular body integrated by a `KinematicWorld`.

    Implements the `SimulationBody` protocol.
    """

    def __init__(
        self,
        world: KinematicWorld,
        start_position: Coordinate,
        diameter: float,
        moving_threshold: float = DEFAULT_MOVING_THRESHOLD,
    ):
        self.world = world
        self.start_position = start_position
        self.radius = diameter / 2.0
        self.moving_threshold = moving_threshold
        self.pos = np.array(start_position.as_tuple(), dtype=float)
        self.vel = np.zeros(2, dtype=float)
        self.destroyed = False

    @property
    def position(self) -> Coordinate:
        return Coordinate(x=float(self.pos[0]), y=float(self.pos[1]))

    @property
    def speed(self) -> float:
        return float(np.linalg.norm(self.vel))

    def _ensure_alive(self) -> None:
        if self.destroyed:
            raise SimulationError("Body has been destroyed")

    def start(self, power: float, angle: float) -> None:
        self._ensure_alive()
        self.vel = np.array(launch_velocity(power, angle), dtype=float)

    def stop(self) -> None:
        self.vel = np.zeros(2, dtype=float)

    def reset(self) -> None:
        self._ensure_alive()
        self.stop()
        self.pos = np.array(self.start_position.as_tuple(), dtype=float)

    def is_moving(self) -> bool:
        return self.speed > self.moving_threshold

    def distance_to(self, point: Coordinate) -> float:
        return float(np.linalg.norm(self.pos - np.array(point.as_tuple(), dtype=float)))

    def destroy(self) -> None:
        if self.destroyed:
            return
        self.destroyed = True
        self.stop()
        self.world.remove_body(self)


class KinematicWorld:
    """Headless stand-in for the physics engine.

    Bodies slow down by a constant friction factor per step and bounce off
    the world border and static obstacles, losing energy according to the
    restitution. Bodies never collide with each other.
    """

    def __init__(
        self,
        width: float = 500.0,
        height: float = 500.0,
        friction: float = 0.02,
        restitution: float = 0.9,
        moving_threshold: float = DEFAULT_MOVING_THRESHOLD,
    ):
        if not 0.0 <= friction < 1.0:
            raise ValueError(f"friction must be in [0, 1), got {friction}")
        self.size = np.array([width, height], dtype=float)
        self.friction = friction
        self.restitution = restitution
        self.moving_threshold = moving_threshold
        self._bodies: list[KinematicBody] = []
        self.obstacles: list[RectObstacle] = []
        self.steps = 0

    @property
    def bodies(self) -> list[KinematicBody]:
        return list(self._bodies)

    def add_body(self, start_position: Coordinate, diameter: float) -> KinematicBody:
        body = KinematicBody(self, start_position, diameter, self.moving_threshold)
        self._bodies.append(body)
        return body

    def remove_body(self, body: KinematicBody) -> None:
        try:
            self._bodies.remove(body)
        except ValueError:
            logger.debug("[KinematicWorld] remove_body: body not registered")

    def add_obstacle(self, position: Coordinate, size: Size) -> RectObstacle:
        obstacle = RectObstacle(position, size)
        self.obstacles.append(obstacle)
        return obstacle

    def step(self, dt: float = 1.0) -> None:
        for body in self._bodies:
            if not body.vel.any():
                continue
            body.pos = body.pos + body.vel * dt
            self._bounce_off_bounds(body)
            for obstacle in self.obstacles:
                self._bounce_off_obstacle(body, obstacle)
            body.vel = body.vel * (1.0 - self.friction)
            if not body.is_moving():
                body.stop()
        self.steps += 1

    def _bounce_off_bounds(self, body: KinematicBody) -> None:
        for axis in range(2):
            low, high = body.radius, self.size[axis] - body.radius
            if body.pos[axis] < low:
                body.pos[axis] = low
                body.vel[axis] = abs(body.vel[axis]) * self.restitution
            elif body.pos[axis] > high:
                body.pos[axis] = high
                body.vel[axis] = -abs(body.vel[axis]) * self.restitution

    def _bounce_off_obstacle(self, body: KinematicBody, obstacle: RectObstacle) -> None:
        offset = body.pos - obstacle.center
        reach = obstacle.half + body.radius
        penetration = reach - np.abs(offset)
        if (penetration <= 0).any():
            return
        # push out along the axis of least penetration
        axis = int(np.argmin(penetration))
        direction = 1.0 if offset[axis] >= 0 else -1.0
        body.pos[axis] = obstacle.center[axis] + direction * reach[axis]
        body.vel[axis] = direction * abs(body.vel[axis]) * self.restitution

    def all_at_rest(self) -> bool:
        return not any(body.is_moving() for body in self._bodies)
