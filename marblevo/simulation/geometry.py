from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    """Point in screen space (y grows downwards)."""

    x: float
    y: float
    model_config = ConfigDict(frozen=True, extra="forbid")

    def distance_to(self, other: Coordinate) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


class Size(BaseModel):
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    model_config = ConfigDict(frozen=True, extra="forbid")


class Goal(BaseModel):
    """Target every individual of a population tries to reach. Shared, read-only."""

    position: Coordinate
    diameter: float = Field(default=20.0, gt=0)
    model_config = ConfigDict(frozen=True, extra="forbid")


def launch_velocity(power: float, angle: float) -> tuple[float, float]:
    """Velocity vector for a launch; angle 0 points right, π/2 points up."""
    return math.cos(angle) * power, -math.sin(angle) * power
