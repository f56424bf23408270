from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator

from marblevo.evolution.engine.config import GeneticAlgorithmConfig
from marblevo.simulation.geometry import Coordinate, Size


class SettingsModel(BaseModel):
    """Base for configuration sections; unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")


class GameSettings(SettingsModel):
    human_mode: bool = Field(default=False, description="Player launches the marble")
    verbose_mode: bool = Field(default=False, description="Trace every individual")


class WorldSettings(SettingsModel):
    """Parameters of the headless simulation world."""

    width: float = Field(default=500.0, gt=0)
    height: float = Field(default=500.0, gt=0)
    friction: float = Field(
        default=0.02, ge=0.0, lt=1.0, description="Fraction of speed lost per step"
    )
    restitution: float = Field(
        default=0.9, ge=0.0, le=1.0, description="Fraction of speed kept on a bounce"
    )
    moving_threshold: float = Field(
        default=0.075, ge=0.0, description="Speed above which a body counts as moving"
    )


class MarbleSpec(SettingsModel):
    position: Coordinate
    diameter: float = Field(default=5.0, gt=0)


class GoalSpec(SettingsModel):
    position: Coordinate
    diameter: float = Field(default=20.0, gt=0)


class ObstacleSpec(SettingsModel):
    position: Coordinate
    size: Size


class LevelConfiguration(SettingsModel):
    name: str = Field(min_length=1)
    marble: MarbleSpec
    goal: GoalSpec
    obstacles: list[ObstacleSpec] = Field(default_factory=list)


def _default_level() -> LevelConfiguration:
    return LevelConfiguration(
        name="Level 1",
        marble=MarbleSpec(position=Coordinate(x=250.0, y=490.0), diameter=5.0),
        goal=GoalSpec(position=Coordinate(x=250.0, y=40.0), diameter=20.0),
    )


class Configuration(SettingsModel):
    """Complete game configuration."""

    game_settings: GameSettings = Field(default_factory=GameSettings)
    world: WorldSettings = Field(default_factory=WorldSettings)
    levels: list[LevelConfiguration] = Field(default_factory=lambda: [_default_level()])
    genetic_algorithm: GeneticAlgorithmConfig = Field(
        default_factory=GeneticAlgorithmConfig
    )

    @model_validator(mode="after")
    def _validate_levels(self) -> Configuration:
        if not self.levels:
            raise ValueError("At least one level must be configured")
        for level in self.levels:
            for spec in (level.marble, level.goal):
                if not (0 <= spec.position.x <= self.world.width) or not (
                    0 <= spec.position.y <= self.world.height
                ):
                    raise ValueError(
                        f"Level '{level.name}': position {spec.position.as_tuple()} outside the world"
                    )
        return self
