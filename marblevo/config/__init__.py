from marblevo.config.handler import ConfigurationHandler
from marblevo.config.models import (
    Configuration,
    GameSettings,
    GoalSpec,
    LevelConfiguration,
    MarbleSpec,
    ObstacleSpec,
    WorldSettings,
)
from marblevo.config.resolvers import register_resolvers

__all__ = [
    "Configuration",
    "ConfigurationHandler",
    "GameSettings",
    "GoalSpec",
    "LevelConfiguration",
    "MarbleSpec",
    "ObstacleSpec",
    "WorldSettings",
    "register_resolvers",
]
