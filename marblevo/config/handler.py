from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from loguru import logger
from omegaconf import DictConfig, ListConfig, OmegaConf
from pydantic import ValidationError

from marblevo.config.models import Configuration, LevelConfiguration
from marblevo.config.resolvers import register_resolvers
from marblevo.evolution.engine.config import GeneticAlgorithmConfig
from marblevo.exceptions import ConfigurationError

_MISSING = object()


def _validate(data: Any) -> Configuration:
    try:
        return Configuration.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc


class ConfigurationHandler:
    """
    Holds the active game configuration plus a staged copy.

    Properties are addressed by dotted paths from the root, e.g.
    ``game_settings.verbose_mode`` or ``levels.0.goal.position.x``.
    ``set_property`` only touches the staged copy; ``apply_changes``
    validates it and makes it the active configuration.
    """

    def __init__(self, config: Configuration | None = None):
        self.update_config(config or Configuration())

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | DictConfig) -> ConfigurationHandler:
        if isinstance(data, (DictConfig, ListConfig)):
            register_resolvers()
            data = OmegaConf.to_container(data, resolve=True)
        return cls(_validate(data))

    @classmethod
    def from_yaml(cls, path: str | Path) -> ConfigurationHandler:
        path = Path(path)
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found: {path}")
        logger.info("[ConfigurationHandler] Loading {}", path)
        return cls.from_dict(OmegaConf.load(path))

    @property
    def config(self) -> Configuration:
        return self._config

    def update_config(self, config: Configuration) -> None:
        """Replace the entire configuration, discarding staged changes."""
        self._config = config
        self._staged = OmegaConf.create(config.model_dump(mode="json"))

    def get_property(self, key: str) -> Any:
        node = OmegaConf.create(self._config.model_dump(mode="json"))
        value = OmegaConf.select(node, key, default=_MISSING)
        if value is _MISSING:
            raise ConfigurationError(f"Unknown configuration key '{key}'")
        if isinstance(value, (DictConfig, ListConfig)):
            return OmegaConf.to_container(value)
        return value

    def set_property(self, key: str, value: Any) -> None:
        """Stage a new value; takes effect on `apply_changes`."""
        if OmegaConf.select(self._staged, key, default=_MISSING) is _MISSING:
            raise ConfigurationError(f"Unknown configuration key '{key}'")
        OmegaConf.update(self._staged, key, value, merge=False)
        logger.debug("[ConfigurationHandler] Staged {}={!r}", key, value)

    def has_pending_changes(self) -> bool:
        return OmegaConf.to_container(self._staged) != self._config.model_dump(mode="json")

    def apply_changes(self) -> Configuration:
        """Validate the staged configuration and make it active.

        On failure the active configuration is kept and the staged changes
        are discarded.
        """
        staged = OmegaConf.to_container(self._staged, resolve=True)
        try:
            config = _validate(staged)
        except ConfigurationError:
            logger.error("[ConfigurationHandler] Rejected staged changes")
            self.update_config(self._config)
            raise
        self.update_config(config)
        logger.info("[ConfigurationHandler] Changes applied")
        return config

    def get_level(self, level_number: int = 0) -> LevelConfiguration:
        try:
            return self._config.levels[level_number]
        except IndexError:
            raise ConfigurationError(
                f"Level {level_number} does not exist ({len(self._config.levels)} configured)"
            ) from None

    def get_genetic_algorithm(self) -> GeneticAlgorithmConfig:
        return self._config.genetic_algorithm

    def is_human_mode(self) -> bool:
        return self._config.game_settings.human_mode

    def is_verbose_mode(self) -> bool:
        return self._config.game_settings.verbose_mode
