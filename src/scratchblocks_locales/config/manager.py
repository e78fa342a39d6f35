"""Configuration loading for scratchblocks-locales.

Settings come from an optional YAML file and are validated by the
:class:`LocalesConfig` model. Command-line overrides are applied on top.
"""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..utils.core.exceptions import ConfigurationError
from .schema import LocalesConfig

logger = logging.getLogger(__name__)


class ConfigManager:
    """Load and validate :class:`LocalesConfig` objects."""

    @staticmethod
    def load_config(config_path: Path | None = None) -> LocalesConfig:
        """
        Load configuration from a YAML file.

        Args:
            config_path: Path to the YAML file, or None for defaults

        Returns:
            LocalesConfig: Validated configuration object

        Raises:
            ConfigurationError: If the file is missing, not valid YAML,
                not a mapping, or fails validation
        """
        if config_path is None:
            return LocalesConfig()

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if raw_config_data is None:
            config_data: dict[str, object] = {}
        elif isinstance(raw_config_data, dict):
            config_data = raw_config_data  # pyright: ignore[reportUnknownVariableType]
        else:
            raise ConfigurationError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}"
            )

        logger.debug(f"Loaded configuration from {config_path}")
        return ConfigManager.validate_config(config_data)

    @staticmethod
    def validate_config(config_data: dict[str, object]) -> LocalesConfig:
        """
        Validate raw configuration data.

        Raises:
            ConfigurationError: If validation fails
        """
        try:
            return LocalesConfig(**config_data)  # pyright: ignore[reportArgumentType]
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def apply_overrides(
        config: LocalesConfig, **overrides: object
    ) -> LocalesConfig:
        """
        Return a copy of ``config`` with the non-None overrides applied.

        The result is validated again so overrides obey the same rules as
        values from the file.
        """
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return config
        return ConfigManager.validate_config({**config.model_dump(), **changes})
