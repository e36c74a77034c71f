"""Configuration loading from defaults, files and the environment."""
import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from instancespec.config.defaults import DEFAULT_CONFIG
from instancespec.config.utils.env_expansion import expand_config_env_vars
from instancespec.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigurationLoader:
    """
    Builds the raw configuration dictionary.

    Sources are applied in order, later ones winning:

    1. Built-in defaults
    2. An optional JSON configuration file, deep-merged over the defaults
    3. Environment variable overrides (``INSTANCESPEC_*``)

    ``$VAR``, ``${VAR}`` and ``${VAR:default}`` references in string values
    are expanded after merging.
    """

    ENV_PREFIX = "INSTANCESPEC_"

    # Environment variable suffix -> (section, key)
    ENV_OVERRIDES = {
        "LOG_LEVEL": ("logging", "level"),
        "LOG_DESTINATION": ("logging", "destination"),
        "LOG_FILE": ("logging", "file_path"),
        "DEFAULT_ARCHES": ("catalog", "default_arches"),
        "PRODUCT_PREFIX": ("catalog", "product_prefix"),
    }

    def load_configuration(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        """Load configuration from defaults and, if given, ``config_file``."""
        config_data = copy.deepcopy(DEFAULT_CONFIG)
        if config_file:
            config_data = self.merge(config_data, self.load_from_file(config_file))
        config_data = self.apply_environment_overrides(config_data)
        return expand_config_env_vars(config_data)

    def load_from_file(self, config_file: str) -> Dict[str, Any]:
        """
        Load a JSON configuration file.

        Raises:
            ConfigurationError: If the file is missing, unreadable or not a
                JSON object
        """
        if not os.path.exists(config_file):
            raise ConfigurationError(f"Configuration file not found: {config_file}")
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration file {config_file}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {config_file} must contain a JSON object")
        logger.debug("Loaded configuration file %s", config_file)
        return data

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ``INSTANCESPEC_*`` environment variables over ``config_data``."""
        result = copy.deepcopy(config_data)
        for suffix, (section, key) in self.ENV_OVERRIDES.items():
            value = os.environ.get(self.ENV_PREFIX + suffix)
            if value is None:
                continue
            if key == "default_arches":
                value = [arch.strip() for arch in value.split(",") if arch.strip()]
            result.setdefault(section, {})[key] = value
            logger.debug("Applied environment override %s%s", self.ENV_PREFIX, suffix)
        return result

    @classmethod
    def merge(cls, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep-merge ``override`` into a copy of ``base``."""
        result = copy.deepcopy(base)
        for key, value in override.items():
            if isinstance(value, dict) and isinstance(result.get(key), dict):
                result[key] = cls.merge(result[key], value)
            else:
                result[key] = copy.deepcopy(value)
        return result
