"""Unified configuration management for the application."""
from __future__ import annotations
import logging
import threading
from typing import Any, Dict, Optional, Type, TypeVar

from pydantic import ValidationError as PydanticValidationError

from instancespec.config.loader import ConfigurationLoader
from instancespec.config.schemas import AppConfig, CatalogConfig, LoggingConfig, validate_config
from instancespec.domain.core.exceptions import ConfigurationError

T = TypeVar('T')
logger = logging.getLogger(__name__)


class ConfigurationManager:
    """
    Unified configuration manager that serves as the single source of truth.

    This class provides a unified interface for accessing configuration with:
    - Type safety through pydantic schemas
    - Environment variable overrides
    - Configuration validation
    - Lazy loading, guarded for concurrent first access

    It uses ConfigurationLoader to load configuration from its sources.
    """

    _TYPE_MAPPING: Dict[Type, str] = {
        LoggingConfig: 'logging',
        CatalogConfig: 'catalog',
    }

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None
        self._loader: Optional[ConfigurationLoader] = None
        self._config_cache: Dict[Type, Any] = {}

    @property
    def loader(self) -> ConfigurationLoader:
        """Lazy load configuration loader."""
        if self._loader is None:
            self._loader = ConfigurationLoader()
        return self._loader

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data = self.loader.load_configuration(self._config_file)
        try:
            app_config = validate_config(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
        logger.debug("Configuration loaded (file=%s)", self._config_file)
        return app_config

    def get_typed(self, config_type: Type[T]) -> T:
        """Get typed configuration with caching."""
        if config_type not in self._config_cache:
            with self._lock:
                if config_type not in self._config_cache:
                    self._config_cache[config_type] = self._create_typed_config(config_type)
        return self._config_cache[config_type]

    def _create_typed_config(self, config_type: Type[T]) -> T:
        """Create typed configuration instance."""
        if config_type is AppConfig:
            return self.app_config
        attribute = self._TYPE_MAPPING.get(config_type)
        if attribute is None:
            raise ConfigurationError(f"Unknown configuration type: {config_type.__name__}")
        return getattr(self.app_config, attribute)

    def reload(self) -> None:
        """Discard loaded configuration so the next access reloads it."""
        with self._lock:
            self._app_config = None
            self._config_cache.clear()
