# instancespec/config/defaults.py
from enum import Enum
from typing import Any, Dict

from instancespec.config.schemas.catalog_schema import DEFAULT_SERIES_VERSIONS


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",

    # Logging configuration
    "logging": {
        "level": LogLevel.INFO.value,
        "destination": LogDestination.STDOUT.value,
        "file_path": "logs/instancespec.log",
        "max_size_mb": 10,
        "backup_count": 5,
    },

    # Image catalog configuration
    "catalog": {
        "product_prefix": "com.ubuntu.cloud:server",
        "series_versions": dict(DEFAULT_SERIES_VERSIONS),
        "default_arches": ["amd64", "arm"],
    },
}
