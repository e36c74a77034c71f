"""Environment variable expansion for configuration values.

Supported forms inside string values:

- ``$VAR`` and ``${VAR}``: replaced by the variable, left untouched when unset
- ``${VAR:default}``: replaced by the variable, or ``default`` when unset
"""
import os
import re
from typing import Any, Dict

_ENV_PATTERN = re.compile(
    r"\$\{(?P<braced>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<default>[^}]*))?\}"
    r"|\$(?P<bare>[A-Za-z_][A-Za-z0-9_]*)"
)


def _replace(match: "re.Match[str]") -> str:
    name = match.group("braced") or match.group("bare")
    value = os.environ.get(name)
    if value is not None:
        return value
    if match.group("default") is not None:
        return match.group("default")
    return match.group(0)


def expand_env_vars(value: Any) -> Any:
    """
    Expand environment variables in a configuration value.

    Dictionaries and lists are expanded recursively; non-string scalars are
    returned unchanged.
    """
    if isinstance(value, str):
        return _ENV_PATTERN.sub(_replace, value)
    if isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    if isinstance(value, list):
        return [expand_env_vars(v) for v in value]
    return value


def expand_config_env_vars(config: Dict[str, Any]) -> Dict[str, Any]:
    """Expand environment variables throughout a configuration dictionary."""
    return expand_env_vars(config)
