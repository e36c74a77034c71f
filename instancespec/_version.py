"""Version information for the instance spec resolver."""

__version__ = "0.1.0"
