"""Hardware constraints domain."""

from .exceptions import ConstraintsParseError
from .value_objects import SUPPORTED_ARCHES, Constraints

__all__ = ["Constraints", "ConstraintsParseError", "SUPPORTED_ARCHES"]
