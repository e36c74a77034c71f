"""Instance spec resolution domain."""

from .exceptions import (
    NoImagesError,
    NoInstanceTypesError,
    NoMatchingImagesError,
    ResolutionError,
)
from .resolver import find_instance_spec
from .value_objects import InstanceConstraint, InstanceSpec

__all__ = [
    "InstanceConstraint",
    "InstanceSpec",
    "find_instance_spec",
    "ResolutionError",
    "NoImagesError",
    "NoInstanceTypesError",
    "NoMatchingImagesError",
]
