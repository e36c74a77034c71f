"""Machine image domain."""

from .value_objects import Image, ImageConstraint

__all__ = ["Image", "ImageConstraint"]
