"""Base domain building blocks."""

from .value_object import ValueObject

__all__ = ["ValueObject"]
