"""Domain ports - interfaces implemented by the infrastructure layer."""

from .image_source_port import ImageSourcePort

__all__ = ["ImageSourcePort"]
