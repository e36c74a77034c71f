"""Machine image value objects."""
from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from pydantic import field_validator

from instancespec.domain.base.value_object import ValueObject

if TYPE_CHECKING:
    from instancespec.domain.instance_type.value_objects import InstanceType


class Image(ValueObject):
    """
    A bootable machine image as published in an image catalog.

    Attributes:
        id: Provider identifier of the image (e.g. ``ami-00000033``)
        arch: Architecture the image was built for
        vtype: Virtualization type; empty when the catalog does not record one
    """
    id: str
    arch: str
    vtype: str = ""

    def match(self, instance_type: InstanceType) -> bool:
        """Return True if this image can run on ``instance_type``."""
        if self.arch not in instance_type.arches:
            return False
        # An instance type without a virtualization requirement runs anything.
        if instance_type.vtype is not None and self.vtype != instance_type.vtype:
            return False
        return True


class ImageConstraint(ValueObject):
    """Query used to look up candidate images in a catalog."""
    region: str
    endpoint: str = ""
    series: str
    arches: Tuple[str, ...]

    @field_validator("arches")
    @classmethod
    def validate_arches(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("At least one architecture is required")
        return v
