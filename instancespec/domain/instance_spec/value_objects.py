"""Instance spec value objects."""
from typing import Tuple

from pydantic import Field, field_validator

from instancespec.domain.base.value_object import ValueObject
from instancespec.domain.constraints.value_objects import Constraints
from instancespec.domain.image.value_objects import Image
from instancespec.domain.instance_type.value_objects import InstanceType


class InstanceConstraint(ValueObject):
    """
    What a caller needs from a machine.

    Attributes:
        series: Operating system release (e.g. ``precise``)
        region: Cloud region
        arches: Acceptable architectures in order of preference
        constraints: Hardware constraints, empty for no restriction
    """
    series: str
    region: str
    arches: Tuple[str, ...]
    constraints: Constraints = Field(default_factory=Constraints)

    @field_validator("arches")
    @classmethod
    def validate_arches(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("At least one architecture is required")
        return v


class InstanceSpec(ValueObject):
    """The image and instance type chosen for a provisioning request."""
    image: Image
    instance_type: InstanceType
