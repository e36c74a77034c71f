"""Instance type value objects."""
from typing import Optional, Tuple

from pydantic import field_validator

from instancespec.domain.base.value_object import ValueObject


class InstanceType(ValueObject):
    """
    A provider machine shape.

    ``vtype`` is the single virtualization type the instance type requires,
    or None when it accepts images of any virtualization type. The hardware
    attributes are only consulted by constraint filtering.

    Attributes:
        id: Provider identifier
        name: Human readable name (e.g. ``m1.small``)
        arches: Supported architectures, never empty
        vtype: Required virtualization type, None for any
        mem: Memory in MiB
        cpu_cores: Number of CPU cores
        cpu_power: CPU power in hundredths of a reference core
        cost: Relative cost, used to rank instance types
    """
    id: str
    name: str
    arches: Tuple[str, ...]
    vtype: Optional[str] = None
    mem: Optional[int] = None
    cpu_cores: Optional[int] = None
    cpu_power: Optional[int] = None
    cost: Optional[int] = None

    @field_validator("arches")
    @classmethod
    def validate_arches(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("Instance type must support at least one architecture")
        return v

    @field_validator("mem", "cpu_cores", "cpu_power", "cost")
    @classmethod
    def validate_non_negative(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError(f"Hardware attribute must not be negative: {v}")
        return v

    def supports_any(self, arches) -> bool:
        """Return True if this type supports at least one of ``arches``."""
        return any(arch in self.arches for arch in arches)
