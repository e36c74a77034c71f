"""Hardware constraint value objects.

A constraints string is a whitespace separated list of ``key=value`` pairs,
for example ``"arch=amd64 cpu-cores=4 mem=2G"``. Parsing yields an immutable
:class:`Constraints` value whose ``str()`` is the canonical form of the same
constraints.
"""
from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Callable, Dict, Optional

from pydantic import field_validator

from instancespec.domain.base.value_object import ValueObject
from instancespec.domain.constraints.exceptions import ConstraintsParseError

if TYPE_CHECKING:
    from instancespec.domain.instance_type.value_objects import InstanceType

SUPPORTED_ARCHES = ("amd64", "i386", "arm")

# Multipliers relative to MiB.
_MEM_SUFFIXES: Dict[str, int] = {
    "M": 1,
    "G": 1024,
    "T": 1024 * 1024,
    "P": 1024 * 1024 * 1024,
}

_MEM_PATTERN = re.compile(r"^(\d+(?:\.\d+)?|\.\d+)([MGTP]?)$")


class Constraints(ValueObject):
    """
    Caller hardware requirements.

    Every attribute is optional; an unset attribute places no restriction on
    candidate instance types.

    Attributes:
        arch: Required architecture
        cpu_cores: Minimum number of CPU cores
        cpu_power: Minimum CPU power in hundredths of a reference core
        mem: Minimum memory in MiB
    """
    arch: Optional[str] = None
    cpu_cores: Optional[int] = None
    cpu_power: Optional[int] = None
    mem: Optional[int] = None

    @field_validator("cpu_cores", "cpu_power", "mem")
    @classmethod
    def validate_non_negative(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError(f"Constraint value must not be negative: {v}")
        return v

    @classmethod
    def parse(cls, text: str) -> Constraints:
        """
        Parse a constraints string.

        Args:
            text: Constraints such as ``"mem=2G cpu-cores=4"``; empty for none

        Returns:
            Parsed constraints value

        Raises:
            ConstraintsParseError: If the string is malformed, names an
                unknown constraint, repeats one or carries a bad value
        """
        values: Dict[str, object] = {}
        seen = set()
        for pair in text.split():
            name, sep, raw = pair.partition("=")
            if not sep:
                raise ConstraintsParseError(f"malformed constraint {pair!r}", text)
            parser = _PARSERS.get(name)
            if parser is None:
                raise ConstraintsParseError(f"unknown constraint {name!r}", text)
            if name in seen:
                raise ConstraintsParseError(f"bad {name!r} constraint: already set", text)
            seen.add(name)
            if raw == "":
                continue
            try:
                values[name.replace("-", "_")] = parser(raw)
            except ValueError as e:
                raise ConstraintsParseError(f"bad {name!r} constraint: {e}", text) from e
        return cls(**values)

    @property
    def is_empty(self) -> bool:
        """True when no attribute is restricted."""
        return all(
            v is None for v in (self.arch, self.cpu_cores, self.cpu_power, self.mem)
        )

    def matches(self, instance_type: InstanceType) -> bool:
        """Return True if ``instance_type`` satisfies these constraints."""
        if self.arch is not None and self.arch not in instance_type.arches:
            return False
        if self.cpu_cores is not None and (instance_type.cpu_cores or 0) < self.cpu_cores:
            return False
        # Types that do not publish CPU power are not excluded by it.
        if (self.cpu_power is not None and instance_type.cpu_power is not None
                and instance_type.cpu_power < self.cpu_power):
            return False
        if self.mem is not None and (instance_type.mem or 0) < self.mem:
            return False
        return True

    def __str__(self) -> str:
        parts = []
        if self.arch is not None:
            parts.append(f"arch={self.arch}")
        if self.cpu_cores is not None:
            parts.append(f"cpu-cores={self.cpu_cores}")
        if self.cpu_power is not None:
            parts.append(f"cpu-power={self.cpu_power}")
        if self.mem is not None:
            parts.append(f"mem={self.mem}M")
        return " ".join(parts)


def _parse_arch(raw: str) -> str:
    if raw not in SUPPORTED_ARCHES:
        raise ValueError(f"{raw!r} not recognized")
    return raw


def _parse_count(raw: str) -> int:
    if not raw.isdecimal():
        raise ValueError("must be a non-negative integer")
    return int(raw)


def _parse_mem(raw: str) -> int:
    match = _MEM_PATTERN.match(raw)
    if match is None:
        raise ValueError("must be a non-negative float with optional M/G/T/P suffix")
    number, suffix = match.groups()
    return int(math.ceil(float(number) * _MEM_SUFFIXES[suffix or "M"]))


_PARSERS: Dict[str, Callable[[str], object]] = {
    "arch": _parse_arch,
    "cpu-cores": _parse_count,
    "cpu-power": _parse_count,
    "mem": _parse_mem,
}
