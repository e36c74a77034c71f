from typing import Sequence

from instancespec.domain.constraints.value_objects import Constraints
from instancespec.domain.core.exceptions import DomainException


def _format_list(values: Sequence[str]) -> str:
    return "[" + " ".join(values) + "]"


class ResolutionError(DomainException):
    """Base class for instance spec resolution failures."""
    pass


class NoImagesError(ResolutionError):
    """Raised when no image exists for the requested series, region and arches."""
    def __init__(self, series: str, region: str, arches: Sequence[str]):
        super().__init__(
            f'no "{series}" images in {region} with arches {_format_list(arches)}'
        )
        self.series = series
        self.region = region
        self.arches = list(arches)


class NoInstanceTypesError(ResolutionError):
    """Raised when no instance type survives architecture and hardware filtering."""
    def __init__(self, region: str, constraints: Constraints):
        super().__init__(
            f'no instance types in {region} matching constraints "{constraints}"'
        )
        self.region = region
        self.constraints = constraints


class NoMatchingImagesError(ResolutionError):
    """Raised when images and instance types exist but none can be paired."""
    def __init__(self, series: str, region: str, instance_type_names: Sequence[str]):
        super().__init__(
            f'no "{series}" images in {region} matching instance types '
            f'{_format_list(instance_type_names)}'
        )
        self.series = series
        self.region = region
        self.instance_type_names = list(instance_type_names)
