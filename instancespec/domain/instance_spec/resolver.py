"""Resolution of an instance constraint into an instance spec.

The resolver checks its inputs in a fixed order and the first failing check
decides the error raised:

1. no candidate images -> :class:`NoImagesError`
2. no instance type left after filtering -> :class:`NoInstanceTypesError`
3. no image runs on any remaining instance type -> :class:`NoMatchingImagesError`

On success the first instance type, in the order supplied, that runs any image
wins, paired with the first such image in the order supplied. Only images of
an architecture the constraint accepts (its arches, narrowed by an ``arch``
hardware constraint) are paired. Callers rank instance types (cheapest first,
for example) before calling.
"""
from typing import List, Sequence

from instancespec.domain.image.value_objects import Image
from instancespec.domain.instance_spec.exceptions import (
    NoImagesError,
    NoInstanceTypesError,
    NoMatchingImagesError,
)
from instancespec.domain.instance_spec.value_objects import InstanceConstraint, InstanceSpec
from instancespec.domain.instance_type.filtering import filter_instance_types
from instancespec.domain.instance_type.value_objects import InstanceType
from instancespec.helpers.logger import get_logger

logger = get_logger(__name__)


def _accepted_arches(constraint: InstanceConstraint) -> List[str]:
    arch = constraint.constraints.arch
    return [a for a in constraint.arches if arch is None or a == arch]


def find_instance_spec(images: Sequence[Image],
                       constraint: InstanceConstraint,
                       instance_types: Sequence[InstanceType]) -> InstanceSpec:
    """
    Pick the image and instance type best satisfying ``constraint``.

    Args:
        images: Candidate images for the constraint's series, region and arches
        constraint: The caller's requirements
        instance_types: Available instance types in preference order

    Returns:
        The chosen instance spec

    Raises:
        NoImagesError: If ``images`` is empty
        NoInstanceTypesError: If no instance type supports the requested
            arches and satisfies the hardware constraints
        NoMatchingImagesError: If no image runs on any remaining instance type
    """
    if not images:
        raise NoImagesError(constraint.series, constraint.region, constraint.arches)

    candidates = filter_instance_types(
        instance_types, constraint.arches, constraint.constraints
    )
    if not candidates:
        raise NoInstanceTypesError(constraint.region, constraint.constraints)

    arches = _accepted_arches(constraint)
    usable = [image for image in images if image.arch in arches]

    logger.debug(
        "Matching images against instance types",
        region=constraint.region,
        images=len(usable),
        instance_types=len(candidates),
    )
    for itype in candidates:
        for image in usable:
            if image.match(itype):
                logger.debug(
                    "Selected instance spec",
                    image_id=image.id,
                    instance_type=itype.name,
                )
                return InstanceSpec(image=image, instance_type=itype)

    raise NoMatchingImagesError(
        constraint.series, constraint.region, [itype.name for itype in candidates]
    )
