"""Instance type selection helpers."""
from typing import Iterable, List, Sequence

from instancespec.domain.constraints.value_objects import Constraints
from instancespec.domain.instance_type.value_objects import InstanceType


def filter_instance_types(instance_types: Iterable[InstanceType],
                          arches: Sequence[str],
                          constraints: Constraints) -> List[InstanceType]:
    """
    Select the instance types usable for a request.

    Args:
        instance_types: Candidate instance types, in preference order
        arches: Acceptable architectures
        constraints: Hardware constraints to satisfy

    Returns:
        The candidates supporting one of ``arches`` and satisfying
        ``constraints``, in their original order
    """
    return [
        itype for itype in instance_types
        if itype.supports_any(arches) and constraints.matches(itype)
    ]


def sort_by_cost(instance_types: Iterable[InstanceType]) -> List[InstanceType]:
    """Order instance types by ascending cost; types without a cost go last."""
    return sorted(
        instance_types,
        key=lambda itype: (itype.cost is None, itype.cost or 0),
    )
