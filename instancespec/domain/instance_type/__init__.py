"""Instance type domain."""

from .value_objects import InstanceType
from .filtering import filter_instance_types, sort_by_cost

__all__ = ["InstanceType", "filter_instance_types", "sort_by_cost"]
