"""Instance spec use cases."""

from .service import InstanceSpecService

__all__ = ["InstanceSpecService"]
