"""Base value object - foundation for immutable domain objects."""
from pydantic import BaseModel, ConfigDict


class ValueObject(BaseModel):
    """
    Base class for all domain value objects.

    Value objects are immutable and compared by value. Unknown fields are
    rejected so that typos in catalog or request data surface early.
    """
    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=False,
    )
