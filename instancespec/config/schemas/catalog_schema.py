"""Image catalog configuration schema."""
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

DEFAULT_SERIES_VERSIONS: Dict[str, str] = {
    "oneiric": "11.10",
    "precise": "12.04",
    "quantal": "12.10",
    "raring": "13.04",
    "saucy": "13.10",
    "trusty": "14.04",
}


class CatalogConfig(BaseModel):
    """Image catalog lookup configuration."""

    product_prefix: str = Field(
        "com.ubuntu.cloud:server",
        description="Prefix of catalog product ids, followed by series version and arch"
    )
    series_versions: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_SERIES_VERSIONS),
        description="Mapping of series name to release version"
    )
    default_arches: List[str] = Field(
        default_factory=lambda: ["amd64", "arm"],
        description="Architectures searched when a request names none"
    )

    @field_validator("default_arches")
    @classmethod
    def validate_default_arches(cls, v: List[str]) -> List[str]:
        """Validate default architectures."""
        if not v:
            raise ValueError("At least one default architecture is required")
        return v

    @field_validator("product_prefix")
    @classmethod
    def validate_product_prefix(cls, v: str) -> str:
        if not v or v.endswith(":"):
            raise ValueError("Product prefix must be non-empty and must not end with ':'")
        return v
