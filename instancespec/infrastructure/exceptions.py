from typing import Optional, Any


class InfrastructureError(Exception):
    """Base exception for infrastructure-related errors."""
    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.details = details


class CatalogError(InfrastructureError):
    """Raised when the image catalog cannot be used."""
    pass


class CatalogParseError(CatalogError):
    """Raised when catalog data is not valid JSON or does not fit the schema."""
    pass


class UnknownSeriesError(CatalogError):
    """Raised when a series has no known release version."""
    def __init__(self, series: str):
        super().__init__(f"unknown series {series!r}", {"series": series})
        self.series = series
