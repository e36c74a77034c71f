from instancespec.domain.core.exceptions import ValidationError


class ConstraintsParseError(ValidationError):
    """Raised when a constraints string cannot be parsed."""
    def __init__(self, message: str, constraints: str = ""):
        super().__init__(message, {"constraints": constraints})
        self.constraints = constraints
