"""Domain errors."""


class InvalidInputError(ValueError):
    """Raised when a name or quantity is rejected at the boundary."""
