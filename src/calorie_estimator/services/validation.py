"""Boundary validation for user-supplied names and quantities."""

import math

from calorie_estimator.domain.errors import InvalidInputError


def validate_name(raw: object) -> str:
    """Return the stripped name or reject an empty one."""
    if not isinstance(raw, str):
        raise InvalidInputError("Name must be a string")
    cleaned = raw.strip()
    if not cleaned:
        raise InvalidInputError("Name must not be empty")
    return cleaned


def validate_quantity(raw: object, *, field: str = "quantity") -> float:
    """Return a positive finite float or raise ``InvalidInputError``."""
    if isinstance(raw, bool):
        raise InvalidInputError(f"{field} must be a number")
    if isinstance(raw, int | float):
        value = float(raw)
    elif isinstance(raw, str):
        try:
            value = float(raw.strip())
        except ValueError:
            raise InvalidInputError(f"{field} must be a number") from None
    else:
        raise InvalidInputError(f"{field} must be a number")
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(f"{field} must be a positive number")
    return value
