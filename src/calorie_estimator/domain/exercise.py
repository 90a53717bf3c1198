"""Exercise domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogEntry:
    """Known exercise with its MET coefficient."""

    key: str
    met_value: float
    description: str


@dataclass(frozen=True)
class MatchResult:
    """Outcome of resolving a free-text exercise name against the catalog."""

    found: bool
    entry: CatalogEntry | None
    score: float


@dataclass(frozen=True)
class ExerciseEstimate:
    """Calories burned for one exercise request."""

    found: bool
    calories: float
    description: str
    exercise_name: str | None
    score: float
    minutes: float
    weight_kg: float
