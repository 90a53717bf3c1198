"""Exercise name resolution and energy expenditure."""

from collections.abc import Sequence
from dataclasses import dataclass

from calorie_estimator.domain.exercise import (
    CatalogEntry,
    ExerciseEstimate,
    MatchResult,
)
from calorie_estimator.services.catalog import DEFAULT_EXERCISES
from calorie_estimator.services.matching import normalize, similarity
from calorie_estimator.services.validation import validate_name, validate_quantity

DEFAULT_SIMILARITY_THRESHOLD = 0.3
DEFAULT_FALLBACK_KCAL_PER_MINUTE = 5.0
DEFAULT_WEIGHT_KG = 70.0
FALLBACK_DESCRIPTION = "General physical activity"


def resolve_exercise(
    raw_name: str,
    catalog: Sequence[CatalogEntry],
    threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> MatchResult:
    """Find the closest catalog entry for a free-text exercise name.

    The first entry with the strictly highest score wins, so ties resolve to
    catalog order. Scores below ``threshold`` produce a not-found result.
    """
    name = normalize(raw_name)
    best_entry: CatalogEntry | None = None
    best_score = 0.0
    for entry in catalog:
        score = similarity(name, normalize(entry.key))
        if best_entry is None or score > best_score:
            best_entry = entry
            best_score = score

    if best_entry is None or best_score < threshold:
        return MatchResult(found=False, entry=None, score=best_score)
    return MatchResult(found=True, entry=best_entry, score=best_score)


def energy_burned(
    minutes: float,
    weight_kg: float = DEFAULT_WEIGHT_KG,
    *,
    met_value: float,
    matched: bool,
    fallback_kcal_per_minute: float = DEFAULT_FALLBACK_KCAL_PER_MINUTE,
) -> float:
    """Return calories burned using the MET formula or the flat fallback.

    The fallback ignores body weight.
    """
    if not matched:
        return minutes * fallback_kcal_per_minute
    return met_value * weight_kg * (minutes / 60)


@dataclass
class ExerciseService:
    """Service that estimates calories burned for an exercise."""

    catalog: Sequence[CatalogEntry] = DEFAULT_EXERCISES
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD
    fallback_kcal_per_minute: float = DEFAULT_FALLBACK_KCAL_PER_MINUTE
    default_weight_kg: float = DEFAULT_WEIGHT_KG

    def match(self, name: str) -> MatchResult:
        """Resolve a name against the configured catalog."""
        return resolve_exercise(name, self.catalog, self.similarity_threshold)

    def estimate(
        self, name: str, minutes: float, weight_kg: float | None = None
    ) -> ExerciseEstimate:
        """Validate inputs and compute calories burned."""
        cleaned = validate_name(name)
        duration = validate_quantity(minutes, field="minutes")
        weight = (
            self.default_weight_kg
            if weight_kg is None
            else validate_quantity(weight_kg, field="weight_kg")
        )
        result = self.match(cleaned)
        if not result.found or result.entry is None:
            return ExerciseEstimate(
                found=False,
                calories=energy_burned(
                    duration,
                    weight,
                    met_value=0.0,
                    matched=False,
                    fallback_kcal_per_minute=self.fallback_kcal_per_minute,
                ),
                description=FALLBACK_DESCRIPTION,
                exercise_name=None,
                score=result.score,
                minutes=duration,
                weight_kg=weight,
            )
        return ExerciseEstimate(
            found=True,
            calories=energy_burned(
                duration, weight, met_value=result.entry.met_value, matched=True
            ),
            description=result.entry.description,
            exercise_name=result.entry.key,
            score=result.score,
            minutes=duration,
            weight_kg=weight,
        )
