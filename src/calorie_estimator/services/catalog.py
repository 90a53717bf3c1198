"""Built-in exercise catalog."""

from collections.abc import Iterable

from calorie_estimator.domain.exercise import CatalogEntry
from calorie_estimator.services.matching import normalize

# MET values follow the Harvard Health "calories burned in 30 minutes" table.
_DEFAULT_ENTRIES: tuple[tuple[str, float, str], ...] = (
    ("walking", 3.5, "Walking at moderate pace (3.5 mph)"),
    ("running", 8.0, "Running at 6 mph (10 min/mile)"),
    ("swimming", 6.0, "Swimming leisurely"),
    ("dance", 5.0, "General dancing"),
    ("sex", 1.8, "Sexual activity (moderate effort)"),
    ("cycling", 7.5, "Cycling at 12-14 mph"),
    ("yoga", 3.0, "Hatha yoga"),
    ("weight training", 4.0, "General weight lifting"),
    ("basketball", 8.0, "Playing basketball"),
    ("football", 8.0, "Playing football/soccer"),
)


def build_catalog(
    entries: Iterable[tuple[str, float, str]],
) -> tuple[CatalogEntry, ...]:
    """Build an immutable catalog with normalized keys, preserving order."""
    catalog: list[CatalogEntry] = []
    for key, met_value, description in entries:
        if met_value <= 0:
            raise ValueError(f"MET value for {key!r} must be positive")
        catalog.append(
            CatalogEntry(
                key=normalize(key),
                met_value=float(met_value),
                description=description,
            )
        )
    return tuple(catalog)


DEFAULT_EXERCISES = build_catalog(_DEFAULT_ENTRIES)
