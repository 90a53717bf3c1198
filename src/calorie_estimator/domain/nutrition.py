"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FoodRecord:
    """Normalized food composition returned by a lookup.

    Nutrient values are anchored to the serving basis. Any of them may be
    missing in the source data, in which case they are ``None``.
    """

    name: str
    calories_per_100g: float | None = None
    serving_size_g: float | str | None = None
    fat_per_100g: float | None = None
    protein_per_100g: float | None = None
    carbs_per_100g: float | None = None


@dataclass(frozen=True)
class ScaledNutrients:
    """Nutrients scaled to a requested quantity."""

    calories: float
    fat: float
    protein: float
    carbs: float


@dataclass(frozen=True)
class FoodEstimate:
    """Scaled nutrients for one food request."""

    name: str
    grams: float
    serving_basis_g: float
    ratio: float
    nutrients: ScaledNutrients
