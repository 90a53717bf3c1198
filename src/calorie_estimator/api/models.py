"""Pydantic models for the estimation API."""

from pydantic import BaseModel, Field


class ExerciseRequest(BaseModel):
    """Exercise estimation request."""

    name: str = Field(min_length=1)
    minutes: float = Field(gt=0, allow_inf_nan=False)
    weight_kg: float | None = Field(default=None, gt=0, allow_inf_nan=False)


class ExerciseResponse(BaseModel):
    """Calories burned for an exercise."""

    found: bool
    calories: float
    description: str
    exercise_name: str | None = None
    score: float
    minutes: float
    weight_kg: float
    message: str


class FoodRequest(BaseModel):
    """Food estimation request."""

    name: str = Field(min_length=1)
    grams: float = Field(gt=0, allow_inf_nan=False)


class FoodResponse(BaseModel):
    """Nutrients for a portion of food."""

    name: str
    grams: float
    serving_basis_g: float
    ratio: float
    calories: float
    fat: float
    protein: float
    carbs: float
