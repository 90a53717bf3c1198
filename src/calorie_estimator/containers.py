"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from calorie_estimator.adapters.open_food_facts_client import HttpxOpenFoodFactsClient
from calorie_estimator.config import Settings
from calorie_estimator.services.catalog import DEFAULT_EXERCISES
from calorie_estimator.services.exercise import ExerciseService
from calorie_estimator.services.nutrition import NutritionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    exercise_service: ExerciseService
    nutrition_service: NutritionService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    food_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.open_food_facts_base_url,
        timeout_seconds=resolved_settings.open_food_facts_timeout_seconds,
    )
    exercise_service = ExerciseService(
        catalog=DEFAULT_EXERCISES,
        similarity_threshold=resolved_settings.similarity_threshold,
        fallback_kcal_per_minute=resolved_settings.fallback_kcal_per_minute,
        default_weight_kg=resolved_settings.default_weight_kg,
    )
    nutrition_service = NutritionService(
        client=food_client,
        default_serving_basis_g=resolved_settings.default_serving_basis_g,
        debug=resolved_settings.debug,
        retry_attempts=resolved_settings.lookup_retry_attempts,
    )

    async def close_resources() -> None:
        await food_client.close()

    return AppContainer(
        settings=resolved_settings,
        exercise_service=exercise_service,
        nutrition_service=nutrition_service,
        close_resources=close_resources,
    )
