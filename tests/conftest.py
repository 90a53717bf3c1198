"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from calorie_estimator.adapters.open_food_facts_client import OpenFoodFactsClient
from calorie_estimator.config import Settings
from calorie_estimator.containers import AppContainer
from calorie_estimator.services.catalog import DEFAULT_EXERCISES
from calorie_estimator.services.exercise import ExerciseService
from calorie_estimator.services.nutrition import NutritionService


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake Open Food Facts client with in-memory responses."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "products": [
                {
                    "product_name": "Apple",
                    "brands": "Orchard",
                    "nutriments": {
                        "energy-kcal_100g": 52,
                        "fat_100g": 0.2,
                        "proteins_100g": 0.3,
                        "carbohydrates_100g": 14,
                    },
                }
            ]
        }
    )
    queries: list[str] = field(default_factory=list)

    async def search_products(self, query: str) -> dict[str, object]:
        self.queries.append(query)
        return self.payload


@dataclass
class FailingOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake client that raises on every call."""

    calls: int = 0

    async def search_products(self, query: str) -> dict[str, object]:
        self.calls += 1
        raise RuntimeError("network down")


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test")


@pytest.fixture
def food_client() -> FakeOpenFoodFactsClient:
    return FakeOpenFoodFactsClient()


@pytest.fixture
def container(
    settings: Settings, food_client: FakeOpenFoodFactsClient
) -> AppContainer:
    exercise_service = ExerciseService(
        catalog=DEFAULT_EXERCISES,
        similarity_threshold=settings.similarity_threshold,
        fallback_kcal_per_minute=settings.fallback_kcal_per_minute,
        default_weight_kg=settings.default_weight_kg,
    )
    nutrition_service = NutritionService(
        client=food_client,
        default_serving_basis_g=settings.default_serving_basis_g,
        retry_delay_seconds=0,
    )

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        exercise_service=exercise_service,
        nutrition_service=nutrition_service,
        close_resources=close_resources,
    )
