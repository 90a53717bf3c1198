"""Tests for the estimation API."""

from fastapi.testclient import TestClient

from calorie_estimator.api.app import FOOD_NOT_FOUND, create_app
from tests.conftest import FakeOpenFoodFactsClient


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_exercise_estimate_matched(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/exercise/estimate", json={"name": "Running", "minutes": 30}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["found"] is True
    assert data["exercise_name"] == "running"
    assert data["calories"] == 280.0
    assert data["weight_kg"] == 70.0
    assert "running" in data["message"]


def test_exercise_estimate_fallback(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/exercise/estimate",
        json={"name": "xyzabc123", "minutes": 30, "weight_kg": 90},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["found"] is False
    assert data["exercise_name"] is None
    assert data["calories"] == 150.0
    assert data["description"] == "General physical activity"
    assert "xyzabc123" in data["message"]


def test_exercise_estimate_rejects_invalid_minutes(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/exercise/estimate", json={"name": "yoga", "minutes": 0})

    assert response.status_code == 422


def test_exercise_estimate_rejects_blank_name(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/exercise/estimate", json={"name": "   ", "minutes": 10})

    assert response.status_code == 422
    assert "empty" in response.json()["detail"]


def test_food_estimate(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/food/estimate", json={"name": "apple", "grams": 150})

    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Apple"
    assert data["ratio"] == 1.5
    assert data["calories"] == 78.0
    assert data["carbs"] == 21.0


def test_food_estimate_not_found(container) -> None:
    container.nutrition_service.client = FakeOpenFoodFactsClient(
        payload={"products": []}
    )
    client = TestClient(create_app(container))

    response = client.post("/food/estimate", json={"name": "zzz", "grams": 100})

    assert response.status_code == 404
    assert response.json()["detail"] == FOOD_NOT_FOUND


def test_food_estimate_rejects_negative_grams(container) -> None:
    client = TestClient(create_app(container))

    response = client.post("/food/estimate", json={"name": "apple", "grams": -1})

    assert response.status_code == 422


def test_food_estimate_malformed_lookup_is_not_found(container) -> None:
    container.nutrition_service.client = FakeOpenFoodFactsClient(
        payload={"products": 5}
    )
    client = TestClient(create_app(container))

    response = client.post("/food/estimate", json={"name": "apple", "grams": 100})

    assert response.status_code == 404
    assert response.json()["detail"] == FOOD_NOT_FOUND
