"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from calorie_estimator.api.models import (
    ExerciseRequest,
    ExerciseResponse,
    FoodRequest,
    FoodResponse,
)
from calorie_estimator.app_logging import configure_logging
from calorie_estimator.containers import AppContainer
from calorie_estimator.domain.errors import InvalidInputError
from calorie_estimator.domain.exercise import ExerciseEstimate

FOOD_NOT_FOUND = "Food not found. Try a different name."


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.exception_handler(InvalidInputError)
    async def invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/exercise/estimate")
    async def estimate_exercise(
        payload: ExerciseRequest, request: Request
    ) -> ExerciseResponse:
        """Estimate calories burned for an exercise."""
        state_container: AppContainer = request.app.state.container
        estimate = state_container.exercise_service.estimate(
            payload.name, payload.minutes, payload.weight_kg
        )
        if not estimate.found:
            logger.info("No catalog match for exercise: %s", payload.name)
        return ExerciseResponse(
            found=estimate.found,
            calories=estimate.calories,
            description=estimate.description,
            exercise_name=estimate.exercise_name,
            score=estimate.score,
            minutes=estimate.minutes,
            weight_kg=estimate.weight_kg,
            message=_exercise_message(estimate, payload.name),
        )

    @app.post("/food/estimate")
    async def estimate_food(payload: FoodRequest, request: Request) -> FoodResponse:
        """Estimate nutrients for a portion of food."""
        state_container: AppContainer = request.app.state.container
        estimate = await state_container.nutrition_service.estimate(
            payload.name, payload.grams
        )
        if estimate is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=FOOD_NOT_FOUND
            )
        return FoodResponse(
            name=estimate.name,
            grams=estimate.grams,
            serving_basis_g=estimate.serving_basis_g,
            ratio=estimate.ratio,
            calories=estimate.nutrients.calories,
            fat=estimate.nutrients.fat,
            protein=estimate.nutrients.protein,
            carbs=estimate.nutrients.carbs,
        )

    return app


def _exercise_message(estimate: ExerciseEstimate, raw_name: str) -> str:
    if estimate.found:
        return f"Activity: {estimate.description} ({estimate.exercise_name})"
    return f'Note: Used generic estimate for "{raw_name.strip()}"'
