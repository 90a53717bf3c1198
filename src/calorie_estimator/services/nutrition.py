"""Food lookup and nutrient scaling."""

import asyncio
import logging
import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from calorie_estimator.adapters.open_food_facts_client import OpenFoodFactsClient
from calorie_estimator.domain.nutrition import FoodEstimate, FoodRecord, ScaledNutrients
from calorie_estimator.services.validation import validate_name, validate_quantity

DEFAULT_SERVING_BASIS_G = 100.0

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable


def parse_serving_size(value: object) -> float | None:
    """Return a positive serving size in grams, or None if unusable.

    Strings are read by their leading number, so ``"30 g"`` gives 30.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        size = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if match is None:
            return None
        size = float(match.group(1))
    else:
        return None
    if not math.isfinite(size) or size <= 0:
        return None
    return size


def serving_basis(
    record: FoodRecord, default_basis_g: float = DEFAULT_SERVING_BASIS_G
) -> float:
    """Return the grams the record's nutrient values are anchored to."""
    size = parse_serving_size(record.serving_size_g)
    return default_basis_g if size is None else size


def scale_food_nutrients(
    record: FoodRecord | None,
    grams: float,
    default_basis_g: float = DEFAULT_SERVING_BASIS_G,
) -> ScaledNutrients | None:
    """Scale a record's nutrients to ``grams``; None means not found."""
    if record is None:
        return None
    ratio = grams / serving_basis(record, default_basis_g)
    return ScaledNutrients(
        calories=_amount(record.calories_per_100g) * ratio,
        fat=_amount(record.fat_per_100g) * ratio,
        protein=_amount(record.protein_per_100g) * ratio,
        carbs=_amount(record.carbs_per_100g) * ratio,
    )


@dataclass
class NutritionService:
    """Service for food lookups and portion scaling."""

    client: OpenFoodFactsClient
    default_serving_basis_g: float = DEFAULT_SERVING_BASIS_G
    debug: bool = False
    retry_attempts: int = 1
    retry_delay_seconds: float = 0.3

    async def lookup(self, query: str) -> FoodRecord | None:
        """Return the best food record for a query, or None.

        Lookup failures are logged and reported as None.
        """
        try:
            payload = await self._call_with_retry(
                lambda: self.client.search_products(query),
                action="search",
            )
        except Exception as exc:
            _logger.warning(
                "Food lookup failed: query=%s status=%s error=%s",
                query,
                _status_code_from_exception(exc),
                exc,
            )
            return None
        record = _record_from_payload(payload, query)
        if self.debug:
            _logger.info(
                "Food lookup: query=%s found=%s", query, record is not None
            )
        return record

    async def estimate(self, query: str, grams: float) -> FoodEstimate | None:
        """Look up a food and scale its nutrients to ``grams``."""
        name = validate_name(query)
        quantity = validate_quantity(grams, field="grams")
        record = await self.lookup(name)
        nutrients = scale_food_nutrients(
            record, quantity, self.default_serving_basis_g
        )
        if record is None or nutrients is None:
            return None
        basis = serving_basis(record, self.default_serving_basis_g)
        return FoodEstimate(
            name=record.name,
            grams=quantity,
            serving_basis_g=basis,
            ratio=quantity / basis,
            nutrients=nutrients,
        )

    async def _call_with_retry(
        self, func: "Callable[[], Awaitable[dict[str, object]]]", *, action: str
    ) -> dict[str, object]:
        """Call an async function with a short retry."""
        attempt = 0
        while True:
            try:
                return await func()
            except Exception as exc:
                attempt += 1
                if self.debug:
                    _logger.warning(
                        "Food %s failed (attempt %s/%s, status=%s): %s",
                        action,
                        attempt,
                        self.retry_attempts + 1,
                        _status_code_from_exception(exc),
                        exc,
                    )
                if attempt > self.retry_attempts:
                    raise
                await asyncio.sleep(self.retry_delay_seconds)


def _status_code_from_exception(exc: Exception) -> str:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return str(status_code)
    return "n/a"


def _record_from_payload(payload: object, query: str) -> FoodRecord | None:
    """Convert an Open Food Facts search payload into a record."""
    if not isinstance(payload, dict):
        return None
    raw_products = payload.get("products")
    if not isinstance(raw_products, list):
        return None
    products = [p for p in raw_products if isinstance(p, dict)]
    if not products:
        return None
    product = next(
        (p for p in products if _nutriments(p).get("energy-kcal_100g")),
        products[0],
    )
    nutriments = _nutriments(product)
    return FoodRecord(
        name=str(product.get("product_name") or query),
        calories_per_100g=_optional_amount(nutriments.get("energy-kcal_100g")),
        serving_size_g=product.get("serving_size"),
        fat_per_100g=_optional_amount(nutriments.get("fat_100g")),
        protein_per_100g=_optional_amount(nutriments.get("proteins_100g")),
        carbs_per_100g=_optional_amount(nutriments.get("carbohydrates_100g")),
    )


def _nutriments(product: dict[str, object]) -> dict[str, object]:
    nutriments = product.get("nutriments")
    return nutriments if isinstance(nutriments, dict) else {}


def _optional_amount(value: object) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int | float):
        amount = float(value)
    elif isinstance(value, str):
        try:
            amount = float(value)
        except ValueError:
            return None
    else:
        return None
    return amount if math.isfinite(amount) else None


def _amount(value: object) -> float:
    amount = _optional_amount(value)
    return 0.0 if amount is None else amount
