"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    similarity_threshold: float = 0.3
    fallback_kcal_per_minute: float = 5.0
    default_weight_kg: float = 70.0
    default_serving_basis_g: float = 100.0
    open_food_facts_base_url: str = "https://world.openfoodfacts.org"
    open_food_facts_timeout_seconds: float = 5.0
    lookup_retry_attempts: int = 1
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
