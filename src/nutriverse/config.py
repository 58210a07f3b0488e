"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    food_source: Literal["json", "supabase"] = "json"
    foods_data_path: str | None = None
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    supabase_foods_table: str = "foods"
    supabase_foods_order_column: str = "position"
    api_base_url: str = "http://localhost:8000"
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
