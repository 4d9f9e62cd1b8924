"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for dependency injection compatibility in FastAPI.

Usage:
    from backend.settings import get_settings, Settings

    # In FastAPI endpoints (dependency injection)
    @router.post("/api/save-plan")
    def save_plan(settings: Settings = Depends(get_settings)):
        ...

    # Tests
    test_settings = Settings(environment="test", _env_file=None)
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CORS_ORIGINS = (
    "https://www.pjifitness.com,"
    "https://pjifitness.com,"
    "http://localhost:3000,"
    "http://127.0.0.1:3000"
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # -------------------------------------------------------------------------
    # External Services - OpenAI
    # -------------------------------------------------------------------------
    openai_api_key: Optional[str] = Field(
        default=None,
        description="OpenAI API key for plans, chat, vision and speech",
    )
    openai_workout_model: str = Field(
        default="gpt-4.1-mini",
        description="Model used for starter plans and next-workout prescriptions",
    )
    openai_chat_model: str = Field(
        default="gpt-4.1-mini",
        description="Model used for coach chat, summaries and meal photos",
    )
    openai_tts_model: str = Field(
        default="gpt-4o-mini-tts",
        description="Text-to-speech model",
    )
    openai_tts_voice: str = Field(
        default="onyx",
        description="Text-to-speech voice",
    )
    openai_timeout_seconds: float = Field(
        default=28.0,
        description="Deadline for a single OpenAI call; exceeding it returns 504",
    )

    # -------------------------------------------------------------------------
    # Observability - Helicone
    # -------------------------------------------------------------------------
    helicone_enabled: bool = Field(
        default=False,
        description="Route OpenAI calls through the Helicone proxy",
    )
    helicone_api_key: Optional[str] = Field(
        default=None,
        description="Helicone API key",
    )

    # -------------------------------------------------------------------------
    # External Services - Shopify Admin API
    # -------------------------------------------------------------------------
    shopify_store_domain: Optional[str] = Field(
        default=None,
        description="Store domain, e.g. pjifitness.myshopify.com",
    )
    shopify_admin_api_access_token: Optional[str] = Field(
        default=None,
        description="Admin API access token",
    )
    shopify_api_version: str = Field(
        default="2024-10",
        description="Admin GraphQL API version",
    )
    shopify_timeout_seconds: float = Field(
        default=15.0,
        description="Timeout for Admin API calls",
    )

    # -------------------------------------------------------------------------
    # External Services - Google Sheets
    # -------------------------------------------------------------------------
    sheet_id: Optional[str] = Field(
        default=None,
        description="Spreadsheet holding users, weight, meal and summary tabs",
    )
    google_service_account_json: Optional[str] = Field(
        default=None,
        description="Service account credentials as a JSON string",
    )

    # -------------------------------------------------------------------------
    # External Services - USDA FoodData Central
    # -------------------------------------------------------------------------
    usda_api_key: Optional[str] = Field(
        default=None,
        description="FoodData Central API key; lookups are skipped without it",
    )
    usda_timeout_seconds: float = Field(
        default=10.0,
        description="Timeout for FoodData Central calls",
    )

    # -------------------------------------------------------------------------
    # CORS
    # -------------------------------------------------------------------------
    cors_allowed_origins: str = Field(
        default=DEFAULT_CORS_ORIGINS,
        description="Comma-separated list of allowed browser origins",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse allowed origins into a list."""
        return [o.strip() for o in self.cors_allowed_origins.split(",") if o.strip()]

    # -------------------------------------------------------------------------
    # Observability - Sentry
    # -------------------------------------------------------------------------
    sentry_dsn: Optional[str] = Field(
        default=None,
        description="Sentry DSN for error tracking",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
