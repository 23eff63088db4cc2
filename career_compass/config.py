"""
Configuration module for the Career Compass backend.

Loads environment variables and validates required settings.
"""
import os
from typing import List

from dotenv import load_dotenv

from career_compass.services.career_advisor import AdvisorConfig

# Load .env file
load_dotenv()


class Settings:
    """Application settings loaded from environment variables."""

    # Google Gemini API
    # The key is only a default credential; clients may send their own per request.
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    GEMINI_BASE_URL: str = os.getenv("GEMINI_BASE_URL", "")
    GEMINI_API_VERSION: str = os.getenv("GEMINI_API_VERSION", "v1beta")
    GEMINI_TIMEOUT_MS: int = int(os.getenv("GEMINI_TIMEOUT_MS", "30000"))
    # Empty leaves thinking at the model default (needed for models that cannot disable it)
    GEMINI_THINKING_BUDGET: str = os.getenv("GEMINI_THINKING_BUDGET", "0")

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings (only read in production)
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required settings are configured.

        GEMINI_API_KEY is deliberately not required: without it the service
        answers with its static fallbacks.

        Raises:
            ValueError: If any required setting is missing or malformed.
        """
        required_settings = {
            "GEMINI_MODEL": cls.GEMINI_MODEL,
            "GEMINI_API_VERSION": cls.GEMINI_API_VERSION,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

        if cls.GEMINI_TIMEOUT_MS <= 0:
            raise ValueError("GEMINI_TIMEOUT_MS must be a positive number of milliseconds.")

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"

    @classmethod
    def advisor_config(cls) -> AdvisorConfig:
        """Build the adapter configuration used at application start-up."""
        return AdvisorConfig(
            default_api_key=cls.GEMINI_API_KEY,
            model=cls.GEMINI_MODEL,
            base_url=cls.GEMINI_BASE_URL or None,
            api_version=cls.GEMINI_API_VERSION,
            timeout_ms=cls.GEMINI_TIMEOUT_MS,
            thinking_budget=int(cls.GEMINI_THINKING_BUDGET) if cls.GEMINI_THINKING_BUDGET.strip() else None,
        )


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash
        if settings.is_development():
            print(f"⚠️  Warning: {e}")
            print("   The app may not work correctly until you configure your .env file.")
        else:
            # In production or staging, fail immediately
            raise
