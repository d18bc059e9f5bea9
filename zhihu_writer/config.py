"""
Configuration module for the Zhihu answer writer backend.

Loads environment variables and validates required settings.
"""
import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv

# Load .env file
load_dotenv()


PACKAGE_DIR = Path(__file__).resolve().parent


class Settings:
    """Application settings loaded from environment variables."""

    # Chat completion API (any OpenAI-compatible endpoint)
    AI_API_URL: str = os.getenv("AI_API_URL", "https://api.openai.com/v1/chat/completions")
    # AI_API_KEY wins; OPENAI_API_KEY is accepted for convenience
    AI_API_KEY: str = os.getenv("AI_API_KEY") or os.getenv("OPENAI_API_KEY", "")
    AI_MODEL: str = os.getenv("AI_MODEL", "gpt-4.1")
    AI_TEMPERATURE: float = float(os.getenv("AI_TEMPERATURE", "0.85"))
    AI_MAX_TOKENS: int = int(os.getenv("AI_MAX_TOKENS", "4000"))
    AI_TIMEOUT_SECONDS: float = float(os.getenv("AI_TIMEOUT_SECONDS", "120"))

    # Serpstack web search API
    SERPSTACK_API_KEY: str = os.getenv("SERPSTACK_API_KEY", "")
    SERPSTACK_API_URL: str = os.getenv("SERPSTACK_API_URL", "http://api.serpstack.com/search")
    SEARCH_RESULT_LIMIT: int = int(os.getenv("SEARCH_RESULT_LIMIT", "10"))
    SEARCH_TIMEOUT_SECONDS: float = float(os.getenv("SEARCH_TIMEOUT_SECONDS", "15"))

    # Static prompt guidance files (appliance.md, beauty.md, ...)
    PROMPTS_DIR: str = os.getenv("PROMPTS_DIR", str(PACKAGE_DIR / "prompts"))

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS Settings (only read in production, see main._get_cors_origins)
    CORS_ALLOWED_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
        if origin.strip()
    ]

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ValueError: If any required setting is missing.
        """
        required_settings = {
            "AI_API_KEY": cls.AI_API_KEY,
            "SERPSTACK_API_KEY": cls.SERPSTACK_API_KEY,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash; the endpoints answer 500
        # "credential not configured" until the keys are set
        if settings.is_development():
            print(f"⚠️  Warning: {e}")
            print("   The app may not work correctly until you configure your .env file.")
        else:
            raise
