"""
Base settings class for environment configuration.

Uses Pydantic Settings for automatic environment variable loading.
Extend this class for application-specific settings.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        # App-specific settings
        FAL_API_KEY: str = ""

    settings = Settings()
    print(settings.AI_PROVIDER)
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """
    Base settings class with common configuration options.

    Automatically loads values from environment variables.
    Extend this class for application-specific settings.
    """

    # ==========================================================================
    # AI Settings
    # ==========================================================================
    AI_PROVIDER: str = "claude"  # "claude" or "openai"

    # Claude Settings (used when AI_PROVIDER = "claude")
    CLAUDE_API_KEY: Optional[str] = None
    CLAUDE_MODEL: str = "claude-sonnet-4-5-20250929"

    # OpenAI Settings (used when AI_PROVIDER = "openai")
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o"

    AI_MAX_RETRIES: int = 3
    AI_TIMEOUT_SECONDS: float = 60.0

    # ==========================================================================
    # Server Settings
    # ==========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ENVIRONMENT: str = "development"  # development, staging, production

    # CORS Settings
    CORS_ORIGINS: str = "*"  # Comma-separated origins or "*"
    CORS_ALLOW_CREDENTIALS: bool = True

    # ==========================================================================
    # Internationalization
    # ==========================================================================
    DEFAULT_LANGUAGE: str = "English"
    SUPPORTED_LANGUAGES: str = "English,Italian,French,German,Spanish,Japanese"  # Comma-separated

    # ==========================================================================
    # Pydantic Settings Configuration
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",  # Allow app-specific settings
        case_sensitive=True,
    )

    def get_cors_origins(self) -> list:
        """Parse CORS_ORIGINS into a list."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    def get_supported_languages(self) -> list:
        """Parse SUPPORTED_LANGUAGES into a list."""
        return [lang.strip() for lang in self.SUPPORTED_LANGUAGES.split(",")]

    def get_ai_api_key(self) -> Optional[str]:
        """API key for the configured AI provider, or None if unset."""
        if self.AI_PROVIDER == "openai":
            return self.OPENAI_API_KEY
        return self.CLAUDE_API_KEY

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT.lower() == "development"

    def validate_required(self) -> None:
        """
        Validate that required settings are configured.

        Raises:
            ValueError: If required settings are missing
        """
        errors = []

        if self.AI_PROVIDER not in ("claude", "openai"):
            errors.append(f"AI_PROVIDER must be 'claude' or 'openai', got '{self.AI_PROVIDER}'")

        if self.DEFAULT_LANGUAGE not in self.get_supported_languages():
            errors.append("DEFAULT_LANGUAGE must be one of SUPPORTED_LANGUAGES")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
