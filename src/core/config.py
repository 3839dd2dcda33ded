"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. Every field has a safe default, so the service starts with no .env
file at all.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic

Usage:
    from src.core.config import settings

    if "USD" in settings.supported_currency_codes:
        ...

    if settings.is_development:
        # Dev-specific behavior
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    # Core application settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose errors)",
    )
    host: str = Field(
        default="0.0.0.0",
        description="Server bind host",
    )
    port: int = Field(
        default=8000,
        description="Server bind port",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="Payment Instructions",
        description="Application name",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # API configuration
    api_v1_prefix: str = Field(
        default="/api/v1",
        description="API v1 route prefix",
    )

    # Transfer rules
    supported_currencies: str = Field(
        default="NGN,USD,GBP,GHS",
        description="Currencies accepted in instructions (comma-separated ISO codes)",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the level is not a standard logging level.
        """
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("supported_currencies")
    @classmethod
    def validate_supported_currencies(cls, v: str) -> str:
        """
        Normalize the comma-separated currency list.

        Args:
            v: Comma-separated currency codes.

        Returns:
            str: Upper-cased, de-duplicated codes joined by commas.

        Raises:
            ValueError: If the list is empty or a code is not 3 letters.
        """
        codes: list[str] = []
        for raw_code in v.split(","):
            code = raw_code.strip().upper()
            if not code:
                continue
            if len(code) != 3 or not code.isalpha() or not code.isascii():
                raise ValueError(f"Currency code must be 3 letters: {raw_code}")
            if code not in codes:
                codes.append(code)
        if not codes:
            raise ValueError("At least one supported currency is required")
        return ",".join(codes)

    @property
    def supported_currency_codes(self) -> tuple[str, ...]:
        """
        Supported currency codes in configured order.

        Returns:
            tuple[str, ...]: Upper-cased ISO currency codes.
        """
        return tuple(self.supported_currencies.split(","))

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """
        Check if running in testing environment.

        Returns:
            bool: True if environment is TESTING, False otherwise.
        """
        return self.environment == Environment.TESTING

    @property
    def is_production(self) -> bool:
        """
        Check if running in production environment.

        Returns:
            bool: True if environment is PRODUCTION, False otherwise.
        """
        return self.environment == Environment.PRODUCTION


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings: Application settings loaded from the environment.
    """
    return Settings()


settings = get_settings()
