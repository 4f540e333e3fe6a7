"""
Base settings for HobbyHub services.

Values come from environment variables (or a local .env file) through
pydantic-settings. The object is frozen: configuration is read once at
startup and handed to services, never mutated afterwards.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        DEFAULT_NEARBY_RADIUS_KM: float = 10.0

    settings = Settings()
    settings.validate_required()
"""

import logging
from typing import List, Optional

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class BaseAppSettings(BaseSettings):
    """
    Settings shared by every HobbyHub process.

    JWT_SECRET is a SecretStr so it never shows up in repr() or logs; read it
    with get_secret_value() at the single place that signs tokens.
    """

    # ==========================================================================
    # MongoDB
    # ==========================================================================
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "hobbyhub"

    # ==========================================================================
    # Session tokens and password hashing
    # ==========================================================================
    JWT_SECRET: Optional[SecretStr] = None
    JWT_ALGORITHM: str = "HS256"
    JWT_ISSUER: Optional[str] = None
    JWT_AUDIENCE: Optional[str] = None
    JWT_EXPIRE_DAYS: int = 30

    BCRYPT_ROUNDS: int = 12  # log2 of bcrypt iterations

    # ==========================================================================
    # Server
    # ==========================================================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production
    LOG_LEVEL: str = "INFO"

    CORS_ORIGINS: str = "*"  # Comma-separated origins or "*"
    CORS_ALLOW_CREDENTIALS: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
        frozen=True,
    )

    def get_cors_origins(self) -> List[str]:
        """Parse CORS_ORIGINS into a list."""
        if self.CORS_ORIGINS == "*":
            return ["*"]
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    def get_log_level(self) -> int:
        """LOG_LEVEL as a logging module constant."""
        return getattr(logging, self.LOG_LEVEL.upper(), logging.INFO)

    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    def validate_required(self) -> None:
        """
        Fail fast on configuration that would leave the service insecure
        or broken.

        Raises:
            ValueError: Listing every problem found
        """
        errors = []

        secret = self.JWT_SECRET.get_secret_value() if self.JWT_SECRET else ""
        if not secret:
            errors.append("JWT_SECRET is required")
        elif self.is_production() and len(secret) < 32:
            errors.append("JWT_SECRET must be at least 32 characters in production")

        if not 4 <= self.BCRYPT_ROUNDS <= 31:
            errors.append("BCRYPT_ROUNDS must be between 4 and 31")

        if self.JWT_EXPIRE_DAYS < 1:
            errors.append("JWT_EXPIRE_DAYS must be at least 1")

        if self.LOG_LEVEL.upper() not in _LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
