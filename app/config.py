"""
HobbyHub application settings.

Extends the base settings with HobbyHub-specific configuration.
"""

from functools import lru_cache

from common.config import BaseAppSettings


class Settings(BaseAppSettings):
    """HobbyHub-specific settings."""

    # ==========================================================================
    # Token claims
    # ==========================================================================
    JWT_ISSUER: str = "hobbyhub"
    JWT_AUDIENCE: str = "hobbyhub-clients"

    # ==========================================================================
    # Nearby search
    # ==========================================================================
    DEFAULT_NEARBY_RADIUS_KM: float = 10.0
    MAX_NEARBY_RADIUS_KM: float = 500.0


@lru_cache()
def get_settings() -> Settings:
    """Load settings once per process."""
    return Settings()
