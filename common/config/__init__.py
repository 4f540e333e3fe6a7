"""
Configuration module - frozen, environment-driven settings.
"""

from common.config.base_settings import BaseAppSettings

__all__ = ["BaseAppSettings"]
