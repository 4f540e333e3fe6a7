"""
Common library for reusable infrastructure components.

This package provides generic modules that can be used across projects:

- database: Async MongoDB connection with Motor
- auth: Password hashing, JWT session tokens, FastAPI bearer dependency
- geo: Great-circle distance and radius filtering
- utils: Standard responses and HTTP exceptions
- config: Base settings class
"""

from common.database import MongoDB
from common.auth import (
    PasswordHasher,
    TokenIssuer,
    TokenClaims,
    BcryptPasswordHasher,
    JWTTokenIssuer,
    create_auth_dependency,
)
from common.geo import Coordinate, distance_km, filter_within_radius
from common.utils import (
    success_response,
    error_response,
    APIException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    # Auth
    "PasswordHasher",
    "TokenIssuer",
    "TokenClaims",
    "BcryptPasswordHasher",
    "JWTTokenIssuer",
    "create_auth_dependency",
    # Geo
    "Coordinate",
    "distance_km",
    "filter_within_radius",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    # Config
    "BaseAppSettings",
]
