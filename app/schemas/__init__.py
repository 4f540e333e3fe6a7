"""
Pydantic request/response schemas.
"""

from app.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    AuthResult,
    RefreshTokenRequest,
    ForgotPasswordRequest,
    ResetPasswordRequest,
)
from app.schemas.user import HobbySummary, PublicUser, UpdateLocationRequest, NearbyUser

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "AuthResult",
    "RefreshTokenRequest",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "HobbySummary",
    "PublicUser",
    "UpdateLocationRequest",
    "NearbyUser",
]
