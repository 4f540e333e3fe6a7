"""
Authentication module - Password hashing, JWT session tokens, FastAPI dependencies.
"""

from common.auth.base import (
    PasswordHasher,
    TokenIssuer,
    TokenClaims,
    IssuedToken,
    InvalidTokenError,
)
from common.auth.password_hasher import BcryptPasswordHasher
from common.auth.jwt_auth import JWTTokenIssuer
from common.auth.dependencies import create_auth_dependency

__all__ = [
    "PasswordHasher",
    "TokenIssuer",
    "TokenClaims",
    "IssuedToken",
    "InvalidTokenError",
    "BcryptPasswordHasher",
    "JWTTokenIssuer",
    "create_auth_dependency",
]
