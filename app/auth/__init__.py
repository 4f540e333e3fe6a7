"""
Auth System

Account registration, login and logout with stateless JWT session tokens.
"""

from app.auth.results import AuthError, AuthErrorCode, ServiceResult
from app.auth.services.session_service import SessionService

__all__ = [
    "AuthError",
    "AuthErrorCode",
    "ServiceResult",
    "SessionService",
]
