"""
Structured outcomes of session service operations.

Expected business failures (duplicate account, bad credentials, ...) are
returned as values, not raised. Routers translate them to HTTP errors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class AuthErrorCode(str, Enum):
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_USERNAME = "DUPLICATE_USERNAME"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    ACCOUNT_DEACTIVATED = "ACCOUNT_DEACTIVATED"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"
    NOT_IMPLEMENTED = "NOT_IMPLEMENTED"


@dataclass(frozen=True)
class AuthError:
    """A failure category with its user-facing message."""
    code: AuthErrorCode
    message: str


DUPLICATE_EMAIL = AuthError(AuthErrorCode.DUPLICATE_EMAIL, "Email already registered")
DUPLICATE_USERNAME = AuthError(AuthErrorCode.DUPLICATE_USERNAME, "Username already taken")
# Unknown identifier and wrong password share this one error
INVALID_CREDENTIALS = AuthError(AuthErrorCode.INVALID_CREDENTIALS, "Invalid credentials")
ACCOUNT_DEACTIVATED = AuthError(AuthErrorCode.ACCOUNT_DEACTIVATED, "Account is deactivated")
NOT_IMPLEMENTED = AuthError(AuthErrorCode.NOT_IMPLEMENTED, "Not implemented")


def persistence_failure(operation: str) -> AuthError:
    """Generic storage failure; details stay in the server log."""
    return AuthError(
        AuthErrorCode.PERSISTENCE_FAILURE,
        f"{operation} failed. Please try again later.",
    )


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Either data (success) or an AuthError (failure)."""
    success: bool
    data: Optional[T] = None
    error: Optional[AuthError] = None

    @classmethod
    def ok(cls, data: T) -> "ServiceResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: AuthError) -> "ServiceResult[T]":
        return cls(success=False, error=error)
