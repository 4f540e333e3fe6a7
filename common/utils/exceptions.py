"""
HTTP exceptions carrying a message and a machine-readable code.

Each subclass fixes a status code and a default message/code; callers
normally override both:

    raise ConflictException("Email already registered", code="DUPLICATE_EMAIL")

The application's exception handler renders them through
common.utils.responses.detail_error_response.
"""

from typing import Any, Dict, Optional

from fastapi import HTTPException


class APIException(HTTPException):
    """
    Base API exception with error code support.
    """

    status_code_default: int = 500
    default_message: str = "Error"
    default_code: Optional[str] = None
    default_headers: Optional[Dict[str, str]] = None

    def __init__(
        self,
        message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[Any] = None,
        status_code: Optional[int] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """
        Args:
            message: Human-readable error message
            code: Machine-readable error code
            details: Additional error details
            status_code: Overrides the class's status code
            headers: Extra response headers
        """
        detail: Dict[str, Any] = {"message": message or self.default_message}

        code = code or self.default_code
        if code:
            detail["code"] = code

        if details is not None:
            detail["details"] = details

        merged_headers = {**(self.default_headers or {}), **(headers or {})}

        super().__init__(
            status_code=status_code or self.status_code_default,
            detail=detail,
            headers=merged_headers or None,
        )

    @property
    def message(self) -> str:
        return self.detail["message"]

    @property
    def code(self) -> Optional[str]:
        return self.detail.get("code")


class BadRequestException(APIException):
    """400 - Request is well-formed but cannot be served as asked."""

    status_code_default = 400
    default_message = "Bad request"
    default_code = "BAD_REQUEST"


class UnauthorizedException(APIException):
    """401 - Missing, invalid or expired credentials."""

    status_code_default = 401
    default_message = "Unauthorized"
    default_code = "UNAUTHORIZED"
    default_headers = {"WWW-Authenticate": "Bearer"}


class ForbiddenException(APIException):
    """403 - Authenticated, but the account may not do this."""

    status_code_default = 403
    default_message = "Forbidden"
    default_code = "FORBIDDEN"


class NotFoundException(APIException):
    """404 - Resource doesn't exist."""

    status_code_default = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class ConflictException(APIException):
    """409 - Would violate a uniqueness rule."""

    status_code_default = 409
    default_message = "Conflict"
    default_code = "CONFLICT"


class InternalServerException(APIException):
    """500 - Server-side failure; the message must stay generic."""

    status_code_default = 500
    default_message = "Internal server error"
    default_code = "INTERNAL_ERROR"


class NotImplementedException(APIException):
    """501 - Route exists but the flow behind it is not built."""

    status_code_default = 501
    default_message = "Not implemented"
    default_code = "NOT_IMPLEMENTED"
