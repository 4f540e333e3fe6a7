"""
Utilities module - response envelope builders and HTTP exceptions.
"""

from common.utils.responses import (
    success_response,
    list_response,
    error_response,
    detail_error_response,
    validation_error_response,
)
from common.utils.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    ForbiddenException,
    NotFoundException,
    ConflictException,
    InternalServerException,
    NotImplementedException,
)

__all__ = [
    "success_response",
    "error_response",
    "list_response",
    "detail_error_response",
    "validation_error_response",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "ForbiddenException",
    "NotFoundException",
    "ConflictException",
    "InternalServerException",
    "NotImplementedException",
]
