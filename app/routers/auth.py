"""
FastAPI router for Auth endpoints.

Provides registration, login, logout and the account recovery stubs.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.auth.results import AuthErrorCode, ServiceResult
from app.auth.services.session_service import SessionService
from app.dependencies import CurrentClaims, get_session_service
from app.schemas.auth import (
    ForgotPasswordRequest,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    ResetPasswordRequest,
)
from common.utils import (
    APIException,
    ConflictException,
    ForbiddenException,
    InternalServerException,
    NotImplementedException,
    UnauthorizedException,
    success_response,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])

_ERROR_EXCEPTIONS = {
    AuthErrorCode.DUPLICATE_EMAIL: ConflictException,
    AuthErrorCode.DUPLICATE_USERNAME: ConflictException,
    AuthErrorCode.INVALID_CREDENTIALS: UnauthorizedException,
    AuthErrorCode.ACCOUNT_DEACTIVATED: ForbiddenException,
    AuthErrorCode.PERSISTENCE_FAILURE: InternalServerException,
    AuthErrorCode.NOT_IMPLEMENTED: NotImplementedException,
}


def _unwrap(result: ServiceResult):
    """Return result data, or raise the HTTP error matching its failure."""
    if result.success:
        return result.data

    exception_cls = _ERROR_EXCEPTIONS.get(result.error.code, InternalServerException)
    exception: APIException = exception_cls(
        message=result.error.message,
        code=result.error.code.value,
    )
    raise exception


@router.post("/register")
async def register(
    body: RegisterRequest,
    session_service: Annotated[SessionService, Depends(get_session_service)],
):
    """
    Register a new user account.

    Returns a session token so the new user is logged in immediately.
    """
    auth_result = _unwrap(await session_service.register(body))
    return success_response(auth_result.model_dump(mode="json"))


@router.post("/login")
async def login(
    body: LoginRequest,
    session_service: Annotated[SessionService, Depends(get_session_service)],
):
    """
    Login with email or username and password.
    """
    auth_result = _unwrap(await session_service.login(body))
    return success_response(auth_result.model_dump(mode="json"))


@router.post("/logout")
async def logout(
    claims: CurrentClaims,
    session_service: Annotated[SessionService, Depends(get_session_service)],
):
    """
    Logout current user.

    The token is not revoked and stays valid until it expires; clients must
    discard it.
    """
    acknowledged = _unwrap(await session_service.logout(claims.sub))
    return success_response(acknowledged, message="Logged out successfully")


@router.post("/refresh")
async def refresh_token(
    body: RefreshTokenRequest,
    session_service: Annotated[SessionService, Depends(get_session_service)],
):
    """Refresh a session token. Not implemented."""
    return success_response(_unwrap(await session_service.refresh_token(body.refreshToken)))


@router.get("/verify-email")
async def verify_email(
    token: Annotated[str, Query(min_length=1)],
    session_service: Annotated[SessionService, Depends(get_session_service)],
):
    """Verify email address. Not implemented."""
    return success_response(_unwrap(await session_service.verify_email(token)))


@router.post("/forgot-password")
async def forgot_password(
    body: ForgotPasswordRequest,
    session_service: Annotated[SessionService, Depends(get_session_service)],
):
    """Request password reset. Not implemented."""
    return success_response(_unwrap(await session_service.forgot_password(body.email)))


@router.post("/reset-password")
async def reset_password(
    body: ResetPasswordRequest,
    session_service: Annotated[SessionService, Depends(get_session_service)],
):
    """Reset password with token. Not implemented."""
    return success_response(
        _unwrap(await session_service.reset_password(body.token, body.newPassword))
    )
