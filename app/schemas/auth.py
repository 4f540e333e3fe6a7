"""
Pydantic models for Auth request/response validation.

Defines schemas for registration, login and the unimplemented account
recovery flows.
"""

from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, Field, EmailStr, field_validator

from app.schemas.user import PublicUser


class RegisterRequest(BaseModel):
    """Request body for user registration."""
    username: str = Field(..., min_length=3, max_length=50, pattern=r"^[A-Za-z0-9._-]+$")
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=100, repr=False)
    firstName: Optional[str] = Field(None, max_length=50)
    lastName: Optional[str] = Field(None, max_length=50)
    phoneNumber: Optional[str] = Field(None, max_length=20)
    dateOfBirth: Optional[date] = None
    profileImageUrl: Optional[str] = Field(None, max_length=500)
    hobbyIds: Optional[List[str]] = None

    @field_validator("email")
    @classmethod
    def email_length(cls, v: str) -> str:
        if len(v) > 100:
            raise ValueError("Email must be at most 100 characters")
        return v


class LoginRequest(BaseModel):
    """Request body for user login."""
    emailOrUsername: str = Field(..., min_length=1, max_length=100)
    password: str = Field(..., min_length=1, repr=False)
    rememberMe: bool = Field(default=False, description="Accepted for compatibility; ignored")


class AuthResult(BaseModel):
    """Response for successful authentication (login/register)."""
    token: str
    expiresAt: datetime
    refreshToken: str
    user: PublicUser


class RefreshTokenRequest(BaseModel):
    """Request body for token refresh."""
    refreshToken: str


class ForgotPasswordRequest(BaseModel):
    """Request body for starting a password reset."""
    email: EmailStr


class ResetPasswordRequest(BaseModel):
    """Request body for completing a password reset."""
    token: str
    newPassword: str = Field(..., min_length=6, max_length=100, repr=False)
