"""
Abstract credential primitives.

Defines the contracts for password hashing and session token issuance so the
session service can be wired to any implementation (bcrypt, JWT, or test
doubles) without changing application code.

Example:
    from common.auth import BcryptPasswordHasher, JWTTokenIssuer, TokenClaims

    hasher = BcryptPasswordHasher()
    issuer = JWTTokenIssuer(secret="your-secret-key")

    record = hasher.hash("Password1!")
    issued = issuer.issue(TokenClaims(sub="user-id", username="alice", email="a@b.c"))
"""

import base64
import secrets
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel, Field


class TokenClaims(BaseModel):
    """
    Identity assertions embedded in a session token.

    Claims are a snapshot taken at issuance. They are not refreshed when the
    underlying account changes, so a caller may hold stale names or email
    until the next login.
    """

    sub: str = Field(..., description="User ID")
    username: str
    email: str
    firstName: Optional[str] = None
    lastName: Optional[str] = None

    model_config = {"frozen": True}


class IssuedToken(BaseModel):
    """A freshly signed token and the moment it stops being valid."""

    token: str
    expires_at: datetime

    model_config = {"frozen": True}


class InvalidTokenError(ValueError):
    """
    Raised when a token fails verification.

    Expired, forged and malformed tokens all raise this error with the same
    message so callers cannot tell the cases apart.
    """

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class PasswordHasher(ABC):
    """One-way salted password hashing."""

    @abstractmethod
    def hash(self, plaintext: str) -> str:
        """
        Hash a plaintext password.

        Args:
            plaintext: The password as entered by the user

        Returns:
            Self-describing hash record (algorithm, cost, salt, digest)
        """
        pass

    @abstractmethod
    def verify(self, plaintext: str, hash_record: str) -> bool:
        """
        Check a plaintext password against a stored hash record.

        Args:
            plaintext: The password to check
            hash_record: Output of a previous hash() call

        Returns:
            True if the password matches. Malformed records return False.
        """
        pass

    def dummy_verify(self, plaintext: str) -> None:
        """Spend the cost of a failed verify without a stored record."""
        return None


class TokenIssuer(ABC):
    """Creates and verifies signed, time-bounded session tokens."""

    @abstractmethod
    def issue(
        self,
        claims: TokenClaims,
        expires_in: Optional[timedelta] = None,
    ) -> IssuedToken:
        """
        Sign a token carrying the given claims.

        Args:
            claims: Identity claims to embed
            expires_in: Validity window; defaults to the issuer's configured window

        Returns:
            IssuedToken with the encoded token and its expiry
        """
        pass

    @abstractmethod
    def verify(self, token: str) -> TokenClaims:
        """
        Verify signature and expiry of a token.

        Args:
            token: Encoded token from the Authorization header

        Returns:
            The claims embedded at issuance

        Raises:
            InvalidTokenError: If the token is expired, tampered, or malformed
        """
        pass

    @staticmethod
    def generate_refresh_token(length: int = 64) -> str:
        """
        Generate an opaque refresh token.

        Not persisted and not redeemable: the refresh flow is not implemented.

        Args:
            length: Number of random bytes before base64 encoding
        """
        return base64.b64encode(secrets.token_bytes(length)).decode("ascii")
