"""
JWT session token issuer.

Signs identity claims into stateless bearer tokens. The server keeps no
session table: a token stays valid until it expires, and logging out does
not revoke it.

Example:
    issuer = JWTTokenIssuer(
        secret="your-secret-key",
        issuer="hobbyhub",
        audience="hobbyhub-clients",
        expire_days=30,
    )

    issued = issuer.issue(TokenClaims(sub=user_id, username="alice", email="alice@example.com"))
    claims = issuer.verify(issued.token)
    print(claims.sub)  # user_id
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from jose import jwt, JWTError
from pydantic import ValidationError

from common.auth.base import IssuedToken, InvalidTokenError, TokenClaims, TokenIssuer

logger = logging.getLogger(__name__)

# Registered claims added by the issuer, stripped before rebuilding TokenClaims
_REGISTERED_CLAIMS = ("iss", "aud", "iat", "exp", "nbf", "jti")


def _utcnow() -> datetime:
    """Get current UTC time (timezone-aware)."""
    return datetime.now(timezone.utc)


class JWTTokenIssuer(TokenIssuer):
    """
    HMAC/RSA signed JWT issuer built on python-jose.

    The signing key is passed in once at construction and never exposed or
    logged afterwards.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        issuer: Optional[str] = None,
        audience: Optional[str] = None,
        expire_days: int = 30,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize JWT issuer.

        Args:
            secret: Key for JWT signing (keep this secure!)
            algorithm: JWT algorithm (default: HS256)
            issuer: Value for the iss claim, checked on verify when set
            audience: Value for the aud claim, checked on verify when set
            expire_days: Default validity window in days
            clock: Returns "now" for issuing and for expiry checks; injectable for tests
        """
        if not secret:
            raise ValueError("JWT secret must not be empty")

        self.__secret = secret
        self.algorithm = algorithm
        self.issuer = issuer
        self.audience = audience
        self.token_expire = timedelta(days=expire_days)
        self._clock = clock or _utcnow

    def __repr__(self) -> str:
        return (
            f"JWTTokenIssuer(algorithm={self.algorithm!r}, issuer={self.issuer!r}, "
            f"audience={self.audience!r}, token_expire={self.token_expire!r})"
        )

    def issue(
        self,
        claims: TokenClaims,
        expires_in: Optional[timedelta] = None,
    ) -> IssuedToken:
        """Create a JWT carrying the claims."""
        now = self._clock()
        expires_at = now + (expires_in if expires_in is not None else self.token_expire)

        payload = {
            **claims.model_dump(),
            "iat": now,
            "exp": expires_at,
        }
        if self.issuer:
            payload["iss"] = self.issuer
        if self.audience:
            payload["aud"] = self.audience

        token = jwt.encode(payload, self.__secret, algorithm=self.algorithm)
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: str) -> TokenClaims:
        """
        Verify and decode a JWT.

        Expiry is checked against the issuer's clock rather than the wall clock,
        and a token without an exp claim is rejected.
        """
        if not token:
            raise InvalidTokenError()

        options = {"verify_aud": self.audience is not None, "verify_exp": False}
        try:
            payload = jwt.decode(
                token,
                self.__secret,
                algorithms=[self.algorithm],
                audience=self.audience,
                issuer=self.issuer,
                options=options,
            )
        except JWTError as e:
            logger.debug(f"Token rejected: {type(e).__name__}")
            raise InvalidTokenError()

        expires_at = payload.get("exp")
        if isinstance(expires_at, bool) or not isinstance(expires_at, (int, float)):
            logger.debug("Token rejected: missing exp claim")
            raise InvalidTokenError()
        if self._clock().timestamp() > expires_at:
            logger.debug("Token rejected: expired")
            raise InvalidTokenError()

        identity = {k: v for k, v in payload.items() if k not in _REGISTERED_CLAIMS}
        try:
            return TokenClaims(**identity)
        except ValidationError:
            logger.debug("Token rejected: claims do not describe a user")
            raise InvalidTokenError()

