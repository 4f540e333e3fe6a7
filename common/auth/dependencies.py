"""
FastAPI authentication dependencies.

Provides a factory that builds a bearer-token dependency on top of any
TokenIssuer implementation.

Example:
    from common.auth import JWTTokenIssuer, create_auth_dependency

    issuer = JWTTokenIssuer(secret="your-secret")
    get_current_claims = create_auth_dependency(lambda: issuer)

    @app.get("/profile")
    async def get_profile(claims: TokenClaims = Depends(get_current_claims)):
        return {"user_id": claims.sub}
"""

from typing import Callable, Optional
from fastapi import Header

from common.auth.base import TokenClaims, TokenIssuer
from common.utils.exceptions import UnauthorizedException


def create_auth_dependency(
    get_token_issuer: Callable[[], TokenIssuer],
    header_name: str = "Authorization",
    scheme: str = "Bearer",
):
    """
    Factory to create FastAPI auth dependencies.

    Args:
        get_token_issuer: Callable that returns the TokenIssuer instance
        header_name: Header to extract token from (default: Authorization)
        scheme: Auth scheme prefix (default: Bearer)

    Returns:
        A FastAPI dependency function that verifies the token and returns its claims
    """

    async def get_current_claims(
        authorization: Optional[str] = Header(None, alias=header_name),
    ) -> TokenClaims:
        """
        Extract and verify token claims from the authorization header.

        Raises:
            UnauthorizedException: If token is missing, invalid, or expired
        """
        if not authorization:
            raise UnauthorizedException(
                message="Missing authorization header",
                code="UNAUTHORIZED",
            )

        prefix = f"{scheme} "
        if not authorization.startswith(prefix):
            raise UnauthorizedException(
                message=f"Invalid authorization scheme. Expected: {scheme}",
                code="INVALID_AUTH_SCHEME",
            )

        token = authorization[len(prefix) :].strip()

        if not token:
            raise UnauthorizedException(message="Token is empty", code="EMPTY_TOKEN")

        issuer = get_token_issuer()
        try:
            return issuer.verify(token)
        except ValueError as e:
            raise UnauthorizedException(message=str(e), code="INVALID_TOKEN")

    return get_current_claims
