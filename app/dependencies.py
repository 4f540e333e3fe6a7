"""
FastAPI dependencies.

Services are built once at startup by init_services() from the frozen
settings and handed to route handlers through the getters below.
"""

import logging
from typing import Annotated, Optional

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from common.auth import BcryptPasswordHasher, JWTTokenIssuer, TokenClaims, create_auth_dependency
from app.auth.services.session_service import SessionService
from app.config import Settings
from app.user.services.hobby_catalog import HobbyCatalog
from app.user.services.user_store import UserStore

logger = logging.getLogger(__name__)

_token_issuer: Optional[JWTTokenIssuer] = None
_user_store: Optional[UserStore] = None
_session_service: Optional[SessionService] = None


def init_services(db: AsyncIOMotorDatabase, settings: Settings) -> None:
    """
    Initialize all services with database and configuration.

    Called once at application startup.

    Args:
        db: MongoDB database connection
        settings: Validated, frozen application settings
    """
    global _token_issuer, _user_store, _session_service

    _token_issuer = JWTTokenIssuer(
        secret=settings.JWT_SECRET.get_secret_value(),
        algorithm=settings.JWT_ALGORITHM,
        issuer=settings.JWT_ISSUER,
        audience=settings.JWT_AUDIENCE,
        expire_days=settings.JWT_EXPIRE_DAYS,
    )
    _user_store = UserStore(db)
    _session_service = SessionService(
        user_store=_user_store,
        hobby_catalog=HobbyCatalog(db),
        password_hasher=BcryptPasswordHasher(rounds=settings.BCRYPT_ROUNDS),
        token_issuer=_token_issuer,
    )
    logger.info("Services initialized")


def get_token_issuer() -> JWTTokenIssuer:
    """Get token issuer instance."""
    if _token_issuer is None:
        raise RuntimeError("Services not initialized. Call init_services first.")
    return _token_issuer


def get_user_store() -> UserStore:
    """Get user store instance."""
    if _user_store is None:
        raise RuntimeError("Services not initialized. Call init_services first.")
    return _user_store


def get_session_service() -> SessionService:
    """Get session service instance."""
    if _session_service is None:
        raise RuntimeError("Services not initialized. Call init_services first.")
    return _session_service


require_auth = create_auth_dependency(get_token_issuer)

CurrentClaims = Annotated[TokenClaims, Depends(require_auth)]
