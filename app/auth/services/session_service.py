"""
Session service: registration, login and logout.

Each call is one independent unit of work against the user store. Tokens are
stateless JWTs; the server keeps no session table, so logout cannot revoke a
token that was already handed out. Token claims are a snapshot of the
account at issuance and are not updated by later profile edits.
"""

import asyncio
import logging
from datetime import datetime, time, timezone
from typing import Callable, Optional

from common.auth.base import IssuedToken, PasswordHasher, TokenClaims, TokenIssuer
from app.auth.results import (
    ACCOUNT_DEACTIVATED,
    DUPLICATE_EMAIL,
    DUPLICATE_USERNAME,
    INVALID_CREDENTIALS,
    NOT_IMPLEMENTED,
    ServiceResult,
    persistence_failure,
)
from app.schemas.auth import AuthResult, LoginRequest, RegisterRequest
from app.schemas.user import PublicUser
from app.user.services.hobby_catalog import HobbyCatalog
from app.user.services.user_store import DuplicateAccountError, UserStore

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionService:
    """
    Orchestrates account registration and authentication.

    Business failures come back as ServiceResult failures. Anything else
    raised by the store, the hasher or the issuer is logged here and
    reported as a generic persistence failure.
    """

    def __init__(
        self,
        user_store: UserStore,
        hobby_catalog: HobbyCatalog,
        password_hasher: PasswordHasher,
        token_issuer: TokenIssuer,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Initialize SessionService.

        Args:
            user_store: Credential store for user accounts
            hobby_catalog: Existence lookup for hobby ids
            password_hasher: Hashes and verifies passwords
            token_issuer: Signs session tokens
            clock: Returns "now"; injectable for tests
        """
        self._user_store = user_store
        self._hobby_catalog = hobby_catalog
        self._hasher = password_hasher
        self._token_issuer = token_issuer
        self._clock = clock or _utcnow

    # ─────────────────────────────────────────────────────────────────
    # Register
    # ─────────────────────────────────────────────────────────────────

    async def register(self, request: RegisterRequest) -> ServiceResult[AuthResult]:
        """
        Create an account and open its first session.

        Args:
            request: Validated registration payload

        Returns:
            AuthResult on success; DUPLICATE_EMAIL, DUPLICATE_USERNAME or
            PERSISTENCE_FAILURE otherwise
        """
        try:
            return await self._register(request)
        except Exception:
            logger.exception("Registration failed")
            return ServiceResult.fail(persistence_failure("Registration"))

    async def _register(self, request: RegisterRequest) -> ServiceResult[AuthResult]:
        if await self._user_store.email_exists(request.email):
            return ServiceResult.fail(DUPLICATE_EMAIL)

        if await self._user_store.username_exists(request.username):
            return ServiceResult.fail(DUPLICATE_USERNAME)

        password_hash = await asyncio.to_thread(self._hasher.hash, request.password)
        hobbies = await self._hobby_catalog.resolve(request.hobbyIds or [])

        now = self._clock()
        date_of_birth = None
        if request.dateOfBirth is not None:
            date_of_birth = datetime.combine(request.dateOfBirth, time.min, tzinfo=timezone.utc)

        user_doc = {
            "username": request.username,
            "usernameLower": request.username.lower(),
            "email": request.email,
            "emailLower": request.email.lower(),
            "passwordHash": password_hash,
            "firstName": request.firstName,
            "lastName": request.lastName,
            "phoneNumber": request.phoneNumber,
            "dateOfBirth": date_of_birth,
            "profileImageUrl": request.profileImageUrl,
            "coverImageUrl": None,
            "bio": None,
            "isActive": True,
            "isVerified": False,
            "hobbies": hobbies,
            "joinDate": now,
            # Registration opens the first session
            "lastLoginAt": now,
            "createdAt": now,
            "updatedAt": now,
        }

        try:
            user = await self._user_store.create_user(user_doc)
        except DuplicateAccountError as e:
            logger.info(f"Registration lost a uniqueness race on {e.field}")
            if e.field == "email":
                return ServiceResult.fail(DUPLICATE_EMAIL)
            return ServiceResult.fail(DUPLICATE_USERNAME)

        issued = self._token_issuer.issue(self._claims_for(user))

        logger.info(f"User registered: {user['_id']}")
        return ServiceResult.ok(self._auth_result(user, issued))

    # ─────────────────────────────────────────────────────────────────
    # Login
    # ─────────────────────────────────────────────────────────────────

    async def login(self, request: LoginRequest) -> ServiceResult[AuthResult]:
        """
        Authenticate by username or email and password.

        Args:
            request: Validated login payload

        Returns:
            AuthResult on success; INVALID_CREDENTIALS for an unknown
            identifier or a wrong password alike; ACCOUNT_DEACTIVATED when the
            password is right but the account is inactive
        """
        try:
            return await self._login(request)
        except Exception:
            logger.exception("Login failed")
            return ServiceResult.fail(persistence_failure("Login"))

    async def _login(self, request: LoginRequest) -> ServiceResult[AuthResult]:
        user = await self._user_store.find_by_login(request.emailOrUsername)

        if user is None:
            await asyncio.to_thread(self._hasher.dummy_verify, request.password)
            logger.info("Login rejected: invalid credentials")
            return ServiceResult.fail(INVALID_CREDENTIALS)

        password_ok = await asyncio.to_thread(
            self._hasher.verify, request.password, user.get("passwordHash") or ""
        )
        if not password_ok:
            logger.info(f"Login rejected: invalid credentials for user {user['_id']}")
            return ServiceResult.fail(INVALID_CREDENTIALS)

        if not user.get("isActive", True):
            logger.info(f"Login rejected: user {user['_id']} is deactivated")
            return ServiceResult.fail(ACCOUNT_DEACTIVATED)

        now = self._clock()
        await self._user_store.record_login(user["_id"], now)
        previous = user.get("lastLoginAt")
        if previous is None or now > previous:
            user["lastLoginAt"] = now

        issued = self._token_issuer.issue(self._claims_for(user))

        logger.info(f"User logged in: {user['_id']}")
        return ServiceResult.ok(self._auth_result(user, issued))

    # ─────────────────────────────────────────────────────────────────
    # Logout
    # ─────────────────────────────────────────────────────────────────

    async def logout(self, user_id: str) -> ServiceResult[bool]:
        """
        Acknowledge a logout.

        Audit hook only: the caller's token stays valid until it expires.
        """
        logger.info(f"User logged out: {user_id}")
        return ServiceResult.ok(True)

    # ─────────────────────────────────────────────────────────────────
    # Unimplemented account flows
    # ─────────────────────────────────────────────────────────────────

    async def refresh_token(self, refresh_token: str) -> ServiceResult[str]:
        return self._not_implemented("refresh_token")

    async def verify_email(self, token: str) -> ServiceResult[bool]:
        return self._not_implemented("verify_email")

    async def forgot_password(self, email: str) -> ServiceResult[bool]:
        return self._not_implemented("forgot_password")

    async def reset_password(self, token: str, new_password: str) -> ServiceResult[bool]:
        return self._not_implemented("reset_password")

    def _not_implemented(self, operation: str) -> ServiceResult:
        logger.warning(f"Unimplemented auth flow called: {operation}")
        return ServiceResult.fail(NOT_IMPLEMENTED)

    # ─────────────────────────────────────────────────────────────────
    # Helpers
    # ─────────────────────────────────────────────────────────────────

    @staticmethod
    def _claims_for(user: dict) -> TokenClaims:
        return TokenClaims(
            sub=str(user["_id"]),
            username=user["username"],
            email=user["email"],
            firstName=user.get("firstName"),
            lastName=user.get("lastName"),
        )

    def _auth_result(self, user: dict, issued: IssuedToken) -> AuthResult:
        return AuthResult(
            token=issued.token,
            expiresAt=issued.expires_at,
            refreshToken=self._token_issuer.generate_refresh_token(),
            user=PublicUser.from_document(user),
        )
