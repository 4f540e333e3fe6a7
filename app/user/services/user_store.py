"""
User account storage.

Owns the users collection. Case-insensitive uniqueness of username and email
is enforced by unique indexes on the lower-cased copies, so two concurrent
registrations cannot both succeed even though the service checks first.
"""

import logging
from datetime import datetime
from typing import List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

logger = logging.getLogger(__name__)

# Never leaves the store in list queries
_PUBLIC_PROJECTION = {"passwordHash": 0}


class DuplicateAccountError(Exception):
    """Raised when an insert collides with an existing username or email."""

    def __init__(self, field: str):
        super().__init__(f"Duplicate {field}")
        self.field = field


def _to_object_id(user_id) -> Optional[ObjectId]:
    if isinstance(user_id, ObjectId):
        return user_id
    if isinstance(user_id, str) and ObjectId.is_valid(user_id):
        return ObjectId(user_id)
    return None


class UserStore:
    """
    Persistence for user accounts.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        """
        Initialize UserStore.

        Args:
            db: MongoDB database connection
        """
        self._db = db
        self._users_collection = db["users"]

    async def ensure_indexes(self) -> None:
        """Create the unique indexes backing username/email uniqueness."""
        await self._users_collection.create_index(
            "usernameLower", unique=True, name="username_unique"
        )
        await self._users_collection.create_index(
            "emailLower", unique=True, name="email_unique"
        )
        logger.info("User indexes ensured")

    async def email_exists(self, email: str) -> bool:
        """Check for an account with this email, ignoring case."""
        doc = await self._users_collection.find_one(
            {"emailLower": email.lower()}, {"_id": 1}
        )
        return doc is not None

    async def username_exists(self, username: str) -> bool:
        """Check for an account with this username, ignoring case."""
        doc = await self._users_collection.find_one(
            {"usernameLower": username.lower()}, {"_id": 1}
        )
        return doc is not None

    async def create_user(self, user_doc: dict) -> dict:
        """
        Insert a new account document in one write.

        Args:
            user_doc: Complete account document, hobbies embedded

        Returns:
            The document with its generated _id

        Raises:
            DuplicateAccountError: username or email taken by a concurrent insert
        """
        try:
            result = await self._users_collection.insert_one(user_doc)
        except DuplicateKeyError as e:
            field = "email" if _duplicate_key_field(e) == "emailLower" else "username"
            raise DuplicateAccountError(field) from e

        user_doc["_id"] = result.inserted_id
        return user_doc

    async def find_by_login(self, identifier: str) -> Optional[dict]:
        """
        Load the account whose username or email matches identifier.

        Args:
            identifier: Username or email, any case

        Returns:
            User document (including passwordHash) or None
        """
        identifier = identifier.strip().lower()
        return await self._users_collection.find_one(
            {"$or": [{"usernameLower": identifier}, {"emailLower": identifier}]}
        )

    async def get_by_id(self, user_id: str) -> Optional[dict]:
        """
        Load user by MongoDB ID, without the password hash.

        Args:
            user_id: MongoDB ObjectId as string

        Returns:
            User document or None if not found
        """
        oid = _to_object_id(user_id)
        if oid is None:
            return None
        return await self._users_collection.find_one({"_id": oid}, _PUBLIC_PROJECTION)

    async def record_login(self, user_id, at: datetime) -> None:
        """
        Advance lastLoginAt to `at`.

        $max keeps the stored value when it is already later, so lastLoginAt
        never moves backwards.
        """
        await self._users_collection.update_one(
            {"_id": _to_object_id(user_id)},
            {"$max": {"lastLoginAt": at}, "$set": {"updatedAt": at}},
        )

    async def update_location(
        self,
        user_id: str,
        latitude: float,
        longitude: float,
        address: Optional[str],
        privacy: Optional[str],
        at: datetime,
    ) -> Optional[dict]:
        """
        Store the user's current location.

        Returns:
            Updated user document, or None if the user does not exist
        """
        oid = _to_object_id(user_id)
        if oid is None:
            return None

        updates = {
            "location.latitude": latitude,
            "location.longitude": longitude,
            "location.address": address,
            "location.updatedAt": at,
            "updatedAt": at,
        }
        if privacy:
            updates["location.privacy"] = privacy

        return await self._users_collection.find_one_and_update(
            {"_id": oid},
            {"$set": updates},
            projection=_PUBLIC_PROJECTION,
            return_document=ReturnDocument.AFTER,
        )

    async def list_located_users(self, exclude_user_id: Optional[str] = None) -> List[dict]:
        """
        Active users with a shareable location.

        Args:
            exclude_user_id: Usually the caller, left out of their own results

        Returns:
            User documents without password hashes
        """
        query = {
            "isActive": True,
            "location.latitude": {"$ne": None},
            "location.longitude": {"$ne": None},
            "location.privacy": {"$ne": "Private"},
        }
        oid = _to_object_id(exclude_user_id)
        if oid is not None:
            query["_id"] = {"$ne": oid}

        cursor = self._users_collection.find(query, _PUBLIC_PROJECTION)
        return await cursor.to_list(length=None)


def _duplicate_key_field(error: DuplicateKeyError) -> Optional[str]:
    """Name of the lower-cased field whose unique index rejected the insert."""
    key_pattern = (error.details or {}).get("keyPattern") or {}
    for field in ("emailLower", "usernameLower"):
        if field in key_pattern:
            return field
    message = str(error)
    if "email_unique" in message or "emailLower" in message:
        return "emailLower"
    return "usernameLower"
