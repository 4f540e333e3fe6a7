"""
MongoDB connection manager built on Motor.

Owns the single AsyncIOMotorClient of a process. Services never see the
client; they receive the database handle and work on raw collections.

Example:
    from common.database import MongoDB

    mongo = MongoDB()
    await mongo.connect(uri="mongodb://localhost:27017", database_name="hobbyhub")
    users = mongo.db["users"]
"""

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


def _mask_uri(uri: str) -> str:
    """Drop the credentials part of a connection string."""
    scheme, sep, rest = uri.partition("://")
    if "@" not in rest:
        return uri
    return f"{scheme}{sep}***@{rest.rsplit('@', 1)[-1]}"


class MongoDB:
    """Async MongoDB connection for one database."""

    def __init__(self, server_selection_timeout_ms: int = 5000):
        self._client: Optional[AsyncIOMotorClient] = None
        self._database_name: Optional[str] = None
        self._timeout_ms = server_selection_timeout_ms

    async def connect(self, uri: str, database_name: str) -> None:
        """
        Open the client and check the server answers.

        Datetimes come back timezone-aware (UTC).

        Args:
            uri: MongoDB connection string
            database_name: Name of the database to use

        Raises:
            PyMongoError: Server unreachable or authentication failed
        """
        logger.info(f"Connecting to MongoDB: {_mask_uri(uri)}")

        client = AsyncIOMotorClient(
            uri,
            tz_aware=True,
            serverSelectionTimeoutMS=self._timeout_ms,
        )
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"Failed to connect to MongoDB: {type(e).__name__}")
            client.close()
            raise

        self._client = client
        self._database_name = database_name
        logger.info(f"Connected to MongoDB database: {database_name}")

    async def disconnect(self) -> None:
        """Close the MongoDB connection."""
        if self._client:
            logger.info(f"Disconnecting from MongoDB database: {self._database_name}")
            self._client.close()
            self._client = None
            self._database_name = None

    async def ping(self) -> bool:
        """True if connected and the server answers a ping."""
        if not self._client:
            return False
        try:
            await self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.warning(f"MongoDB ping failed: {type(e).__name__}")
            return False

    @property
    def is_connected(self) -> bool:
        """Check if a client is open."""
        return self._client is not None

    @property
    def db(self) -> AsyncIOMotorDatabase:
        """Get the underlying Motor database instance."""
        if not self._client or not self._database_name:
            raise RuntimeError("Database not connected")
        return self._client[self._database_name]
