"""
Read-only hobby catalog lookup.

Registration only needs to know which requested hobbies exist.
"""

import logging
from typing import Iterable, List

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


class HobbyCatalog:
    """
    Resolves hobby ids against the hobbies collection.
    """

    def __init__(self, db: AsyncIOMotorDatabase):
        self._hobbies_collection = db["hobbies"]

    async def resolve(self, hobby_ids: Iterable[str]) -> List[dict]:
        """
        Look up the hobbies that exist among hobby_ids.

        Unknown, malformed and repeated ids are dropped without error.

        Args:
            hobby_ids: Requested hobby ids as strings

        Returns:
            Hobby summaries (hobbyId, name, type, description) in request order
        """
        requested = []
        seen = set()
        for hobby_id in hobby_ids:
            if not ObjectId.is_valid(hobby_id) or hobby_id in seen:
                continue
            seen.add(hobby_id)
            requested.append(ObjectId(hobby_id))

        if not requested:
            return []

        cursor = self._hobbies_collection.find(
            {"_id": {"$in": requested}},
            {"name": 1, "type": 1, "description": 1},
        )
        found = {doc["_id"]: doc for doc in await cursor.to_list(length=None)}

        skipped = len(requested) - len(found)
        if skipped:
            logger.debug(f"Skipped {skipped} unknown hobby ids")

        return [
            {
                "hobbyId": str(oid),
                "name": found[oid].get("name", ""),
                "type": found[oid].get("type", ""),
                "description": found[oid].get("description"),
            }
            for oid in requested
            if oid in found
        ]
