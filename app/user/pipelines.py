"""
User system pipeline functions.

Stateless orchestration logic for profile and location operations.
"""

import logging
from datetime import datetime, timezone
from typing import List, Optional

from common.geo import Coordinate, filter_within_radius, sort_by_distance
from common.utils.exceptions import BadRequestException, NotFoundException
from app.schemas.user import NearbyUser, PublicUser, UpdateLocationRequest
from app.user.services.user_store import UserStore

logger = logging.getLogger(__name__)


def coordinate_of(user: dict) -> Optional[Coordinate]:
    """Stored location of a user document, or None if incomplete."""
    location = user.get("location") or {}
    return Coordinate.from_optional(location.get("latitude"), location.get("longitude"))


async def get_profile_pipeline(user_store: UserStore, user_id: str) -> PublicUser:
    """
    Get the caller's public profile.

    Raises:
        NotFoundException: The token refers to an account that no longer exists
    """
    user = await user_store.get_by_id(user_id)
    if not user:
        raise NotFoundException(message="User not found", code="USER_NOT_FOUND")
    return PublicUser.from_document(user)


async def update_location_pipeline(
    user_store: UserStore,
    user_id: str,
    body: UpdateLocationRequest,
) -> PublicUser:
    """
    Store the caller's location.

    Raises:
        NotFoundException: User does not exist
    """
    user = await user_store.update_location(
        user_id,
        latitude=body.latitude,
        longitude=body.longitude,
        address=body.address,
        privacy=body.privacy,
        at=datetime.now(timezone.utc),
    )
    if not user:
        raise NotFoundException(message="User not found", code="USER_NOT_FOUND")

    logger.info(f"Location updated for user {user_id}")
    return PublicUser.from_document(user)


async def get_nearby_users_pipeline(
    user_store: UserStore,
    user_id: str,
    radius_km: float,
) -> List[NearbyUser]:
    """
    Find other users within radius_km of the caller, nearest first.

    Args:
        user_store: For user lookup
        user_id: Caller's user ID
        radius_km: Inclusive search radius

    Raises:
        NotFoundException: Caller does not exist
        BadRequestException: Caller has no stored location
    """
    caller = await user_store.get_by_id(user_id)
    if not caller:
        raise NotFoundException(message="User not found", code="USER_NOT_FOUND")

    center = coordinate_of(caller)
    if center is None:
        raise BadRequestException(
            message="Set your location before searching nearby users",
            code="LOCATION_REQUIRED",
        )

    candidates = await user_store.list_located_users(exclude_user_id=user_id)
    within = filter_within_radius(candidates, center, radius_km, coordinate_of)

    return [
        NearbyUser(user=PublicUser.from_document(user), distanceKm=round(distance, 3))
        for user, distance in sort_by_distance(within, center, coordinate_of)
    ]
