"""
FastAPI router for User endpoints.

Provides the caller's profile, location updates and nearby user search.
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query

from app.config import Settings, get_settings
from app.dependencies import CurrentClaims, get_user_store
from app.schemas.user import UpdateLocationRequest
from app.user import pipelines
from app.user.services.user_store import UserStore
from common.utils import BadRequestException, list_response, success_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me")
async def get_current_user(
    claims: CurrentClaims,
    user_store: Annotated[UserStore, Depends(get_user_store)],
):
    """
    Get the current user's profile.

    Reads the account fresh from the store; token claims may be stale.
    """
    user = await pipelines.get_profile_pipeline(user_store, claims.sub)
    return success_response(user.model_dump(mode="json"))


@router.put("/location")
async def update_location(
    body: UpdateLocationRequest,
    claims: CurrentClaims,
    user_store: Annotated[UserStore, Depends(get_user_store)],
):
    """
    Update the current user's location.
    """
    user = await pipelines.update_location_pipeline(user_store, claims.sub, body)
    return success_response(user.model_dump(mode="json"))


@router.get("/nearby")
async def get_nearby_users(
    claims: CurrentClaims,
    user_store: Annotated[UserStore, Depends(get_user_store)],
    settings: Annotated[Settings, Depends(get_settings)],
    radius_km: Annotated[Optional[float], Query(alias="radiusKm")] = None,
):
    """
    List users within radiusKm of the current user's stored location.

    Users whose location privacy is Private are never listed.
    """
    if radius_km is None:
        radius_km = settings.DEFAULT_NEARBY_RADIUS_KM

    if radius_km > settings.MAX_NEARBY_RADIUS_KM:
        raise BadRequestException(
            message=f"radiusKm must not exceed {settings.MAX_NEARBY_RADIUS_KM:g}",
            code="RADIUS_TOO_LARGE",
        )

    nearby = await pipelines.get_nearby_users_pipeline(user_store, claims.sub, radius_km)
    return list_response([item.model_dump(mode="json") for item in nearby])
