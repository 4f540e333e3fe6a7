"""
Pydantic models for user projections and location requests.
"""

from datetime import date, datetime, timezone
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class HobbySummary(BaseModel):
    """Hobby attached to a user account."""
    hobbyId: str
    name: str
    type: str
    description: Optional[str] = None


class PublicUser(BaseModel):
    """
    Public-safe projection of a user account.

    Built only through from_document(), which never copies the password hash.
    """
    id: str
    username: str
    email: str
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    fullName: str = ""
    profileImageUrl: Optional[str] = None
    coverImageUrl: Optional[str] = None
    bio: Optional[str] = None
    phoneNumber: Optional[str] = None
    dateOfBirth: Optional[date] = None
    age: int = 0
    currentLatitude: Optional[float] = None
    currentLongitude: Optional[float] = None
    locationAddress: Optional[str] = None
    locationPrivacy: Optional[str] = None
    locationUpdatedAt: Optional[datetime] = None
    isActive: bool = True
    isVerified: bool = False
    joinDate: datetime
    lastLoginAt: Optional[datetime] = None
    hobbies: List[HobbySummary] = Field(default_factory=list)

    @classmethod
    def from_document(cls, user: dict, today: Optional[date] = None) -> "PublicUser":
        """Project a users-collection document."""
        date_of_birth = user.get("dateOfBirth")
        if isinstance(date_of_birth, datetime):
            date_of_birth = date_of_birth.date()

        location = user.get("location") or {}
        first_name = user.get("firstName")
        last_name = user.get("lastName")

        return cls(
            id=str(user["_id"]),
            username=user["username"],
            email=user["email"],
            firstName=first_name,
            lastName=last_name,
            fullName=f"{first_name or ''} {last_name or ''}".strip(),
            profileImageUrl=user.get("profileImageUrl"),
            coverImageUrl=user.get("coverImageUrl"),
            bio=user.get("bio"),
            phoneNumber=user.get("phoneNumber"),
            dateOfBirth=date_of_birth,
            age=calculate_age(date_of_birth, today),
            currentLatitude=location.get("latitude"),
            currentLongitude=location.get("longitude"),
            locationAddress=location.get("address"),
            locationPrivacy=location.get("privacy", "Friends"),
            locationUpdatedAt=location.get("updatedAt"),
            isActive=user.get("isActive", True),
            isVerified=user.get("isVerified", False),
            joinDate=user["joinDate"],
            lastLoginAt=user.get("lastLoginAt"),
            hobbies=[HobbySummary(**hobby) for hobby in user.get("hobbies", [])],
        )


def calculate_age(date_of_birth: Optional[date], today: Optional[date] = None) -> int:
    """Whole years since date_of_birth; 0 when unknown."""
    if date_of_birth is None:
        return 0
    today = today or datetime.now(timezone.utc).date()
    had_birthday = (today.month, today.day) >= (date_of_birth.month, date_of_birth.day)
    return max(0, today.year - date_of_birth.year - (0 if had_birthday else 1))


class UpdateLocationRequest(BaseModel):
    """Request body for updating the caller's location."""
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    address: Optional[str] = Field(None, max_length=500)
    privacy: Optional[Literal["Public", "Friends", "Private"]] = None


class NearbyUser(BaseModel):
    """A user found by a nearby search."""
    user: PublicUser
    distanceKm: float
