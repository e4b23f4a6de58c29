"""Pydantic schemas for Profile API."""

from pydantic import BaseModel, Field

from api.v1.schemas.common import CamelModel
from domain.entities.profile import EdgeChange, Profile


class ProfileCreate(CamelModel):
    """Schema for creating the caller's profile. Id and email come from the token."""

    bio: str = ""
    photo_url: str = ""
    phone: str = ""
    user_name: str = ""
    first_name: str = ""
    last_name: str = ""
    category: list[str] = Field(default_factory=list)
    gender: str = ""


class ProfileUpdate(CamelModel):
    """Schema for a partial profile update; omitted fields keep their value."""

    bio: str | None = None
    photo_url: str | None = None
    phone: str | None = None
    user_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    category: list[str] | None = None
    gender: str | None = None


class ProfileResponse(CamelModel):
    """Schema for Profile response."""

    id: str
    email: str
    bio: str
    photo_url: str
    phone: str
    user_name: str
    first_name: str
    last_name: str
    category: list[str]
    followers: list[str]
    following: list[str]
    gender: str

    @classmethod
    def from_entity(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            id=profile.id,
            email=profile.email,
            bio=profile.bio,
            photo_url=profile.photo_url,
            phone=profile.phone,
            user_name=profile.user_name,
            first_name=profile.first_name,
            last_name=profile.last_name,
            category=sorted(profile.category),
            followers=sorted(profile.followers),
            following=sorted(profile.following),
            gender=profile.gender,
        )


class ProfileDetailResponse(BaseModel):
    """Schema for single Profile."""

    data: ProfileResponse


class ProfileListResponse(BaseModel):
    """Schema for list of Profiles."""

    data: list[ProfileResponse]


class FollowResponse(CamelModel):
    """Outcome of a follow/unfollow request."""

    profile_id: str
    other_profile_id: str
    change: EdgeChange
