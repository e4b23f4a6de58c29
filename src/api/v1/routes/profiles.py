"""Profile API routes."""

from fastapi import APIRouter, Depends, Query, status

from api.dependencies.auth import BearerToken
from api.v1.dependencies import get_profile_interop
from api.v1.schemas.profile import (
    FollowResponse,
    ProfileCreate,
    ProfileDetailResponse,
    ProfileListResponse,
    ProfileResponse,
    ProfileUpdate,
)
from domain.entities.profile import Profile
from domain.interop.profile_interop import ProfileInterop

router = APIRouter(prefix="/profiles", tags=["profiles"])


@router.post(
    "",
    response_model=ProfileDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create the caller's profile",
    responses={
        201: {"description": "Profile created"},
        409: {"description": "Profile already exists"},
    },
)
async def create_profile(
    body: ProfileCreate,
    token: BearerToken,
    interop: ProfileInterop = Depends(get_profile_interop),
) -> ProfileDetailResponse:
    """Create a profile whose id and email are taken from the token."""
    profile = await interop.create(Profile(id="", **body.model_dump()), token)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))


@router.patch(
    "",
    response_model=ProfileDetailResponse,
    summary="Update the caller's profile",
)
async def update_profile(
    body: ProfileUpdate,
    token: BearerToken,
    interop: ProfileInterop = Depends(get_profile_interop),
) -> ProfileDetailResponse:
    """Partially update the caller's profile. Omitted fields are kept."""
    profile = await interop.update(body.model_dump(exclude_unset=True), token)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))


@router.get("", response_model=ProfileDetailResponse, summary="Get a profile")
async def get_profile(
    token: BearerToken,
    id: str = Query(""),
    interop: ProfileInterop = Depends(get_profile_interop),
) -> ProfileDetailResponse:
    profile = await interop.get(id, token)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))


@router.get("/all", response_model=ProfileListResponse, summary="List all profiles")
async def list_profiles(
    token: BearerToken,
    interop: ProfileInterop = Depends(get_profile_interop),
) -> ProfileListResponse:
    profiles = await interop.get_all(token)
    return ProfileListResponse(data=[ProfileResponse.from_entity(p) for p in profiles])


@router.get("/mine", response_model=ProfileDetailResponse, summary="Get the caller's profile")
async def get_my_profile(
    token: BearerToken,
    interop: ProfileInterop = Depends(get_profile_interop),
) -> ProfileDetailResponse:
    profile = await interop.get_mine(token)
    return ProfileDetailResponse(data=ProfileResponse.from_entity(profile))


@router.put("/follow", response_model=FollowResponse, summary="Follow a profile")
async def follow_profile(
    token: BearerToken,
    id: str = Query(""),
    other_id: str = Query("", alias="otherId"),
    interop: ProfileInterop = Depends(get_profile_interop),
) -> FollowResponse:
    """Make profile ``id`` (the caller) follow ``otherId``. Idempotent."""
    change = await interop.follow(token, id, other_id)
    return FollowResponse(profile_id=id, other_profile_id=other_id, change=change)


@router.put("/unfollow", response_model=FollowResponse, summary="Unfollow a profile")
async def unfollow_profile(
    token: BearerToken,
    id: str = Query(""),
    other_id: str = Query("", alias="otherId"),
    interop: ProfileInterop = Depends(get_profile_interop),
) -> FollowResponse:
    """Remove the edge ``id -> otherId``. Idempotent."""
    change = await interop.unfollow(token, id, other_id)
    return FollowResponse(profile_id=id, other_profile_id=other_id, change=change)
