"""Authorization-gated entry point for profiles and the follow graph."""

from dataclasses import replace
from typing import Any, List, Mapping

import structlog

from domain.entities.profile import EdgeChange, Profile
from domain.interop.auth_gate import AuthGate
from domain.services.profile_service import ProfileService
from infrastructure.auth.provider import IAuthProvider

logger = structlog.get_logger()

# Identity and graph fields are never taken from an update payload
PATCHABLE_FIELDS: frozenset[str] = frozenset(
    {
        "bio",
        "photo_url",
        "phone",
        "user_name",
        "first_name",
        "last_name",
        "category",
        "gender",
    }
)


class ProfileInterop(AuthGate):
    """Token-gated profile operations.

    Besides forwarding to ``ProfileService`` this layer owns the
    partial-update merge and the follow/unfollow edge algorithm. An edge
    is stored twice (``a.following`` and ``b.followers``). The edits below
    run inside ``ProfileService.update_edge`` on rows read in the same
    transaction that writes them. A half-written edge found on disk is
    completed (follow) or cleared (unfollow) instead of being trusted.
    """

    def __init__(self, profile_service: ProfileService, auth_provider: IAuthProvider) -> None:
        super().__init__(auth_provider)
        self._profiles = profile_service

    async def create(self, profile: Profile, token: str) -> Profile:
        """Create the caller's profile; id and email come from the token."""
        user = await self._verify(token)
        data = replace(
            profile,
            id=user.id,
            email=user.email,
            followers=set(),
            following=set(),
        )
        return await self._profiles.create(data)

    async def update(self, patch: Mapping[str, Any], token: str) -> Profile:
        """Overlay the supplied fields onto the caller's stored profile."""
        user = await self._verify(token)
        changes = {
            name: value
            for name, value in patch.items()
            if name in PATCHABLE_FIELDS and value is not None
        }
        return await self._profiles.update_fields(user.id, changes)

    async def get(self, id: str, token: str) -> Profile:
        await self._verify(token)
        return await self._profiles.get(id)

    async def get_all(self, token: str) -> List[Profile]:
        await self._verify(token)
        return await self._profiles.get_all()

    async def get_mine(self, token: str) -> Profile:
        user = await self._verify(token)
        return await self._profiles.get(user.id)

    async def follow(self, token: str, profile_id: str, other_profile_id: str) -> EdgeChange:
        """Make ``profile_id`` follow ``other_profile_id``.

        Returns UNCHANGED for a self-follow or an edge already present on
        both sides; otherwise the missing side(s) are added.
        """
        user = await self._verify(token)
        self._require_owner(user, profile_id, "You can only follow as yourself")

        if profile_id == other_profile_id:
            logger.info("self_follow_ignored", profile_id=profile_id)
            return EdgeChange.UNCHANGED

        change = await self._profiles.update_edge(profile_id, other_profile_id, _add_edge)
        if change is EdgeChange.REPAIRED:
            logger.warning(
                "follow_edge_repaired",
                profile_id=profile_id,
                other_profile_id=other_profile_id,
            )
        elif change is EdgeChange.CREATED:
            logger.info("profile_followed", profile_id=profile_id, other_profile_id=other_profile_id)
        return change

    async def unfollow(self, token: str, profile_id: str, other_profile_id: str) -> EdgeChange:
        """Remove the edge ``profile_id -> other_profile_id`` from both sides.

        Returns UNCHANGED when neither side holds the edge.
        """
        user = await self._verify(token)
        self._require_owner(user, profile_id, "You can only unfollow as yourself")

        if profile_id == other_profile_id:
            return EdgeChange.UNCHANGED

        change = await self._profiles.update_edge(profile_id, other_profile_id, _remove_edge)
        if change is EdgeChange.REPAIRED:
            logger.warning(
                "follow_edge_repaired",
                profile_id=profile_id,
                other_profile_id=other_profile_id,
            )
        elif change is EdgeChange.REMOVED:
            logger.info("profile_unfollowed", profile_id=profile_id, other_profile_id=other_profile_id)
        return change


def _add_edge(profile: Profile, other: Profile) -> EdgeChange:
    had_following = profile.follows(other.id)
    had_follower = other.is_followed_by(profile.id)
    if had_following and had_follower:
        return EdgeChange.UNCHANGED

    profile.following.add(other.id)
    other.followers.add(profile.id)
    return EdgeChange.REPAIRED if had_following else EdgeChange.CREATED


def _remove_edge(profile: Profile, other: Profile) -> EdgeChange:
    had_following = profile.follows(other.id)
    had_follower = other.is_followed_by(profile.id)
    if not had_following and not had_follower:
        return EdgeChange.UNCHANGED

    profile.following.discard(other.id)
    other.followers.discard(profile.id)
    return EdgeChange.REMOVED if had_following else EdgeChange.REPAIRED
