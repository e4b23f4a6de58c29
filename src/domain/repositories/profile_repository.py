"""Profile repository protocol."""

from typing import Protocol

from domain.entities.profile import Profile


class IProfileRepository(Protocol):
    """Repository interface for Profile entities.

    ``update`` and ``update_edges`` write disjoint columns: profile fields
    and the follow adjacency sets respectively. Both raise
    ``ConcurrentUpdateError`` when the row changed since it was read.
    """

    async def get(self, id: str) -> Profile | None:
        """Get a profile by ID."""
        ...

    async def get_for_update(self, id: str) -> Profile | None:
        """Get a profile by ID and lock its row until the transaction ends."""
        ...

    async def get_all(self) -> list[Profile]:
        """Get every stored profile."""
        ...

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        ...

    async def update(self, profile: Profile) -> Profile:
        """Write the profile fields, leaving followers and following untouched."""
        ...

    async def update_edges(self, profile: Profile) -> Profile:
        """Write only the followers and following sets."""
        ...
