"""Profile service layer with business logic."""

from dataclasses import replace
from typing import Any, Awaitable, Callable, List, Mapping, TypeVar

import structlog

from core.exceptions import (
    ConcurrentUpdateError,
    ErrorCode,
    ProfileAlreadyExistsError,
    ProfileNotFoundError,
    ValidationError,
)
from domain.entities.profile import EdgeChange, Profile
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

T = TypeVar("T")

# Edits the two freshly read endpoints in place and reports what it did
EdgeEdit = Callable[[Profile, Profile], EdgeChange]

WRITE_ATTEMPTS = 3


class ProfileService:
    """Service layer for Profile business rules.

    Writes to an existing profile read the row inside the same unit of
    work that writes it. A write that still loses a race is retried on a
    fresh read, up to ``WRITE_ATTEMPTS`` times.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create(self, profile: Profile) -> Profile:
        """Create a profile. The id must be unused and required fields filled."""
        async with self._uow_factory() as uow:
            if profile.id and await uow.profiles.get(profile.id):
                raise ProfileAlreadyExistsError(profile.id)

            self._require_fields(profile)

            created = await uow.profiles.create(profile)
            await uow.commit()
            logger.info("profile_created", profile_id=created.id)
            return created

    async def update(self, profile: Profile) -> Profile:
        """Replace the stored profile fields. Follow sets are not written."""
        self._require_fields(profile)

        async def write(uow: IUnitOfWork) -> Profile:
            if not await uow.profiles.get_for_update(profile.id):
                raise ProfileNotFoundError(profile.id)
            return await uow.profiles.update(profile)  # type: ignore[no-any-return]

        return await self._write(profile.id, write)

    async def update_fields(self, id: str, changes: Mapping[str, Any]) -> Profile:
        """Overlay ``changes`` onto the stored profile and write the result."""

        async def write(uow: IUnitOfWork) -> Profile:
            stored = await uow.profiles.get_for_update(id)
            if not stored:
                raise ProfileNotFoundError(id)
            merged = replace(stored, **changes)
            self._require_fields(merged)
            return await uow.profiles.update(merged)  # type: ignore[no-any-return]

        return await self._write(id, write)

    async def update_edge(self, profile_id: str, other_profile_id: str, edit: EdgeEdit) -> EdgeChange:
        """Apply ``edit`` to both endpoints of a follow edge in one transaction.

        Rows are locked in id order. Nothing is written when ``edit``
        reports ``UNCHANGED``.
        """

        async def write(uow: IUnitOfWork) -> EdgeChange:
            rows: dict[str, Profile] = {}
            for id in sorted({profile_id, other_profile_id}):
                row = await uow.profiles.get_for_update(id)
                if not row:
                    raise ProfileNotFoundError(id)
                rows[id] = row
            profile, other = rows[profile_id], rows[other_profile_id]

            change = edit(profile, other)
            if change is EdgeChange.UNCHANGED:
                return change

            self._require_fields(profile)
            self._require_fields(other)
            await uow.profiles.update_edges(profile)
            await uow.profiles.update_edges(other)
            return change

        return await self._write(profile_id, write)

    async def get(self, id: str) -> Profile:
        """Get a profile by ID."""
        if not id:
            raise ValidationError("id", "Profile id is empty", ErrorCode.ID_EMPTY)

        async with self._uow_factory() as uow:
            profile = await uow.profiles.get(id)
            if not profile:
                raise ProfileNotFoundError(id)
            return profile

    async def get_all(self) -> List[Profile]:
        """Get every profile."""
        async with self._uow_factory() as uow:
            return await uow.profiles.get_all()  # type: ignore[no-any-return]

    async def _write(self, id: str, work: Callable[[IUnitOfWork], Awaitable[T]]) -> T:
        if not id:
            raise ValidationError("id", "Profile id is empty", ErrorCode.ID_EMPTY)

        attempt = 1
        while True:
            try:
                async with self._uow_factory() as uow:
                    result = await work(uow)
                    await uow.commit()
                    return result
            except ConcurrentUpdateError:
                logger.warning("profile_write_conflict", profile_id=id, attempt=attempt)
                if attempt == WRITE_ATTEMPTS:
                    raise
                attempt += 1

    @staticmethod
    def _require_fields(profile: Profile) -> None:
        missing = profile.first_empty_required_field()
        if missing:
            raise ValidationError(
                missing,
                f"Profile field '{missing}' cannot be empty",
                ErrorCode.FIELD_EMPTY,
            )
