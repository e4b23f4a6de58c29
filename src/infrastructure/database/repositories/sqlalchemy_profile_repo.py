"""SQLAlchemy implementation of Profile repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from core.exceptions import ConcurrentUpdateError
from domain.entities.profile import Profile
from infrastructure.database.models import ProfileModel


class SQLAlchemyProfileRepository:
    """SQLAlchemy implementation of IProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, id: str) -> Profile | None:
        """Get a profile by ID."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def get_for_update(self, id: str) -> Profile | None:
        """Get a profile by ID with ``SELECT ... FOR UPDATE``.

        SQLite has no row locks; there the version check in ``_flush``
        catches the lost update instead.
        """
        model = await self._get_model(id, lock=True)
        return self._to_entity(model) if model else None

    async def get_all(self) -> list[Profile]:
        """Get every profile."""
        stmt = select(ProfileModel).order_by(ProfileModel.user_name, ProfileModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile."""
        model = ProfileModel(id=profile.id)
        self._apply_fields(model, profile)
        self._apply_edges(model, profile)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, profile: Profile) -> Profile:
        """Update the profile fields of an existing row."""
        model = await self._require_model(profile.id)
        self._apply_fields(model, profile)
        await self._flush(profile.id)
        return self._to_entity(model)

    async def update_edges(self, profile: Profile) -> Profile:
        """Update the adjacency sets of an existing row."""
        model = await self._require_model(profile.id)
        self._apply_edges(model, profile)
        await self._flush(profile.id)
        return self._to_entity(model)

    async def _flush(self, id: str) -> None:
        try:
            await self._session.flush()
        except StaleDataError as e:
            raise ConcurrentUpdateError(id) from e

    async def _require_model(self, id: str) -> ProfileModel:
        model = await self._get_model(id)
        if not model:
            raise ValueError(f"Profile {id} not found")
        return model

    async def _get_model(self, id: str, lock: bool = False) -> ProfileModel | None:
        stmt = select(ProfileModel).where(ProfileModel.id == id)
        if lock:
            stmt = stmt.with_for_update()
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _apply_fields(model: ProfileModel, profile: Profile) -> None:
        model.email = profile.email
        model.bio = profile.bio
        model.photo_url = profile.photo_url
        model.phone = profile.phone
        model.user_name = profile.user_name
        model.first_name = profile.first_name
        model.last_name = profile.last_name
        model.category = sorted(profile.category)
        model.gender = profile.gender

    @staticmethod
    def _apply_edges(model: ProfileModel, profile: Profile) -> None:
        model.followers = sorted(profile.followers)
        model.following = sorted(profile.following)

    @staticmethod
    def _to_entity(model: ProfileModel) -> Profile:
        return Profile(
            id=model.id,
            email=model.email,
            bio=model.bio,
            photo_url=model.photo_url,
            phone=model.phone,
            user_name=model.user_name,
            first_name=model.first_name,
            last_name=model.last_name,
            category=set(model.category or []),
            followers=set(model.followers or []),
            following=set(model.following or []),
            gender=model.gender,
        )
