"""Fakes and builders shared by unit tests."""

from typing import Any
from unittest.mock import AsyncMock

from core.exceptions import AuthenticationError, ErrorCode
from domain.entities.comment import Comment
from domain.entities.page import Page
from domain.entities.post import Post
from domain.entities.profile import Profile
from infrastructure.auth.provider import TokenUser


class FakeUnitOfWork:
    """Fake Unit of Work with repository mocks for unit testing."""

    def __init__(self) -> None:
        self.profiles = AsyncMock()
        self.posts = AsyncMock()
        self.comments = AsyncMock()
        self.committed = False
        self.rolled_back = False

    async def commit(self) -> None:
        self.committed = True

    async def rollback(self) -> None:
        self.rolled_back = True

    async def __aenter__(self) -> "FakeUnitOfWork":
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


class InMemoryProfileRepository:
    """Dict-backed profile store that hands out copies, like a real database."""

    def __init__(self) -> None:
        self.rows: dict[str, Profile] = {}
        self.written: set[str] = set()

    @staticmethod
    def _copy(profile: Profile) -> Profile:
        return Profile(
            id=profile.id,
            email=profile.email,
            bio=profile.bio,
            photo_url=profile.photo_url,
            phone=profile.phone,
            user_name=profile.user_name,
            first_name=profile.first_name,
            last_name=profile.last_name,
            category=set(profile.category),
            followers=set(profile.followers),
            following=set(profile.following),
            gender=profile.gender,
        )

    async def get(self, id: str) -> Profile | None:
        row = self.rows.get(id)
        return self._copy(row) if row else None

    async def get_for_update(self, id: str) -> Profile | None:
        return await self.get(id)

    async def get_all(self) -> list[Profile]:
        return [self._copy(p) for p in self.rows.values()]

    async def create(self, profile: Profile) -> Profile:
        return self._store(self._copy(profile))

    async def update(self, profile: Profile) -> Profile:
        stored = self.rows[profile.id]
        row = self._copy(profile)
        row.followers, row.following = set(stored.followers), set(stored.following)
        return self._store(row)

    async def update_edges(self, profile: Profile) -> Profile:
        row = self._copy(self.rows[profile.id])
        row.followers, row.following = set(profile.followers), set(profile.following)
        return self._store(row)

    def _store(self, row: Profile) -> Profile:
        self.rows[row.id] = row
        self.written.add(row.id)
        return self._copy(row)


class InMemoryUnitOfWork(FakeUnitOfWork):
    """Unit of Work whose writes only become visible on commit.

    Only rows written through this unit are copied back, so two units that
    touch different profiles do not clobber each other.
    """

    def __init__(self, store: InMemoryProfileRepository) -> None:
        super().__init__()
        self._store = store
        self.profiles = InMemoryProfileRepository()  # type: ignore[assignment]
        self.commits = 0

    async def __aenter__(self) -> "InMemoryUnitOfWork":
        self.profiles.rows = dict(self._store.rows)
        self.profiles.written = set()
        return self

    async def commit(self) -> None:
        for id in self.profiles.written:
            self._store.rows[id] = self.profiles.rows[id]
        self.profiles.written = set()
        self.committed = True
        self.commits += 1


class StubAuthProvider:
    """Verifier stub mapping tokens to identities."""

    def __init__(self, users: dict[str, TokenUser]) -> None:
        self._users = users
        self.calls: list[str] = []

    async def validate_token(self, token: str) -> TokenUser | None:
        return self._users.get(token)

    async def verify_token(self, token: str) -> TokenUser:
        self.calls.append(token)
        user = self._users.get(token)
        if not user:
            raise AuthenticationError(
                message="Invalid or expired token",
                error_code=ErrorCode.INVALID_TOKEN,
            )
        return user


def make_profile(id: str, **overrides: Any) -> Profile:
    """A profile with every required field filled."""
    fields: dict[str, Any] = {
        "email": f"{id}@example.com",
        "user_name": id,
        "first_name": "First",
        "last_name": "Last",
    }
    fields.update(overrides)
    return Profile(id=id, **fields)


def make_post(creator_id: str = "p1", **overrides: Any) -> Post:
    fields: dict[str, Any] = {"content": "hello world"}
    fields.update(overrides)
    return Post(creator_id=creator_id, **fields)


def make_comment(id: str = "c1", **overrides: Any) -> Comment:
    fields: dict[str, Any] = {"content": "nice", "post_id": "post-1", "author_id": "p1"}
    fields.update(overrides)
    return Comment(id=id, **fields)


def empty_page() -> Page[Post]:
    return Page(data=[], endpage=0)


