"""Integration tests for the SQLAlchemy repositories and unit of work."""

from datetime import datetime, timedelta

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import ConcurrentUpdateError, ProfileNotFoundError
from domain.entities.comment import Comment
from domain.entities.post import Post
from domain.entities.profile import EdgeChange, Profile
from domain.services.profile_service import ProfileService
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def _profile(id: str, **overrides: object) -> Profile:
    fields: dict = {
        "email": f"{id}@example.com",
        "user_name": id,
        "first_name": "First",
        "last_name": "Last",
    }
    fields.update(overrides)
    return Profile(id=id, **fields)


def _post(id: str, minutes: int, creator_id: str = "p1", **overrides: object) -> Post:
    created = BASE_TIME + timedelta(minutes=minutes)
    return Post(
        id=id,
        creator_id=creator_id,
        content=f"post {id}",
        created_at=created,
        updated_at=created,
        **overrides,  # type: ignore[arg-type]
    )


@pytest.fixture
def uow(session_factory: async_sessionmaker[AsyncSession]) -> SQLAlchemyUnitOfWork:
    return SQLAlchemyUnitOfWork(session_factory)


class TestProfileRepository:
    @pytest.mark.asyncio
    async def test_round_trips_adjacency_sets(self, uow: SQLAlchemyUnitOfWork) -> None:
        async with uow:
            await uow.profiles.create(_profile("p1", following={"p3", "p2"}, category={"art"}))
            await uow.commit()

        async with uow:
            stored = await uow.profiles.get("p1")

        assert stored is not None
        assert stored.following == {"p2", "p3"}
        assert stored.category == {"art"}
        assert stored.followers == set()

    @pytest.mark.asyncio
    async def test_uncommitted_writes_are_discarded(self, uow: SQLAlchemyUnitOfWork) -> None:
        async with uow:
            await uow.profiles.create(_profile("p1"))

        async with uow:
            assert await uow.profiles.get("p1") is None

    @pytest.mark.asyncio
    async def test_exception_rolls_back(self, uow: SQLAlchemyUnitOfWork) -> None:
        with pytest.raises(RuntimeError):
            async with uow:
                await uow.profiles.create(_profile("p1"))
                raise RuntimeError("boom")

        async with uow:
            assert await uow.profiles.get_all() == []


class TestProfileWrites:
    @pytest.fixture
    async def seeded(self, uow: SQLAlchemyUnitOfWork) -> None:
        async with uow:
            await uow.profiles.create(_profile("p1", bio="old", following={"p2"}))
            await uow.commit()

    @pytest.mark.asyncio
    async def test_field_update_leaves_edges(self, uow: SQLAlchemyUnitOfWork, seeded: None) -> None:
        async with uow:
            await uow.profiles.update(_profile("p1", bio="new"))
            await uow.commit()

        async with uow:
            stored = await uow.profiles.get("p1")

        assert stored is not None
        assert stored.bio == "new"
        assert stored.following == {"p2"}

    @pytest.mark.asyncio
    async def test_edge_update_leaves_fields(self, uow: SQLAlchemyUnitOfWork, seeded: None) -> None:
        async with uow:
            await uow.profiles.update_edges(_profile("p1", bio="ignored", following={"p3"}))
            await uow.commit()

        async with uow:
            stored = await uow.profiles.get("p1")

        assert stored is not None
        assert stored.bio == "old"
        assert stored.following == {"p3"}

    @pytest.mark.asyncio
    async def test_write_from_stale_read_is_rejected(
        self, session_factory: async_sessionmaker[AsyncSession], seeded: None
    ) -> None:
        first = SQLAlchemyUnitOfWork(session_factory)
        second = SQLAlchemyUnitOfWork(session_factory)

        async with first:
            stale = await first.profiles.get_for_update("p1")
            assert stale is not None

            async with second:
                await second.profiles.update_edges(_profile("p1", following={"p2", "p3"}))
                await second.commit()

            stale.following.add("p4")
            with pytest.raises(ConcurrentUpdateError):
                await first.profiles.update_edges(stale)

        async with first:
            stored = await first.profiles.get("p1")

        assert stored is not None
        assert stored.following == {"p2", "p3"}

    @pytest.mark.asyncio
    async def test_update_edge_missing_side_writes_nothing(
        self, session_factory: async_sessionmaker[AsyncSession], seeded: None
    ) -> None:
        service = ProfileService(lambda: SQLAlchemyUnitOfWork(session_factory))

        def edit(profile: Profile, other: Profile) -> EdgeChange:
            profile.following.add(other.id)
            return EdgeChange.CREATED

        with pytest.raises(ProfileNotFoundError):
            await service.update_edge("p1", "ghost", edit)

        assert (await service.get("p1")).following == {"p2"}


class TestPostRepository:
    @pytest.fixture
    async def seeded(self, uow: SQLAlchemyUnitOfWork) -> None:
        async with uow:
            await uow.profiles.create(_profile("p1"))
            await uow.profiles.create(_profile("p2"))
            for i in range(5):
                await uow.posts.create(_post(f"a{i}", minutes=i))
            await uow.posts.create(
                _post("b0", minutes=10, creator_id="p2", share={"p1"}, mention={"p1"}, cate_id=["tech"])
            )
            await uow.posts.create(_post("b1", minutes=11, creator_id="p2", cate_id=["food", "tech"]))
            await uow.commit()

    @pytest.mark.asyncio
    async def test_pages_newest_first(self, uow: SQLAlchemyUnitOfWork, seeded: None) -> None:
        async with uow:
            first = await uow.posts.get_all_by_uid("p1", 0, 2)
            last = await uow.posts.get_mine("p1", 2, 2)
            beyond = await uow.posts.get_mine("p1", 7, 2)

        assert [p.id for p in first.data] == ["a4", "a3"]
        assert first.endpage == 2
        assert [p.id for p in last.data] == ["a0"]
        assert beyond.data == []
        assert beyond.endpage == 2

    @pytest.mark.asyncio
    async def test_empty_result_has_endpage_zero(
        self, uow: SQLAlchemyUnitOfWork, seeded: None
    ) -> None:
        async with uow:
            page = await uow.posts.get_all_by_uid("nobody", 0, 10)

        assert page.data == []
        assert page.endpage == 0

    @pytest.mark.asyncio
    async def test_membership_filters(self, uow: SQLAlchemyUnitOfWork, seeded: None) -> None:
        async with uow:
            shared = await uow.posts.get_share("p1", 0, 10)
            mentioned = await uow.posts.get_by_mention_id("p1", 0, 10)
            tech = await uow.posts.get_by_cate_id("tech", 0, 1)

        assert [p.id for p in shared.data] == ["b0"]
        assert [p.id for p in mentioned.data] == ["b0"]
        assert [p.id for p in tech.data] == ["b1"]
        assert tech.endpage == 1

    @pytest.mark.asyncio
    async def test_soft_delete_hides_post_everywhere(
        self, uow: SQLAlchemyUnitOfWork, seeded: None
    ) -> None:
        async with uow:
            assert await uow.posts.delete("b0") is True
            await uow.commit()

        async with uow:
            assert await uow.posts.get_post_by_id("b0") is None
            assert await uow.posts.get_detail("b0") is None
            assert (await uow.posts.get_share("p1", 0, 10)).data == []
            assert "b0" not in {p.id for p in await uow.posts.get_all_post()}
            assert await uow.posts.delete("b0") is False
            assert await uow.posts.exists("b0") is True
            assert await uow.posts.exists("nope") is False

    @pytest.mark.asyncio
    async def test_detail_carries_comments(self, uow: SQLAlchemyUnitOfWork, seeded: None) -> None:
        async with uow:
            await uow.comments.create_comment(
                Comment(id="c1", content="first", post_id="a0", author_id="p2")
            )
            await uow.comments.create_comment(
                Comment(id="c2", content="second", post_id="a0", author_id="p1")
            )
            await uow.commit()

        async with uow:
            detail = await uow.posts.get_detail("a0")
            plain = await uow.posts.get_post_by_id("a0")

        assert detail is not None and plain is not None
        assert {c.id for c in detail.comments} == {"c1", "c2"}
        assert plain.comments == []

    @pytest.mark.asyncio
    async def test_update_keeps_sets(self, uow: SQLAlchemyUnitOfWork, seeded: None) -> None:
        async with uow:
            post = await uow.posts.get_post_by_id("a0")
            assert post is not None
            post.content = "edited"
            post.mention.add("p2")
            await uow.posts.update(post)
            await uow.commit()

        async with uow:
            stored = await uow.posts.get_post_by_id("a0")

        assert stored is not None
        assert stored.content == "edited"
        assert stored.mention == {"p2"}


class TestCommentRepository:
    @pytest.mark.asyncio
    async def test_create_update_delete(self, uow: SQLAlchemyUnitOfWork) -> None:
        async with uow:
            await uow.profiles.create(_profile("p1"))
            await uow.posts.create(_post("post-1", minutes=0))
            await uow.comments.create_comment(
                Comment(id="c1", content="hi", post_id="post-1", author_id="p1")
            )
            await uow.commit()

        async with uow:
            await uow.comments.update_comment(
                Comment(id="c1", content="edited", post_id="post-1", author_id="p1")
            )
            await uow.commit()

        async with uow:
            stored = await uow.comments.get_comment_by_id("c1")
            assert stored is not None
            assert stored.content == "edited"
            assert [c.id for c in await uow.comments.get_comments_by_post_id("post-1")] == ["c1"]

            assert await uow.comments.delete_comment("c1") is True
            assert await uow.comments.delete_comment("c1") is False
            await uow.commit()

        async with uow:
            assert await uow.comments.get_comments() == []
