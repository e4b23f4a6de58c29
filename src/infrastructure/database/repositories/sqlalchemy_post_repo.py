"""SQLAlchemy implementation of Post repository."""

from datetime import datetime
from typing import Callable, Optional

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from domain.entities.comment import Comment
from domain.entities.page import Page, last_page_index
from domain.entities.post import Post
from infrastructure.database.models import CommentModel, PostModel


class SQLAlchemyPostRepository:
    """SQLAlchemy implementation of IPostRepository.

    Soft-deleted rows (``deleted_at`` set) are excluded from every read.
    Membership filters on JSON array columns are applied in Python so the
    same code runs on PostgreSQL and SQLite.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_post_by_id(self, id: str) -> Post | None:
        """Get a post by ID."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def exists(self, id: str) -> bool:
        """Check an id against every row, soft-deleted ones included."""
        stmt = select(PostModel.id).where(PostModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def get_detail(self, id: str) -> Post | None:
        """Get a post by ID with its comments."""
        stmt = (
            self._visible()
            .where(PostModel.id == id)
            .options(selectinload(PostModel.comments))
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        if not model:
            return None
        comments = sorted(model.comments, key=lambda c: (c.created_at, c.id))
        return self._to_entity(model, comments=comments)

    async def get_all_by_uid(self, creator_id: str, page: int, size: int) -> Page[Post]:
        """Get one page of posts created by a profile."""
        return await self._page_by_creator(creator_id, page, size)

    async def get_mine(self, id: str, page: int, size: int) -> Page[Post]:
        """Get one page of the caller's own posts."""
        return await self._page_by_creator(id, page, size)

    async def get_by_cate_id(self, cate_id: str, page: int, size: int) -> Page[Post]:
        """Get one page of posts in a category."""
        return await self._page_matching(lambda m: cate_id in (m.cate_id or []), page, size)

    async def get_share(self, share_id: str, page: int, size: int) -> Page[Post]:
        """Get one page of posts shared to a profile."""
        return await self._page_matching(lambda m: share_id in (m.share or []), page, size)

    async def get_by_mention_id(self, mention: str, page: int, size: int) -> Page[Post]:
        """Get one page of posts mentioning a profile."""
        return await self._page_matching(lambda m: mention in (m.mention or []), page, size)

    async def get_all_post(self) -> list[Post]:
        """Get every visible post, newest first."""
        result = await self._session.execute(self._visible())
        return [self._to_entity(model) for model in result.scalars()]

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        model = PostModel(
            id=post.id,
            creator_id=post.creator_id,
            created_at=post.created_at,
        )
        self._apply(model, post)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update(self, post: Post) -> Post:
        """Update an existing post."""
        model = await self._get_model(post.id)
        if not model:
            raise ValueError(f"Post {post.id} not found")

        self._apply(model, post)
        await self._session.flush()
        return self._to_entity(model)

    async def delete(self, id: str) -> bool:
        """Soft-delete a post."""
        model = await self._get_model(id)
        if not model:
            return False

        model.deleted_at = datetime.utcnow()
        await self._session.flush()
        return True

    @staticmethod
    def _visible() -> Select[tuple[PostModel]]:
        return (
            select(PostModel)
            .where(PostModel.deleted_at.is_(None))
            .order_by(PostModel.created_at.desc(), PostModel.id)
        )

    async def _get_model(self, id: str) -> PostModel | None:
        stmt = self._visible().where(PostModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    async def _page_by_creator(self, creator_id: str, page: int, size: int) -> Page[Post]:
        count_stmt = select(func.count(PostModel.id)).where(
            PostModel.creator_id == creator_id,
            PostModel.deleted_at.is_(None),
        )
        total = (await self._session.execute(count_stmt)).scalar_one()

        stmt = (
            self._visible()
            .where(PostModel.creator_id == creator_id)
            .offset(page * size)
            .limit(size)
        )
        result = await self._session.execute(stmt)
        return Page(
            data=[self._to_entity(model) for model in result.scalars()],
            endpage=last_page_index(total, size),
        )

    async def _page_matching(
        self, predicate: Callable[[PostModel], bool], page: int, size: int
    ) -> Page[Post]:
        result = await self._session.execute(self._visible())
        matches = [model for model in result.scalars() if predicate(model)]
        start = page * size
        return Page(
            data=[self._to_entity(model) for model in matches[start : start + size]],
            endpage=last_page_index(len(matches), size),
        )

    @staticmethod
    def _apply(model: PostModel, post: Post) -> None:
        model.content = post.content
        model.share = sorted(post.share)
        model.photo_url = list(post.photo_url)
        model.hashtag = list(post.hashtag)
        model.cate_id = list(post.cate_id)
        model.reaction = list(post.reaction)
        model.mention = sorted(post.mention)
        model.updated_at = post.updated_at

    @staticmethod
    def _to_entity(
        model: PostModel, comments: Optional[list[CommentModel]] = None
    ) -> Post:
        return Post(
            id=model.id,
            creator_id=model.creator_id,
            content=model.content,
            share=set(model.share or []),
            photo_url=list(model.photo_url or []),
            hashtag=list(model.hashtag or []),
            cate_id=list(model.cate_id or []),
            reaction=list(model.reaction or []),
            comments=[
                Comment(
                    id=c.id,
                    content=c.content,
                    post_id=c.post_id,
                    author_id=c.author_id,
                )
                for c in comments or []
            ],
            mention=set(model.mention or []),
            created_at=model.created_at,
            updated_at=model.updated_at,
            deleted_at=model.deleted_at,
        )
