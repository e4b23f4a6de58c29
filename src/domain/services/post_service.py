"""Post service layer with business logic."""

from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, List

import structlog

from core.exceptions import (
    ErrorCode,
    PostAlreadyExistsError,
    PostNotFoundError,
    ValidationError,
)
from domain.entities.page import Page
from domain.entities.post import Post
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.pagination import validate_pagination

logger = structlog.get_logger()


class PostService:
    """Service layer for Post business logic.

    Every listing validates its key and pagination parameters before the
    repository is touched.
    """

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def get_detail(self, id: str) -> Post:
        """Get a post with its comments."""
        self._require_id(id)
        async with self._uow_factory() as uow:
            post = await uow.posts.get_detail(id)
            if not post:
                raise PostNotFoundError(id)
            return post

    async def get_post_by_id(self, id: str) -> Post:
        """Get a post without its comments."""
        self._require_id(id)
        async with self._uow_factory() as uow:
            post = await uow.posts.get_post_by_id(id)
            if not post:
                raise PostNotFoundError(id)
            return post

    async def get_all_by_uid(self, creator_id: str, page: Any, size: Any) -> Page[Post]:
        """Get one page of posts created by a profile."""
        page_number, page_size = self._listing_args("creator_id", creator_id, page, size)
        async with self._uow_factory() as uow:
            return await uow.posts.get_all_by_uid(creator_id, page_number, page_size)  # type: ignore[no-any-return]

    async def get_mine(self, id: str, page: Any, size: Any) -> Page[Post]:
        """Get one page of the caller's posts."""
        page_number, page_size = self._listing_args("id", id, page, size)
        async with self._uow_factory() as uow:
            return await uow.posts.get_mine(id, page_number, page_size)  # type: ignore[no-any-return]

    async def get_by_cate_id(self, cate_id: str, page: Any, size: Any) -> Page[Post]:
        """Get one page of posts in a category."""
        page_number, page_size = self._listing_args("cate_id", cate_id, page, size)
        async with self._uow_factory() as uow:
            return await uow.posts.get_by_cate_id(cate_id, page_number, page_size)  # type: ignore[no-any-return]

    async def get_share(self, share_id: str, page: Any, size: Any) -> Page[Post]:
        """Get one page of posts shared to a profile."""
        page_number, page_size = self._listing_args("share_id", share_id, page, size)
        async with self._uow_factory() as uow:
            return await uow.posts.get_share(share_id, page_number, page_size)  # type: ignore[no-any-return]

    async def get_by_mention_id(self, mention: str, page: Any, size: Any) -> Page[Post]:
        """Get one page of posts mentioning a profile."""
        page_number, page_size = self._listing_args("mention", mention, page, size)
        async with self._uow_factory() as uow:
            return await uow.posts.get_by_mention_id(mention, page_number, page_size)  # type: ignore[no-any-return]

    async def get_all_post(self) -> List[Post]:
        async with self._uow_factory() as uow:
            return await uow.posts.get_all_post()  # type: ignore[no-any-return]

    async def create(self, post: Post) -> Post:
        """Create a new post. Ids of soft-deleted posts are not reused."""
        self._validate_body(post)
        async with self._uow_factory() as uow:
            if post.id and await uow.posts.exists(post.id):
                raise PostAlreadyExistsError(post.id)

            created = await uow.posts.create(post)
            await uow.commit()
            logger.info("post_created", post_id=created.id, creator_id=created.creator_id)
            return created

    async def update(self, post: Post) -> Post:
        """Update an existing post."""
        self._validate_body(post)
        self._require_id(post.id)
        async with self._uow_factory() as uow:
            existing = await uow.posts.get_post_by_id(post.id)
            if not existing:
                raise PostNotFoundError(post.id)

            updated = await uow.posts.update(
                replace(post, created_at=existing.created_at, updated_at=datetime.utcnow())
            )
            await uow.commit()
            return updated

    async def delete(self, id: str) -> bool:
        """Soft-delete a post."""
        self._require_id(id)
        async with self._uow_factory() as uow:
            deleted = await uow.posts.delete(id)
            if not deleted:
                raise PostNotFoundError(id)
            await uow.commit()
            logger.info("post_deleted", post_id=id)
            return True

    @staticmethod
    def _require_id(id: str) -> None:
        if not id:
            raise ValidationError("id", "Post id is invalid", ErrorCode.ID_EMPTY)

    @staticmethod
    def _listing_args(field: str, key: str, page: Any, size: Any) -> tuple[int, int]:
        if not key:
            raise ValidationError(field, f"'{field}' cannot be empty", ErrorCode.ID_EMPTY)
        return validate_pagination(page, size)

    @staticmethod
    def _validate_body(post: Post) -> None:
        if not post.content or not post.content.strip():
            raise ValidationError("content", "Content is invalid", ErrorCode.INVALID_CONTENT)
        if not post.creator_id:
            raise ValidationError("creator_id", "Post creator is empty", ErrorCode.FIELD_EMPTY)
