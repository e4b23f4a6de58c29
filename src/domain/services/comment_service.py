"""Comment service layer with business logic."""

from typing import Callable, List

import structlog

from core.exceptions import (
    CommentAlreadyExistsError,
    CommentIdMismatchError,
    CommentNotFoundError,
    ErrorCode,
    PostNotFoundError,
    ValidationError,
)
from domain.entities.comment import Comment
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()


class CommentService:
    """Service layer for Comment business logic."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def create_comment(self, comment: Comment) -> Comment:
        """Create a comment on an existing post."""
        self._validate(comment)
        async with self._uow_factory() as uow:
            if not await uow.posts.get_post_by_id(comment.post_id):
                raise PostNotFoundError(comment.post_id)
            if await uow.comments.get_comment_by_id(comment.id):
                raise CommentAlreadyExistsError(comment.id)

            created = await uow.comments.create_comment(comment)
            await uow.commit()
            logger.info("comment_created", comment_id=created.id, post_id=created.post_id)
            return created

    async def update_comment(self, id: str, comment: Comment) -> Comment:
        """Update a comment. ``id`` must match the payload's own id."""
        self._require_same_id(id, comment)
        self._validate(comment)
        async with self._uow_factory() as uow:
            if not await uow.comments.get_comment_by_id(id):
                raise CommentNotFoundError(id)

            updated = await uow.comments.update_comment(comment)
            await uow.commit()
            return updated

    async def delete_comment(self, id: str, comment: Comment) -> bool:
        """Delete a comment. ``id`` must match the payload's own id."""
        self._require_same_id(id, comment)
        async with self._uow_factory() as uow:
            if not await uow.comments.get_comment_by_id(id):
                raise CommentNotFoundError(id)

            deleted = await uow.comments.delete_comment(id)
            if not deleted:
                raise CommentNotFoundError(id)
            await uow.commit()
            logger.info("comment_deleted", comment_id=id)
            return True

    async def get_comment_by_id(self, id: str) -> Comment:
        if not id:
            raise ValidationError("id", "Comment id is empty", ErrorCode.ID_EMPTY)
        async with self._uow_factory() as uow:
            comment = await uow.comments.get_comment_by_id(id)
            if not comment:
                raise CommentNotFoundError(id)
            return comment

    async def get_comments(self) -> List[Comment]:
        async with self._uow_factory() as uow:
            return await uow.comments.get_comments()  # type: ignore[no-any-return]

    async def get_comments_by_post_id(self, post_id: str) -> List[Comment]:
        """Get all comments attached to a post."""
        if not post_id:
            raise ValidationError("post_id", "Comment postId cannot be empty", ErrorCode.FIELD_EMPTY)
        async with self._uow_factory() as uow:
            return await uow.comments.get_comments_by_post_id(post_id)  # type: ignore[no-any-return]

    @staticmethod
    def _require_same_id(id: str, comment: Comment) -> None:
        if not id:
            raise ValidationError("id", "Comment id is empty", ErrorCode.ID_EMPTY)
        if comment.id != id:
            raise CommentIdMismatchError(id, comment.id)

    @staticmethod
    def _validate(comment: Comment) -> None:
        if not comment.content or not comment.content.strip():
            raise ValidationError(
                "content", "Comment content cannot be empty", ErrorCode.INVALID_CONTENT
            )
        if not comment.post_id:
            raise ValidationError("post_id", "Comment postId cannot be empty", ErrorCode.FIELD_EMPTY)
        if not comment.author_id:
            raise ValidationError(
                "author_id", "Comment authorId cannot be empty", ErrorCode.FIELD_EMPTY
            )
