"""SQLAlchemy implementation of Comment repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from domain.entities.comment import Comment
from infrastructure.database.models import CommentModel


class SQLAlchemyCommentRepository:
    """SQLAlchemy implementation of ICommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_comment_by_id(self, id: str) -> Comment | None:
        """Get a comment by ID."""
        model = await self._get_model(id)
        return self._to_entity(model) if model else None

    async def get_comments(self) -> list[Comment]:
        """Get every comment, oldest first."""
        stmt = select(CommentModel).order_by(CommentModel.created_at, CommentModel.id)
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def get_comments_by_post_id(self, post_id: str) -> list[Comment]:
        """Get all comments attached to a post, oldest first."""
        stmt = (
            select(CommentModel)
            .where(CommentModel.post_id == post_id)
            .order_by(CommentModel.created_at, CommentModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(model) for model in result.scalars()]

    async def create_comment(self, comment: Comment) -> Comment:
        """Create a new comment."""
        model = CommentModel(
            id=comment.id,
            content=comment.content,
            post_id=comment.post_id,
            author_id=comment.author_id,
        )
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_entity(model)

    async def update_comment(self, comment: Comment) -> Comment:
        """Update the content of an existing comment."""
        model = await self._get_model(comment.id)
        if not model:
            raise ValueError(f"Comment {comment.id} not found")

        model.content = comment.content
        await self._session.flush()
        return self._to_entity(model)

    async def delete_comment(self, id: str) -> bool:
        """Delete a comment."""
        model = await self._get_model(id)
        if not model:
            return False

        await self._session.delete(model)
        await self._session.flush()
        return True

    async def _get_model(self, id: str) -> CommentModel | None:
        stmt = select(CommentModel).where(CommentModel.id == id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    def _to_entity(model: CommentModel) -> Comment:
        return Comment(
            id=model.id,
            content=model.content,
            post_id=model.post_id,
            author_id=model.author_id,
        )
