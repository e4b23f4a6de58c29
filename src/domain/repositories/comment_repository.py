"""Comment repository protocol."""

from typing import Protocol

from domain.entities.comment import Comment


class ICommentRepository(Protocol):
    """Repository interface for Comment entities."""

    async def get_comment_by_id(self, id: str) -> Comment | None:
        """Get a comment by ID."""
        ...

    async def get_comments(self) -> list[Comment]:
        """Get every comment."""
        ...

    async def get_comments_by_post_id(self, post_id: str) -> list[Comment]:
        """Get all comments attached to a post."""
        ...

    async def create_comment(self, comment: Comment) -> Comment:
        """Create a new comment."""
        ...

    async def update_comment(self, comment: Comment) -> Comment:
        """Update an existing comment."""
        ...

    async def delete_comment(self, id: str) -> bool:
        """Delete a comment and return success status."""
        ...
