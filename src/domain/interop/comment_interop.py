"""Authorization-gated entry point for comments."""

from dataclasses import replace
from typing import List

from domain.entities.comment import Comment
from domain.interop.auth_gate import AuthGate
from domain.services.comment_service import CommentService
from infrastructure.auth.provider import IAuthProvider


class CommentInterop(AuthGate):
    """Token-gated comment operations, forwarded to ``CommentService``."""

    def __init__(self, comment_service: CommentService, auth_provider: IAuthProvider) -> None:
        super().__init__(auth_provider)
        self._comments = comment_service

    async def create_comment(self, token: str, comment: Comment) -> Comment:
        """Create a comment authored by the caller."""
        user = await self._verify(token)
        return await self._comments.create_comment(replace(comment, author_id=user.id))

    async def update_comment(self, token: str, id: str, comment: Comment) -> Comment:
        user = await self._verify(token)
        stored = await self._comments.get_comment_by_id(id)
        self._require_owner(user, stored.author_id, "You can only edit your own comments")
        return await self._comments.update_comment(
            id, replace(comment, author_id=user.id, post_id=stored.post_id)
        )

    async def delete_comment(self, token: str, id: str, comment: Comment) -> bool:
        user = await self._verify(token)
        stored = await self._comments.get_comment_by_id(id)
        self._require_owner(user, stored.author_id, "You can only delete your own comments")
        return await self._comments.delete_comment(id, comment)

    async def get_comment_by_id(self, token: str, id: str) -> Comment:
        await self._verify(token)
        return await self._comments.get_comment_by_id(id)

    async def get_comments(self, token: str) -> List[Comment]:
        await self._verify(token)
        return await self._comments.get_comments()

    async def get_comments_by_post_id(self, token: str, post_id: str) -> List[Comment]:
        await self._verify(token)
        return await self._comments.get_comments_by_post_id(post_id)
