"""Authorization-gated entry point for posts."""

from dataclasses import replace
from typing import Any, List

from domain.entities.page import Page
from domain.entities.post import Post
from domain.interop.auth_gate import AuthGate
from domain.services.post_service import PostService
from infrastructure.auth.provider import IAuthProvider


class PostInterop(AuthGate):
    """Token-gated post operations, forwarded to ``PostService``."""

    def __init__(self, post_service: PostService, auth_provider: IAuthProvider) -> None:
        super().__init__(auth_provider)
        self._posts = post_service

    async def get_detail(self, id: str, token: str) -> Post:
        await self._verify(token)
        return await self._posts.get_detail(id)

    async def get_post_by_id(self, id: str, token: str) -> Post:
        await self._verify(token)
        return await self._posts.get_post_by_id(id)

    async def get_all_by_uid(self, token: str, creator_id: str, page: Any, size: Any) -> Page[Post]:
        await self._verify(token)
        return await self._posts.get_all_by_uid(creator_id, page, size)

    async def get_mine(self, token: str, page: Any, size: Any) -> Page[Post]:
        user = await self._verify(token)
        return await self._posts.get_mine(user.id, page, size)

    async def get_by_cate_id(self, cate_id: str, token: str, page: Any, size: Any) -> Page[Post]:
        await self._verify(token)
        return await self._posts.get_by_cate_id(cate_id, page, size)

    async def get_share(self, token: str, page: Any, size: Any) -> Page[Post]:
        """Posts shared to the caller."""
        user = await self._verify(token)
        return await self._posts.get_share(user.id, page, size)

    async def get_by_mention_id(self, mention: str, token: str, page: Any, size: Any) -> Page[Post]:
        await self._verify(token)
        return await self._posts.get_by_mention_id(mention, page, size)

    async def get_all_post(self, token: str) -> List[Post]:
        await self._verify(token)
        return await self._posts.get_all_post()

    async def create(self, post: Post, token: str) -> Post:
        """Create a post owned by the caller."""
        user = await self._verify(token)
        return await self._posts.create(replace(post, creator_id=user.id, comments=[]))

    async def update(self, post: Post, token: str) -> Post:
        """Update one of the caller's posts."""
        user = await self._verify(token)
        stored = await self._posts.get_post_by_id(post.id)
        self._require_owner(user, stored.creator_id, "You can only edit your own posts")
        return await self._posts.update(replace(post, creator_id=user.id, comments=[]))

    async def delete(self, id: str, token: str) -> bool:
        """Delete one of the caller's posts."""
        user = await self._verify(token)
        stored = await self._posts.get_post_by_id(id)
        self._require_owner(user, stored.creator_id, "You can only delete your own posts")
        return await self._posts.delete(id)
