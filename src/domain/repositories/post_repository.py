"""Post repository protocol."""

from typing import Protocol

from domain.entities.page import Page
from domain.entities.post import Post


class IPostRepository(Protocol):
    """Repository interface for Post entities.

    Soft-deleted posts are invisible to every read.
    """

    async def get_post_by_id(self, id: str) -> Post | None:
        """Get a post by ID without its comments."""
        ...

    async def exists(self, id: str) -> bool:
        """Whether any post, soft-deleted or not, uses this id."""
        ...

    async def get_detail(self, id: str) -> Post | None:
        """Get a post by ID with its comments attached."""
        ...

    async def get_all_by_uid(self, creator_id: str, page: int, size: int) -> Page[Post]:
        """Get one page of posts created by a profile."""
        ...

    async def get_mine(self, id: str, page: int, size: int) -> Page[Post]:
        """Get one page of the caller's own posts."""
        ...

    async def get_by_cate_id(self, cate_id: str, page: int, size: int) -> Page[Post]:
        """Get one page of posts tagged with a category."""
        ...

    async def get_share(self, share_id: str, page: int, size: int) -> Page[Post]:
        """Get one page of posts shared to a profile."""
        ...

    async def get_by_mention_id(self, mention: str, page: int, size: int) -> Page[Post]:
        """Get one page of posts mentioning a profile."""
        ...

    async def get_all_post(self) -> list[Post]:
        """Get every visible post."""
        ...

    async def create(self, post: Post) -> Post:
        """Create a new post."""
        ...

    async def update(self, post: Post) -> Post:
        """Update an existing post."""
        ...

    async def delete(self, id: str) -> bool:
        """Soft-delete a post and return success status."""
        ...
