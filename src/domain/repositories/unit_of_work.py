"""Unit of Work protocol."""

from typing import Protocol

from domain.repositories.comment_repository import ICommentRepository
from domain.repositories.post_repository import IPostRepository
from domain.repositories.profile_repository import IProfileRepository


class IUnitOfWork(Protocol):
    """Unit of Work interface for managing transactions.

    Every write made through one unit of work lands in a single
    transaction, so multi-entity updates are all-or-nothing.
    """

    profiles: IProfileRepository
    posts: IPostRepository
    comments: ICommentRepository

    async def commit(self) -> None:
        """Commit the current transaction."""
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...

    async def __aenter__(self) -> "IUnitOfWork":
        """Enter the context manager."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore
        """Exit the context manager."""
        ...
