"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from fastapi import Depends

from api.dependencies.auth import get_auth_provider
from domain.interop.comment_interop import CommentInterop
from domain.interop.post_interop import PostInterop
from domain.interop.profile_interop import ProfileInterop
from domain.services.comment_service import CommentService
from domain.services.post_service import PostService
from domain.services.profile_service import ProfileService
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_uow_factory())


@lru_cache
def get_post_service() -> PostService:
    """Get Post service instance."""
    return PostService(get_uow_factory())


@lru_cache
def get_comment_service() -> CommentService:
    """Get Comment service instance."""
    return CommentService(get_uow_factory())


def get_profile_interop(
    service: ProfileService = Depends(get_profile_service),
    auth_provider: JWTAuthProvider = Depends(get_auth_provider),
) -> ProfileInterop:
    return ProfileInterop(service, auth_provider)


def get_post_interop(
    service: PostService = Depends(get_post_service),
    auth_provider: JWTAuthProvider = Depends(get_auth_provider),
) -> PostInterop:
    return PostInterop(service, auth_provider)


def get_comment_interop(
    service: CommentService = Depends(get_comment_service),
    auth_provider: JWTAuthProvider = Depends(get_auth_provider),
) -> CommentInterop:
    return CommentInterop(service, auth_provider)
