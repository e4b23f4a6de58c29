"""Shared fixtures for unit tests."""

import pytest

from infrastructure.auth.provider import TokenUser
from tests.unit.fakes import FakeUnitOfWork, StubAuthProvider


@pytest.fixture
def uow() -> FakeUnitOfWork:
    """Create a fresh FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def users() -> dict[str, TokenUser]:
    """Token -> identity map used by StubAuthProvider."""
    return {
        "token-p1": TokenUser(id="p1", email="p1@example.com"),
        "token-p2": TokenUser(id="p2", email="p2@example.com"),
    }


@pytest.fixture
def auth(users: dict[str, TokenUser]) -> StubAuthProvider:
    return StubAuthProvider(users)
