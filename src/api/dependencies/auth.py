"""Authentication dependencies for FastAPI.

Routes only extract the bearer credential; verification happens in the
interop layer so that every domain operation is gated the same way.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from infrastructure.auth.jwt_provider import JWTAuthProvider

# Security scheme for OpenAPI docs
security = HTTPBearer(auto_error=False)

# Singleton auth provider
_auth_provider: JWTAuthProvider | None = None


def get_auth_provider() -> JWTAuthProvider:
    """Get or create the auth provider singleton."""
    global _auth_provider
    if _auth_provider is None:
        _auth_provider = JWTAuthProvider()
    return _auth_provider


async def get_bearer_token(
    credentials: Annotated[
        HTTPAuthorizationCredentials | None,
        Depends(security),
    ],
) -> str:
    """Return the raw bearer credential, or an empty string when absent."""
    if not credentials:
        return ""
    return credentials.credentials


# Type alias for convenience in route handlers
BearerToken = Annotated[str, Depends(get_bearer_token)]
