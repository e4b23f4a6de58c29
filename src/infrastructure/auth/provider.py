"""Authentication provider protocol."""

from dataclasses import dataclass
from typing import Optional, Protocol


@dataclass
class TokenUser:
    """Identity decoded from a verified token."""

    id: str
    email: str
    display_name: Optional[str] = None


class IAuthProvider(Protocol):
    """Protocol for token verification collaborators."""

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate an authentication token.

        Args:
            token: The bearer token to validate

        Returns:
            TokenUser if valid, None if invalid
        """
        ...

    async def verify_token(self, token: str) -> TokenUser:
        """
        Verify an authentication token.

        Args:
            token: The bearer token, with or without the ``Bearer`` prefix

        Returns:
            The decoded identity

        Raises:
            AuthenticationError: If the token is missing, invalid or expired
        """
        ...
