"""Shared token gate for the interop layer."""

from core.exceptions import AuthorizationError
from infrastructure.auth.provider import IAuthProvider, TokenUser


class AuthGate:
    """Base for interop components: every public call verifies the token first.

    Errors raised by the verifier propagate unchanged.
    """

    def __init__(self, auth_provider: IAuthProvider) -> None:
        self._auth = auth_provider

    async def _verify(self, token: str) -> TokenUser:
        return await self._auth.verify_token(token)

    @staticmethod
    def _require_owner(user: TokenUser, owner_id: str, message: str) -> None:
        if owner_id != user.id:
            raise AuthorizationError(message)
