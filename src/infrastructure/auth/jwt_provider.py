"""JWT authentication provider implementation.

Supports identity-provider JWTs signed with an asymmetric key (RS256 or
ES256, public keys fetched from a JWKS endpoint) and locally-created
tokens (HS256, shared secret).

Expected payload structure:
    {
        "sub": "profile-id",
        "email": "user@example.com",
        "name": "John",
        "exp": 1234567890
    }
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Optional

import httpx
from jose import ExpiredSignatureError, JWTError, jwt

from core.config import settings
from core.exceptions import AuthenticationError, ErrorCode
from infrastructure.auth.provider import TokenUser

logger = logging.getLogger(__name__)

ASYMMETRIC_ALGORITHMS = frozenset({"RS256", "ES256"})

# Module-level JWKS cache (fetched once, reused across requests)
_jwks_cache: dict[str, Any] | None = None


async def _get_jwks_keys(jwks_url: str) -> dict[str, Any]:
    """Fetch and cache JWKS keys from the identity provider."""
    global _jwks_cache
    if _jwks_cache is not None:
        return _jwks_cache

    if not jwks_url:
        return {}

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(jwks_url, timeout=10.0)
            response.raise_for_status()
            jwks_data = response.json()
            # Build a kid -> key mapping
            _jwks_cache = {}
            for key_data in jwks_data.get("keys", []):
                kid = key_data.get("kid")
                if kid:
                    _jwks_cache[kid] = key_data
            logger.info("Fetched %d JWKS keys", len(_jwks_cache))
            return _jwks_cache
    except httpx.HTTPError:
        logger.exception("Failed to fetch JWKS from %s", jwks_url)
        return {}


def _strip_scheme(token: str) -> str:
    scheme, _, credentials = token.strip().partition(" ")
    if credentials and scheme.lower() == "bearer":
        return credentials.strip()
    return token.strip()


class JWTAuthProvider:
    """JWT-based token verifier."""

    def __init__(
        self,
        secret_key: str = settings.jwt_secret_key,
        algorithm: str = settings.jwt_algorithm,
        expire_minutes: int = settings.jwt_expire_minutes,
        jwks_url: str = settings.jwks_url,
    ) -> None:
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes
        self._jwks_url = jwks_url

    async def verify_token(self, token: str) -> TokenUser:
        """
        Verify a token and return the decoded identity.

        Raises:
            AuthenticationError: missing, invalid or expired token
        """
        if not token or not _strip_scheme(token):
            raise AuthenticationError(
                message="Authorization header required",
                error_code=ErrorCode.UNAUTHORIZED,
            )

        try:
            payload = await self._decode(_strip_scheme(token))
        except ExpiredSignatureError:
            raise AuthenticationError(
                message="Token has expired",
                error_code=ErrorCode.TOKEN_EXPIRED,
            )
        except JWTError:
            payload = None

        user = self._to_user(payload) if payload else None
        if user is None:
            raise AuthenticationError(
                message="Invalid or expired token",
                error_code=ErrorCode.INVALID_TOKEN,
            )
        return user

    async def validate_token(self, token: str) -> Optional[TokenUser]:
        """
        Validate a JWT token and extract user info.

        Returns:
            TokenUser if valid, None if invalid or expired
        """
        try:
            return await self.verify_token(token)
        except AuthenticationError:
            return None

    async def _decode(self, token: str) -> Optional[dict]:
        header = jwt.get_unverified_header(token)
        alg = header.get("alg", self._algorithm)

        if alg in ASYMMETRIC_ALGORITHMS:
            return await self._decode_with_jwks(token, header, alg)

        return jwt.decode(
            token,
            self._secret_key,
            algorithms=[self._algorithm],
            options={"verify_aud": False},
        )

    async def _decode_with_jwks(
        self, token: str, header: dict, alg: str
    ) -> Optional[dict]:
        """Validate an asymmetrically signed JWT using JWKS public keys."""
        kid = header.get("kid")
        if not kid:
            return None

        jwks_keys = await _get_jwks_keys(self._jwks_url)
        key_data = jwks_keys.get(kid)
        if not key_data:
            # Key not found, refetch once in case the provider rotated keys
            global _jwks_cache
            _jwks_cache = None
            jwks_keys = await _get_jwks_keys(self._jwks_url)
            key_data = jwks_keys.get(kid)
            if not key_data:
                logger.warning("JWKS key not found for kid=%s", kid)
                return None

        return jwt.decode(
            token,
            key_data,
            algorithms=[alg],
            options={"verify_aud": False},
        )

    @staticmethod
    def _to_user(payload: dict) -> Optional[TokenUser]:
        user_id = payload.get("sub") or payload.get("uid")
        email = payload.get("email")

        if not user_id or not email:
            return None

        return TokenUser(
            id=str(user_id),
            email=email,
            display_name=payload.get("name"),
        )

    def create_token(self, user: TokenUser) -> str:
        """
        Create an HS256 JWT for a user (local issuer and tests).

        Args:
            user: The user to create a token for

        Returns:
            The generated JWT string
        """
        expire = datetime.utcnow() + timedelta(minutes=self._expire_minutes)

        payload: dict = {
            "sub": user.id,
            "email": user.email,
            "name": user.display_name,
            "exp": expire,
        }

        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
