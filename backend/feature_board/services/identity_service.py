"""
Identity verification for bearer tokens issued by the external identity provider.

Tokens are JWTs (Firebase ID tokens in production). They are verified either
against a static key from settings or against the provider's published JWKS
document, which is fetched over HTTP and cached. In JWKS mode the audience
(Firebase project id) must be configured; without it every token is refused.
Verification is fail-open for the request: any problem yields None instead
of an exception.
"""

import asyncio
import time
from typing import Any

import httpx
import structlog
from jose import jwt
from jose.exceptions import JOSEError

from ..core.config import Settings, get_settings

logger = structlog.get_logger()


class IdentityVerifier:
    """Verifies bearer tokens and returns the email claim they carry."""

    def __init__(
        self,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize identity verifier.

        Args:
            settings: Application settings (defaults to cached settings)
            client: Optional httpx AsyncClient used to fetch the JWKS document
        """
        self.settings = settings or get_settings()
        self._client = client
        self._owns_client = client is None
        self._jwks: dict[str, Any] | None = None
        self._jwks_fetched_at = 0.0
        self._jwks_lock = asyncio.Lock()

        if not self.is_configured:
            logger.error(
                "IDENTITY_TOKEN_AUDIENCE is not set; bearer tokens will be refused",
                jwks_url=self.settings.identity_jwks_url,
            )

    @property
    def is_configured(self) -> bool:
        """Static keys are project specific; shared JWKS keys need an audience."""
        return (
            self.settings.identity_mode == "static_key"
            or bool(self.settings.identity_token_audience)
        )

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=10.0)
        return self._client

    async def close(self) -> None:
        """Close HTTP client if we own it."""
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    def _jwks_is_fresh(self) -> bool:
        age = time.monotonic() - self._jwks_fetched_at
        return self._jwks is not None and age < self.settings.identity_jwks_ttl_seconds

    async def _get_jwks(self) -> dict[str, Any]:
        """
        Return the provider's key set, refreshing it once the TTL has passed.

        Concurrent callers share a single refresh.

        Raises:
            httpx.HTTPError: If the key set cannot be fetched
            ValueError: If the response is not a JWKS document
        """
        if self._jwks_is_fresh():
            return self._jwks

        async with self._jwks_lock:
            if self._jwks_is_fresh():
                return self._jwks

            client = await self._get_client()
            response = await client.get(self.settings.identity_jwks_url)
            response.raise_for_status()

            jwks = response.json()
            if not isinstance(jwks, dict) or not isinstance(jwks.get("keys"), list):
                raise ValueError("Identity provider returned a malformed key set")

            self._jwks = jwks
            self._jwks_fetched_at = time.monotonic()
            logger.info("Identity provider keys refreshed", key_count=len(jwks["keys"]))
            return jwks

    async def _get_key(self) -> str | dict[str, Any]:
        if self.settings.identity_token_key:
            return self.settings.identity_token_key
        return await self._get_jwks()

    async def verify(self, token: str) -> str | None:
        """
        Verify a bearer token.

        Args:
            token: Raw token taken from the Authorization header

        Returns:
            Verified email address, or None if the token cannot be verified
            or carries no email claim
        """
        if not self.is_configured:
            return None

        audience = self.settings.identity_token_audience or None

        try:
            key = await self._get_key()
            claims = jwt.decode(
                token,
                key,
                algorithms=self.settings.identity_token_algorithms,
                audience=audience,
                issuer=self.settings.identity_issuer,
                options={"verify_aud": audience is not None},
            )
        except JOSEError as e:
            logger.info("Bearer token rejected", error=str(e))
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(
                "Identity provider keys unavailable",
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

        email = claims.get("email")
        if not isinstance(email, str) or not email:
            logger.info("Bearer token has no email claim", subject=claims.get("sub"))
            return None

        return email
