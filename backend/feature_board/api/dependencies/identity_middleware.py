"""
Identity middleware that attaches the caller's verified email to each request.

Fail-open: a missing, malformed, or unverifiable token never blocks the
request. Handlers that need an identity check request.state.verified_email
through the authorization dependencies.
"""

from collections.abc import Awaitable, Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from ...services.identity_service import IdentityVerifier

logger = structlog.get_logger()

BEARER_PREFIX = "Bearer "


def extract_bearer_token(authorization: str | None) -> str | None:
    """Return the token part of a "Bearer <token>" header, if present."""
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        return None
    token = authorization[len(BEARER_PREFIX) :].strip()
    return token or None


class IdentityMiddleware(BaseHTTPMiddleware):
    """Sets request.state.verified_email to the verified email or None."""

    def __init__(self, app: ASGIApp, verifier: IdentityVerifier) -> None:
        """
        Initialize identity middleware.

        Args:
            app: The FastAPI application
            verifier: Token verifier backed by the identity provider
        """
        super().__init__(app)
        self.verifier = verifier

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Verify the bearer token (if any) and continue the pipeline."""
        request.state.verified_email = None

        token = extract_bearer_token(request.headers.get("authorization"))
        if token:
            request.state.verified_email = await self.verifier.verify(token)
            if request.state.verified_email is None:
                logger.debug("Proceeding without identity", path=request.url.path)

        return await call_next(request)
