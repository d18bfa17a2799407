"""
Shared authorization dependencies for board endpoints.

Identity is attached to every request by IdentityMiddleware; these
dependencies turn it into the two capability levels the API uses:
authenticated (a verified email) and admin (a verified email whose user
document has role "admin").
"""

import structlog
from fastapi import Depends, Request

from ...core.exceptions import AuthorizationError
from ...database.repositories.user_repository import UserRepository
from .board_deps import get_user_repository

logger = structlog.get_logger()

NO_ACCESS_MESSAGE = "You do not have the access to request"


def get_verified_email(request: Request) -> str | None:
    """Return the email verified by IdentityMiddleware, if any."""
    return getattr(request.state, "verified_email", None)


async def require_authenticated(
    email: str | None = Depends(get_verified_email),
) -> str:
    """
    Require a verified identity.

    Returns:
        The caller's verified email

    Raises:
        AuthorizationError: If no verified identity is attached (403)
    """
    if not email:
        logger.warning("Request without verified identity rejected")
        raise AuthorizationError(NO_ACCESS_MESSAGE)
    return email


async def require_admin(
    email: str = Depends(require_authenticated),
    user_repo: UserRepository = Depends(get_user_repository),
) -> str:
    """
    Require a verified identity belonging to an admin user.

    Usage:
        @router.put("/admin/endpoint")
        async def admin_endpoint(
            _: str = Depends(require_admin),  # Admin check
        ):
            # Only admins can reach here
            pass

    Returns:
        The admin's verified email

    Raises:
        AuthorizationError: If the caller is unknown or not an admin (403)
    """
    if not await user_repo.is_admin(email):
        logger.warning("Non-admin user attempted admin access", email=email)
        raise AuthorizationError("Admin privileges required", email=email)

    logger.info("Admin access granted", email=email)
    return email
