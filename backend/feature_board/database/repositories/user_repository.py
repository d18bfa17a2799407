"""
User repository for board accounts.
Handles CRUD operations for the users collection.
"""

from typing import Any

import structlog
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.errors import DuplicateKeyError
from pymongo.results import InsertOneResult, UpdateResult

from ...core.exceptions import ConflictError
from ...models.user import ADMIN_ROLE, strip_protected_fields

logger = structlog.get_logger()


class UserRepository:
    """Repository for user data access operations."""

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize user repository.

        Args:
            collection: MongoDB collection for users
        """
        self.collection = collection

    async def ensure_indexes(self) -> None:
        """
        Create database indexes.

        Indexes:
        - email (unique) - users are keyed by email for sign-in upserts
        """
        await self.collection.create_index("email", unique=True)
        logger.info("User indexes created")

    async def create(self, user: dict[str, Any]) -> InsertOneResult:
        """
        Insert a new user document.

        Raises:
            ConflictError: If a user with this email already exists
        """
        try:
            result = await self.collection.insert_one(strip_protected_fields(user))
        except DuplicateKeyError as e:
            logger.warning("User already exists", email=user.get("email"))
            raise ConflictError(
                "A user with this email already exists", email=user.get("email")
            ) from e

        logger.info(
            "User created",
            user_id=str(result.inserted_id),
            email=user.get("email"),
        )
        return result

    async def upsert_by_email(self, user: dict[str, Any]) -> UpdateResult:
        """
        Insert or update a user keyed by email (sign-in path).

        role and _id are never written here; see promote_to_admin.

        Args:
            user: User fields; must contain email
        """
        fields = strip_protected_fields(user)
        result = await self.collection.update_one(
            {"email": fields["email"]}, {"$set": fields}, upsert=True
        )
        logger.info(
            "User upserted",
            email=user["email"],
            inserted=result.upserted_id is not None,
        )
        return result

    async def get_by_email(self, email: str) -> dict[str, Any] | None:
        """
        Get user by email.

        Returns:
            Raw user document if found, None otherwise
        """
        return await self.collection.find_one({"email": email})

    async def is_admin(self, email: str) -> bool:
        """Check whether the user with this email has the admin role."""
        user = await self.get_by_email(email)
        return user is not None and user.get("role") == ADMIN_ROLE

    async def promote_to_admin(self, email: str) -> UpdateResult:
        """Set role to admin on an existing user."""
        result = await self.collection.update_one(
            {"email": email}, {"$set": {"role": ADMIN_ROLE}}
        )
        logger.info(
            "User promoted to admin",
            email=email,
            matched=result.matched_count,
        )
        return result
