"""
Comment repository for feature request comments.
Handles CRUD operations for the comments collection.
"""

from typing import Any

import structlog
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.results import DeleteResult, InsertOneResult

from feature_board.core.utils.date_utils import utcnow

logger = structlog.get_logger()


class CommentRepository:
    """Repository for comment data access operations."""

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize comment repository.

        Args:
            collection: MongoDB collection for comments
        """
        self.collection = collection

    async def ensure_indexes(self) -> None:
        """
        Create database indexes for optimal query performance.

        Indexes:
        - request_id - for the cascade delete of a request's comments
        """
        await self.collection.create_index("request_id")
        logger.info("Comment indexes created")

    async def create(self, comment: dict[str, Any]) -> InsertOneResult:
        """
        Insert a comment.

        The owning request's comment list is updated separately by the client.

        Args:
            comment: Comment fields as submitted (request_id, text, author fields)

        Returns:
            Driver insert result
        """
        document = {**comment, "createdAt": utcnow()}
        result = await self.collection.insert_one(document)

        logger.info(
            "Comment created",
            comment_id=str(result.inserted_id),
            request_id=comment.get("request_id"),
        )
        return result

    async def list_by_ids(self, comment_ids: list[ObjectId]) -> list[dict[str, Any]]:
        """
        Fetch the comments whose identifiers are in the given list.

        Args:
            comment_ids: Comment identifiers

        Returns:
            Raw comment documents (order not guaranteed)
        """
        if not comment_ids:
            return []

        cursor = self.collection.find({"_id": {"$in": comment_ids}})
        return [comment async for comment in cursor]

    async def delete(self, comment_id: ObjectId) -> DeleteResult:
        """Delete a single comment."""
        result = await self.collection.delete_one({"_id": comment_id})

        if result.deleted_count == 0:
            logger.warning("Failed to delete comment", comment_id=str(comment_id))
        else:
            logger.info("Comment deleted", comment_id=str(comment_id))
        return result

    async def delete_by_request(
        self, request_id: str, session: Any = None
    ) -> DeleteResult:
        """
        Delete every comment owned by a feature request.

        Matches request_id exactly, so requests whose ids share a substring
        keep their comments.

        Args:
            request_id: Owning feature request identifier (string form)
            session: Optional MongoDB session for transactions
        """
        result = await self.collection.delete_many(
            {"request_id": request_id}, session=session
        )
        logger.info(
            "Comments deleted for request",
            request_id=request_id,
            deleted=result.deleted_count,
        )
        return result
