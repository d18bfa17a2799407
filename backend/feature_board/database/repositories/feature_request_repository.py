"""
Feature request repository.
Handles CRUD operations for the featureRequests collection.
"""

from typing import Any

import structlog
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from feature_board.core.utils.date_utils import utcnow

from ..object_ids import id_variants

logger = structlog.get_logger()


class FeatureRequestRepository:
    """Repository for feature request data access operations."""

    def __init__(self, collection: AsyncIOMotorCollection):
        """
        Initialize feature request repository.

        Args:
            collection: MongoDB collection for feature requests
        """
        self.collection = collection

    async def ensure_indexes(self) -> None:
        """
        Create database indexes.

        Listing sorts on _id (already indexed); status supports admin triage views.
        """
        await self.collection.create_index("status")
        logger.info("Feature request indexes created")

    async def count(self) -> int:
        """Count all feature requests, regardless of pagination."""
        return await self.collection.count_documents({})

    async def list_newest_first(
        self, skip: int | None = None, limit: int | None = None
    ) -> list[dict[str, Any]]:
        """
        List feature requests, newest first.

        ObjectIds embed their creation time, so sorting on _id descending
        orders by recency.

        Args:
            skip: Number of documents to skip (None for no pagination)
            limit: Maximum number of documents (None for no pagination)

        Returns:
            Raw feature request documents
        """
        cursor = self.collection.find({}).sort("_id", -1)
        if skip is not None and limit is not None:
            cursor = cursor.skip(skip).limit(limit)

        return [request async for request in cursor]

    async def get_by_id(
        self, request_id: ObjectId, projection: dict[str, int] | None = None
    ) -> dict[str, Any] | None:
        """
        Get feature request by ID.

        Args:
            request_id: Feature request identifier
            projection: Optional field projection

        Returns:
            Raw document if found, None otherwise
        """
        return await self.collection.find_one({"_id": request_id}, projection)

    async def create(self, request: dict[str, Any]) -> InsertOneResult:
        """
        Insert a new feature request.

        Args:
            request: Document fields as submitted

        Returns:
            Driver insert result
        """
        document = {**request, "createdAt": utcnow()}
        result = await self.collection.insert_one(document)

        logger.info(
            "Feature request created",
            request_id=str(result.inserted_id),
            title=request.get("title"),
        )
        return result

    async def set_votes(self, request_id: ObjectId, votes: int) -> UpdateResult:
        """
        Replace the vote count with an absolute value.

        Last write wins; concurrent voters may overwrite each other.
        """
        result = await self.collection.update_one(
            {"_id": request_id}, {"$set": {"votes": votes}}
        )
        logger.info(
            "Vote count replaced",
            request_id=str(request_id),
            votes=votes,
            matched=result.matched_count,
        )
        return result

    async def attach_comment(
        self, request_id: ObjectId, comment_id: str
    ) -> UpdateResult:
        """Append a comment id to the request's list (duplicates allowed)."""
        result = await self.collection.update_one(
            {"_id": request_id}, {"$push": {"comments": comment_id}}
        )
        logger.info(
            "Comment attached",
            request_id=str(request_id),
            comment_id=comment_id,
            matched=result.matched_count,
        )
        return result

    async def detach_comment(
        self, request_id: ObjectId, comment_id: str
    ) -> UpdateResult:
        """Remove every occurrence of a comment id, stored as string or ObjectId."""
        result = await self.collection.update_one(
            {"_id": request_id},
            {"$pull": {"comments": {"$in": id_variants(comment_id)}}},
        )
        logger.info(
            "Comment detached",
            request_id=str(request_id),
            comment_id=comment_id,
            matched=result.matched_count,
            modified=result.modified_count,
        )
        return result

    async def set_status(self, request_id: ObjectId, status: str) -> UpdateResult:
        """Set the triage status of a request."""
        result = await self.collection.update_one(
            {"_id": request_id}, {"$set": {"status": status}}
        )
        logger.info(
            "Status updated",
            request_id=str(request_id),
            status=status,
            matched=result.matched_count,
        )
        return result

    async def delete(self, request_id: ObjectId, session: Any = None) -> DeleteResult:
        """
        Delete a feature request.

        Args:
            request_id: Feature request identifier
            session: Optional MongoDB session for transactions
        """
        result = await self.collection.delete_one({"_id": request_id}, session=session)
        logger.info(
            "Feature request delete attempted",
            request_id=str(request_id),
            deleted=result.deleted_count,
        )
        return result
