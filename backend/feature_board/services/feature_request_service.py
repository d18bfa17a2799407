"""
Feature request service for business logic coordination.

Orchestrates the feature request and comment repositories for the operations
that touch more than one document: listing with pagination, resolving a
request's comment references, and the cascade delete.
"""

from typing import Any

import structlog
from bson import ObjectId
from pymongo.errors import OperationFailure
from pymongo.results import DeleteResult, UpdateResult

from ..core.exceptions import NotFoundError, ValidationError
from ..database.mongodb import MongoDB
from ..database.object_ids import parse_object_id
from ..database.repositories.comment_repository import CommentRepository
from ..database.repositories.feature_request_repository import (
    FeatureRequestRepository,
)
from ..models.feature_request import CommentListUpdate

logger = structlog.get_logger()

# Keeps skip = size * (page - 1) well inside the int64 range BSON accepts
MAX_PAGE = 1_000_000
MAX_PAGE_SIZE = 1000


class FeatureRequestService:
    """Service for feature request business logic."""

    def __init__(
        self,
        request_repo: FeatureRequestRepository,
        comment_repo: CommentRepository,
        mongodb: MongoDB,
    ):
        """
        Initialize feature request service.

        Args:
            request_repo: Repository for feature requests
            comment_repo: Repository for comments
            mongodb: MongoDB instance for transactions
        """
        self.request_repo = request_repo
        self.comment_repo = comment_repo
        self.mongodb = mongodb

    async def list_requests(
        self, page: int | None = None, size: int | None = None
    ) -> tuple[int, list[dict[str, Any]]]:
        """
        List feature requests newest first, paginated when page and size are given.

        Args:
            page: 1-based page number
            size: Page size

        Returns:
            Tuple of (total request count, requests on the page)

        Raises:
            ValidationError: If page or size is below 1 or above its cap
        """
        skip = limit = None
        if page is not None and size is not None:
            if not 1 <= page <= MAX_PAGE or not 1 <= size <= MAX_PAGE_SIZE:
                raise ValidationError(
                    f"page must be between 1 and {MAX_PAGE}, "
                    f"size between 1 and {MAX_PAGE_SIZE}",
                    page=page,
                    size=size,
                )
            skip = size * (page - 1)
            limit = size

        count = await self.request_repo.count()
        requests = await self.request_repo.list_newest_first(skip=skip, limit=limit)
        return count, requests

    async def get_request(self, request_id: str) -> dict[str, Any]:
        """
        Get a single feature request.

        Raises:
            ValidationError: If request_id is not a valid identifier
            NotFoundError: If no request has this identifier
        """
        request = await self.request_repo.get_by_id(
            parse_object_id(request_id, "request_id")
        )
        if request is None:
            raise NotFoundError(
                f"Feature request {request_id} not found", request_id=request_id
            )
        return request

    async def get_comments(self, request_id: str) -> list[dict[str, Any]]:
        """
        Get the comments referenced by a feature request's comment list.

        References that are not valid identifiers cannot match any comment
        and are skipped.

        Raises:
            NotFoundError: If the feature request does not exist
        """
        request = await self.request_repo.get_by_id(
            parse_object_id(request_id, "request_id"), {"comments": 1}
        )
        if request is None:
            raise NotFoundError(
                f"Feature request {request_id} not found", request_id=request_id
            )

        comment_ids = []
        for reference in request.get("comments") or []:
            if isinstance(reference, ObjectId):
                comment_ids.append(reference)
            elif ObjectId.is_valid(reference):
                comment_ids.append(ObjectId(reference))
            else:
                logger.warning(
                    "Skipping malformed comment reference",
                    request_id=request_id,
                    reference=str(reference),
                )

        return await self.comment_repo.list_by_ids(comment_ids)

    async def set_votes(self, request_id: str, votes: int) -> UpdateResult:
        """
        Replace a request's vote count.

        Raises:
            NotFoundError: If the feature request does not exist
        """
        result = await self.request_repo.set_votes(
            parse_object_id(request_id, "request_id"), votes
        )
        self._ensure_matched(result, request_id)
        return result

    async def update_comment_list(self, update: CommentListUpdate) -> UpdateResult:
        """
        Attach (nonzero action) or detach (zero action) a comment id.

        Raises:
            NotFoundError: If the feature request does not exist
        """
        object_id = parse_object_id(update.request_id, "request_id")

        if update.is_add:
            result = await self.request_repo.attach_comment(
                object_id, update.comment_id
            )
        else:
            result = await self.request_repo.detach_comment(
                object_id, update.comment_id
            )

        self._ensure_matched(result, update.request_id)
        return result

    async def set_status(self, request_id: str, status: str) -> UpdateResult:
        """
        Set a request's triage status.

        Raises:
            NotFoundError: If the feature request does not exist
        """
        result = await self.request_repo.set_status(
            parse_object_id(request_id, "request_id"), status
        )
        self._ensure_matched(result, request_id)
        return result

    async def delete_request(self, request_id: str) -> DeleteResult:
        """
        Delete a feature request and every comment it owns.

        Uses a MongoDB transaction if available (replica set),
        otherwise falls back to sequential operations.

        Args:
            request_id: Feature request identifier

        Returns:
            Delete result for the owned comments

        Raises:
            NotFoundError: If the feature request does not exist
        """
        object_id = parse_object_id(request_id, "request_id")

        if self.mongodb.client:
            try:
                async with await self.mongodb.client.start_session() as session:
                    async with session.start_transaction():
                        deleted = await self.request_repo.delete(
                            object_id, session=session
                        )
                        if deleted.deleted_count != 1:
                            await session.abort_transaction()
                            raise NotFoundError(
                                f"Feature request {request_id} not found",
                                request_id=request_id,
                            )
                        comments = await self.comment_repo.delete_by_request(
                            request_id, session=session
                        )

                logger.info(
                    "Feature request deleted (transactional)",
                    request_id=request_id,
                    comments_deleted=comments.deleted_count,
                )
                return comments
            except OperationFailure as e:
                # Standalone servers reject transactions; retry sequentially
                error_msg = str(e)
                if (
                    "replica set" not in error_msg.lower()
                    and "transaction" not in error_msg.lower()
                ):
                    raise
                logger.warning(
                    "Transactions not supported - falling back to sequential operations",
                    error=error_msg,
                )

        deleted = await self.request_repo.delete(object_id)
        if deleted.deleted_count != 1:
            raise NotFoundError(
                f"Feature request {request_id} not found", request_id=request_id
            )
        comments = await self.comment_repo.delete_by_request(request_id)

        logger.info(
            "Feature request deleted (non-transactional)",
            request_id=request_id,
            comments_deleted=comments.deleted_count,
        )
        return comments

    @staticmethod
    def _ensure_matched(result: UpdateResult, request_id: str) -> None:
        if result.matched_count == 0:
            raise NotFoundError(
                f"Feature request {request_id} not found", request_id=request_id
            )
