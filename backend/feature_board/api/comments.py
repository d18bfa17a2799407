"""
Comment endpoints.
"""

import structlog
from fastapi import APIRouter, Depends, status

from ..core.exceptions import NotFoundError
from ..database.object_ids import parse_object_id
from ..database.repositories.comment_repository import CommentRepository
from ..models.comment import CommentCreate
from ..models.results import DeleteAck, InsertAck
from ..services.feature_request_service import FeatureRequestService
from ..shared.serializers import serialize_documents
from .dependencies.board_deps import (
    get_comment_repository,
    get_feature_request_service,
)

logger = structlog.get_logger()

router = APIRouter(tags=["comments"])


@router.get("/comments/{request_id}")
async def get_comments(
    request_id: str,
    service: FeatureRequestService = Depends(get_feature_request_service),
) -> list[dict]:
    """Get the comments referenced by a feature request (order not guaranteed)."""
    comments = await service.get_comments(request_id)

    logger.info("Comments retrieved", request_id=request_id, count=len(comments))

    return serialize_documents(comments)


@router.post("/addcomment", status_code=status.HTTP_201_CREATED, response_model=InsertAck)
async def add_comment(
    comment: CommentCreate,
    repo: CommentRepository = Depends(get_comment_repository),
) -> InsertAck:
    """
    Store a comment.

    The client attaches the returned `insertedId` to the request through
    `PUT /updatecomments`.
    """
    result = await repo.create(comment.model_dump())
    return InsertAck.from_result(result)


@router.delete("/comment/{comment_id}", response_model=DeleteAck)
async def delete_comment(
    comment_id: str,
    repo: CommentRepository = Depends(get_comment_repository),
) -> DeleteAck:
    """Delete one comment (404 if absent)."""
    result = await repo.delete(parse_object_id(comment_id, "comment_id"))
    if result.deleted_count == 0:
        raise NotFoundError(f"Comment {comment_id} not found", comment_id=comment_id)
    return DeleteAck.from_result(result)
