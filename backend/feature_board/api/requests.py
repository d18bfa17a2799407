"""
Feature request endpoints.

Listing, retrieval, submission, vote replacement and comment-list updates.
"""

import structlog
from fastapi import APIRouter, Depends, status

from ..database.repositories.feature_request_repository import (
    FeatureRequestRepository,
)
from ..models.feature_request import (
    CommentListUpdate,
    FeatureRequestCreate,
    FeatureRequestPage,
    VoteUpdate,
)
from ..models.results import InsertAck, UpdateAck
from ..services.feature_request_service import FeatureRequestService
from ..shared.serializers import serialize_document, serialize_documents
from .dependencies.board_deps import (
    get_feature_request_repository,
    get_feature_request_service,
)

logger = structlog.get_logger()

router = APIRouter(tags=["requests"])


@router.get("/requests", response_model=FeatureRequestPage)
async def list_requests(
    page: int | None = None,
    size: int | None = None,
    service: FeatureRequestService = Depends(get_feature_request_service),
) -> FeatureRequestPage:
    """
    List feature requests, newest first.

    **Query Parameters**:
    - `page`: 1-based page number (optional)
    - `size`: Page size (optional)

    Pagination applies only when both are given; otherwise every request
    is returned. `count` is always the size of the whole collection.
    """
    count, requests = await service.list_requests(page=page, size=size)

    logger.info("Feature requests listed", page=page, size=size, count=count)

    return FeatureRequestPage(count=count, requests=serialize_documents(requests))


@router.get("/requests/{request_id}")
async def get_request(
    request_id: str,
    service: FeatureRequestService = Depends(get_feature_request_service),
) -> dict:
    """Get a single feature request (404 if absent)."""
    request = await service.get_request(request_id)
    return serialize_document(request)


@router.post(
    "/featureRequest", status_code=status.HTTP_201_CREATED, response_model=InsertAck
)
async def create_request(
    feature_request: FeatureRequestCreate,
    repo: FeatureRequestRepository = Depends(get_feature_request_repository),
) -> InsertAck:
    """
    Submit a feature request.

    **Request Body**:
    ```json
    {
      "title": "Dark mode",
      "description": "Please add a dark theme",
      "votes": 0,
      "status": "pending",
      "comments": []
    }
    ```
    """
    result = await repo.create(feature_request.model_dump())
    return InsertAck.from_result(result)


@router.put("/updatevotes", response_model=UpdateAck)
async def update_votes(
    vote_update: VoteUpdate,
    service: FeatureRequestService = Depends(get_feature_request_service),
) -> UpdateAck:
    """
    Replace a request's vote count with `newVotes`.

    The client computes the new total; the stored value is overwritten, not
    incremented.
    """
    result = await service.set_votes(vote_update.request_id, vote_update.newVotes)
    return UpdateAck.from_result(result)


@router.put("/updatecomments", response_model=UpdateAck)
async def update_comments(
    update: CommentListUpdate,
    service: FeatureRequestService = Depends(get_feature_request_service),
) -> UpdateAck:
    """
    Attach or detach a comment id on a feature request.

    `action` nonzero appends `comment_id` (no dedup); zero removes every
    occurrence of it.
    """
    result = await service.update_comment_list(update)
    return UpdateAck.from_result(result)
