"""
Admin endpoints: board branding, admin promotion, triage and deletion.

Every mutation here requires an admin identity; reading the board detail is
public.
"""

import structlog
from fastapi import APIRouter, Depends, File, UploadFile

from ..core.exceptions import NotFoundError, ValidationError
from ..database.repositories.board_repository import BoardRepository
from ..database.repositories.user_repository import UserRepository
from ..models.board import BoardDetailUpdate
from ..models.feature_request import StatusUpdate
from ..models.results import DeleteAck, UpdateAck
from ..models.user import AdminPromotion
from ..services.feature_request_service import FeatureRequestService
from ..shared.serializers import serialize_document
from .dependencies.auth import require_admin
from .dependencies.board_deps import (
    get_board_repository,
    get_feature_request_service,
    get_user_repository,
)

logger = structlog.get_logger()

router = APIRouter(prefix="/admin", tags=["admin"])


def _ensure_board(board_id: str, repo: BoardRepository) -> None:
    if board_id != repo.board_id:
        raise NotFoundError(f"Board {board_id} not found", board_id=board_id)


@router.get("/boarddetail")
async def get_board_detail(
    repo: BoardRepository = Depends(get_board_repository),
) -> dict:
    """Get the board title, description and logo (base64)."""
    board = await repo.get()
    if board is None:
        raise NotFoundError("Board detail has not been set up")
    return serialize_document(board)


@router.put("/addadmin", response_model=UpdateAck)
async def add_admin(
    promotion: AdminPromotion,
    admin_email: str = Depends(require_admin),
    repo: UserRepository = Depends(get_user_repository),
) -> UpdateAck:
    """
    Promote an existing user to admin.

    **Authentication**: Required (Bearer token) + Admin privileges
    """
    result = await repo.promote_to_admin(promotion.email)
    if result.matched_count == 0:
        raise NotFoundError(
            f"User {promotion.email} not found", email=promotion.email
        )

    logger.info("Admin added", email=promotion.email, promoted_by=admin_email)

    return UpdateAck.from_result(result)


@router.put("/boardlogo/{board_id}", response_model=UpdateAck)
async def update_board_logo(
    board_id: str,
    logo: UploadFile = File(...),
    _: str = Depends(require_admin),
    repo: BoardRepository = Depends(get_board_repository),
) -> UpdateAck:
    """
    Replace the board logo with the uploaded image.

    **Request**: multipart/form-data with the image in field `logo`
    """
    _ensure_board(board_id, repo)

    data = await logo.read()
    if not data:
        raise ValidationError("Uploaded logo is empty", filename=logo.filename)

    result = await repo.set_logo(data)
    return UpdateAck.from_result(result)


@router.put("/boarddetail/{board_id}", response_model=UpdateAck)
async def update_board_detail(
    board_id: str,
    update: BoardDetailUpdate,
    _: str = Depends(require_admin),
    repo: BoardRepository = Depends(get_board_repository),
) -> UpdateAck:
    """
    Update the board title and/or description.

    Only the fields present in the body are written; `{"title": ""}` clears
    the title.
    """
    _ensure_board(board_id, repo)

    fields = update.provided_fields()
    if not fields:
        raise ValidationError("Body must contain title or desc")

    result = await repo.set_fields(fields)
    return UpdateAck.from_result(result)


@router.put("/status/{request_id}", response_model=UpdateAck)
async def update_status(
    request_id: str,
    status_update: StatusUpdate,
    _: str = Depends(require_admin),
    service: FeatureRequestService = Depends(get_feature_request_service),
) -> UpdateAck:
    """
    Change the triage status of a feature request.

    **Authentication**: Required (Bearer token) + Admin privileges
    """
    result = await service.set_status(request_id, status_update.status)
    return UpdateAck.from_result(result)


@router.delete("/request/{request_id}", response_model=DeleteAck)
async def delete_request(
    request_id: str,
    _: str = Depends(require_admin),
    service: FeatureRequestService = Depends(get_feature_request_service),
) -> DeleteAck:
    """
    Delete a feature request and its comments.

    **Response**: delete result for the removed comments (404 if the request
    does not exist)
    """
    result = await service.delete_request(request_id)
    return DeleteAck.from_result(result)
