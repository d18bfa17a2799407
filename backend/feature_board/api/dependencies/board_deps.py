"""
Dependency injection for board endpoints.
"""

from fastapi import Depends, Request

from ...core.config import Settings, get_settings
from ...database.mongodb import BOARD, COMMENTS, FEATURE_REQUESTS, USERS, MongoDB
from ...database.repositories.board_repository import BoardRepository
from ...database.repositories.comment_repository import CommentRepository
from ...database.repositories.feature_request_repository import (
    FeatureRequestRepository,
)
from ...database.repositories.user_repository import UserRepository
from ...services.feature_request_service import FeatureRequestService


def get_mongodb(request: Request) -> MongoDB:
    """Get MongoDB instance from app state."""
    mongodb: MongoDB = request.app.state.mongodb
    return mongodb


def get_feature_request_repository(
    mongodb: MongoDB = Depends(get_mongodb),
) -> FeatureRequestRepository:
    """Get feature request repository instance."""
    return FeatureRequestRepository(mongodb.get_collection(FEATURE_REQUESTS))


def get_comment_repository(
    mongodb: MongoDB = Depends(get_mongodb),
) -> CommentRepository:
    """Get comment repository instance."""
    return CommentRepository(mongodb.get_collection(COMMENTS))


def get_user_repository(mongodb: MongoDB = Depends(get_mongodb)) -> UserRepository:
    """Get user repository instance."""
    return UserRepository(mongodb.get_collection(USERS))


def get_board_repository(
    mongodb: MongoDB = Depends(get_mongodb),
    settings: Settings = Depends(get_settings),
) -> BoardRepository:
    """Get board repository instance bound to the configured board id."""
    return BoardRepository(mongodb.get_collection(BOARD), settings.board_id)


def get_feature_request_service(
    request_repo: FeatureRequestRepository = Depends(get_feature_request_repository),
    comment_repo: CommentRepository = Depends(get_comment_repository),
    mongodb: MongoDB = Depends(get_mongodb),
) -> FeatureRequestService:
    """Get feature request service instance."""
    return FeatureRequestService(request_repo, comment_repo, mongodb)
