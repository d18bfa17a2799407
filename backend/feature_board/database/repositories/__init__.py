"""
Repository layer for MongoDB data access.
Provides clean abstraction over database operations.
"""

from .board_repository import BoardRepository
from .comment_repository import CommentRepository
from .feature_request_repository import FeatureRequestRepository
from .user_repository import UserRepository

__all__ = [
    "BoardRepository",
    "CommentRepository",
    "FeatureRequestRepository",
    "UserRepository",
]
