"""
Pydantic models for request bodies, responses and write acknowledgements.
"""

from .board import BoardDetailUpdate
from .comment import CommentCreate
from .feature_request import (
    CommentListUpdate,
    FeatureRequestCreate,
    FeatureRequestPage,
    StatusUpdate,
    VoteUpdate,
)
from .results import DeleteAck, InsertAck, UpdateAck
from .user import AdminPromotion, AdminStatus, UserDocument

__all__ = [
    "AdminPromotion",
    "AdminStatus",
    "BoardDetailUpdate",
    "CommentCreate",
    "CommentListUpdate",
    "DeleteAck",
    "FeatureRequestCreate",
    "FeatureRequestPage",
    "InsertAck",
    "StatusUpdate",
    "UpdateAck",
    "UserDocument",
    "VoteUpdate",
]
