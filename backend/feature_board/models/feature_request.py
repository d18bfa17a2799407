"""
Feature request models.

Feature requests are stored as loose documents: the fields below are the ones
the board relies on, and any extra fields a client submits are kept as-is.
"""

from pydantic import BaseModel, ConfigDict, Field


# ===== Request Models =====


class FeatureRequestCreate(BaseModel):
    """Request body for submitting a feature request."""

    model_config = ConfigDict(extra="allow")

    title: str = Field(..., description="Short title of the request")
    description: str = Field("", description="Detailed description")
    votes: int = Field(0, description="Vote count")
    status: str = Field("pending", description="Free-form triage status")
    comments: list[str] = Field(
        default_factory=list,
        description="Identifiers of comments attached to this request",
    )


class VoteUpdate(BaseModel):
    """Request body for replacing a request's vote count."""

    request_id: str = Field(..., description="Feature request identifier")
    newVotes: int = Field(..., description="New absolute vote count")


class CommentListUpdate(BaseModel):
    """Request body for attaching or detaching a comment id."""

    comment_id: str = Field(..., description="Comment identifier")
    request_id: str = Field(..., description="Feature request identifier")
    action: int = Field(..., description="Nonzero attaches, zero detaches")

    @property
    def is_add(self) -> bool:
        return bool(self.action)


class StatusUpdate(BaseModel):
    """Request body for the admin status change."""

    status: str = Field(..., description="New status, e.g. 'in progress'")


# ===== Response Models =====


class FeatureRequestPage(BaseModel):
    """Listing response: total collection size plus the requested page."""

    count: int = Field(..., description="Total number of feature requests")
    requests: list[dict] = Field(
        ..., description="Requests on this page, newest first"
    )
