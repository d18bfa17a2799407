"""Comment models."""

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    """Request body for posting a comment; author fields are kept as sent."""

    model_config = ConfigDict(extra="allow")

    request_id: str = Field(..., description="Identifier of the owning request")
    text: str = Field("", description="Comment body")
