"""
User models for board accounts.

Users are created on sign-in and keyed by email. Profile fields sent by the
client (display name, photo URL, ...) are stored unchanged; the role is
only ever set by admin promotion.
"""

from pydantic import BaseModel, ConfigDict, Field

ADMIN_ROLE = "admin"

# Never writable through the user routes
PROTECTED_USER_FIELDS = frozenset({"_id", "role"})


def strip_protected_fields(user: dict) -> dict:
    """Drop fields a client may not set on its own user document."""
    return {
        key: value for key, value in user.items() if key not in PROTECTED_USER_FIELDS
    }


class UserDocument(BaseModel):
    """Request body for storing or upserting a user."""

    model_config = ConfigDict(extra="allow")

    email: str = Field(..., description="Email address (unique key)")

    def to_document(self) -> dict:
        """Document to write, without role or _id."""
        return strip_protected_fields(self.model_dump(exclude_unset=True))


class AdminPromotion(BaseModel):
    """Request body for promoting an existing user to admin."""

    email: str = Field(..., description="Email of the user to promote")


class AdminStatus(BaseModel):
    """Response for the admin lookup by email."""

    admin: bool = Field(..., description="Whether the user has the admin role")
