"""Board branding models."""

from pydantic import BaseModel, Field


class BoardDetailUpdate(BaseModel):
    """
    Request body for the board title/description update.

    Only fields present in the body are written, so an explicit empty string
    clears the field instead of being ignored.
    """

    title: str | None = Field(None, description="Board title")
    desc: str | None = Field(None, description="Board description")

    def provided_fields(self) -> dict[str, str | None]:
        """Return only the fields the client actually sent."""
        return {name: getattr(self, name) for name in self.model_fields_set}
