"""
Write acknowledgements returned by mutation endpoints.

Field names follow the MongoDB Node driver's result objects, which is what
board clients already consume.
"""

from typing import Any

from pydantic import BaseModel, Field
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


def _stringify_id(value: Any) -> str | None:
    return None if value is None else str(value)


class InsertAck(BaseModel):
    """Acknowledgement of a single-document insert."""

    acknowledged: bool = Field(..., description="Write acknowledged by the server")
    insertedId: str = Field(..., description="Identifier of the new document")

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertAck":
        return cls(
            acknowledged=result.acknowledged,
            insertedId=str(result.inserted_id),
        )


class UpdateAck(BaseModel):
    """Acknowledgement of a single-document update or upsert."""

    acknowledged: bool = Field(..., description="Write acknowledged by the server")
    matchedCount: int = Field(..., description="Documents matched by the filter")
    modifiedCount: int = Field(..., description="Documents actually changed")
    upsertedCount: int = Field(0, description="Documents inserted by upsert")
    upsertedId: str | None = Field(None, description="Identifier of upserted document")

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateAck":
        return cls(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedCount=0 if result.upserted_id is None else 1,
            upsertedId=_stringify_id(result.upserted_id),
        )


class DeleteAck(BaseModel):
    """Acknowledgement of a delete."""

    acknowledged: bool = Field(..., description="Write acknowledged by the server")
    deletedCount: int = Field(..., description="Documents removed")

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteAck":
        return cls(acknowledged=result.acknowledged, deletedCount=result.deleted_count)
