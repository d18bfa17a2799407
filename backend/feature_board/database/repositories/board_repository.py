"""
Board repository for the board branding singleton.

The board is one document stored under a fixed, configured identifier.
"""

from typing import Any

import structlog
from bson import Binary
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo.results import UpdateResult

logger = structlog.get_logger()


class BoardRepository:
    """Repository for the board detail document."""

    def __init__(self, collection: AsyncIOMotorCollection, board_id: str):
        """
        Initialize board repository.

        Args:
            collection: MongoDB collection holding the board document
            board_id: Identifier of the board singleton
        """
        self.collection = collection
        self.board_id = board_id

    async def get(self) -> dict[str, Any] | None:
        """Get the board document, or None if it was never initialized."""
        return await self.collection.find_one({"_id": self.board_id})

    async def set_fields(self, fields: dict[str, Any]) -> UpdateResult:
        """
        Set branding fields (title, desc), creating the board if needed.

        Args:
            fields: Field name to new value
        """
        result = await self.collection.update_one(
            {"_id": self.board_id}, {"$set": fields}, upsert=True
        )
        logger.info("Board detail updated", fields=sorted(fields))
        return result

    async def set_logo(self, logo: bytes) -> UpdateResult:
        """Replace the stored logo image bytes."""
        result = await self.collection.update_one(
            {"_id": self.board_id}, {"$set": {"logo": Binary(logo)}}, upsert=True
        )
        logger.info("Board logo updated", size_bytes=len(logo))
        return result
