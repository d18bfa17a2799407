"""
MongoDB connection manager.

One client is opened in the application lifespan and shared by every
request handler until shutdown. The database is the path component of the
connection URL (``mongodb://host:27017/featureRequestBoard?retryWrites=true``).
"""

import structlog
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)
from pymongo.errors import PyMongoError

from ..core.config import parse_database_name
from ..core.exceptions import DatabaseError

logger = structlog.get_logger()

# Collection names
USERS = "users"
FEATURE_REQUESTS = "featureRequests"
COMMENTS = "comments"
BOARD = "board"


class MongoDB:
    """Holds the shared motor client and the board database."""

    def __init__(self) -> None:
        self.client: AsyncIOMotorClient | None = None
        self.database: AsyncIOMotorDatabase | None = None

    async def connect(self, mongodb_url: str) -> None:
        """
        Open the client and verify the server answers.

        Raises:
            ConfigurationError: If the URL names no database
            DatabaseError: If the server cannot be reached
        """
        database_name = parse_database_name(mongodb_url)

        client = AsyncIOMotorClient(mongodb_url)
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            logger.error(
                "MongoDB unreachable",
                database=database_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise DatabaseError(
                f"MongoDB connection failed: {e}",
                original_error=type(e).__name__,
            ) from e

        self.client = client
        self.database = client[database_name]
        logger.info("MongoDB connection established", database=database_name)

    async def disconnect(self) -> None:
        """Close the client; safe to call when never connected."""
        if self.client is None:
            return
        self.client.close()
        self.client = None
        self.database = None
        logger.info("MongoDB connection closed")

    async def health_check(self) -> dict[str, bool | str]:
        """Ping the server and report its version."""
        if self.client is None or self.database is None:
            return {"connected": False, "error": "No client connection"}

        try:
            await self.client.admin.command("ping")
            server_info = await self.client.server_info()
        except PyMongoError as e:
            logger.error("MongoDB health check failed", error=str(e))
            return {"connected": False, "error": str(e)}

        return {
            "connected": True,
            "version": server_info.get("version", "unknown"),
            "database": self.database.name,
        }

    def get_collection(self, collection_name: str) -> AsyncIOMotorCollection:
        """
        Get a board collection.

        Raises:
            DatabaseError: If called before connect()
        """
        if self.database is None:
            raise DatabaseError(
                "Cannot get collection: database connection not established",
                collection_name=collection_name,
            )
        return self.database[collection_name]
