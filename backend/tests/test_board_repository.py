"""
Unit tests for BoardRepository (board branding singleton).
"""

from unittest.mock import AsyncMock, Mock

import pytest
from bson import Binary
from pymongo.results import UpdateResult

from feature_board.database.repositories.board_repository import BoardRepository


@pytest.fixture
def mock_collection():
    """Mock MongoDB collection"""
    collection = Mock()
    collection.find_one = AsyncMock()
    collection.update_one = AsyncMock(
        return_value=UpdateResult({"n": 1, "nModified": 1}, True)
    )
    return collection


@pytest.fixture
def repository(mock_collection):
    return BoardRepository(mock_collection, board_id="board")


class TestBoardRepository:
    """Test board singleton access"""

    @pytest.mark.asyncio
    async def test_get_uses_fixed_id(self, repository, mock_collection):
        """The board is read by its configured id, not 'first found'"""
        mock_collection.find_one.return_value = {"_id": "board", "title": "Ideas"}

        result = await repository.get()

        assert result["title"] == "Ideas"
        mock_collection.find_one.assert_called_once_with({"_id": "board"})

    @pytest.mark.asyncio
    async def test_set_fields_upserts(self, repository, mock_collection):
        """Only the given fields are set; the board is created if missing"""
        await repository.set_fields({"desc": "new"})

        mock_collection.update_one.assert_called_once_with(
            {"_id": "board"}, {"$set": {"desc": "new"}}, upsert=True
        )

    @pytest.mark.asyncio
    async def test_set_logo_stores_binary(self, repository, mock_collection):
        """Logo bytes are stored unchanged as BSON binary"""
        await repository.set_logo(b"\x89PNG\r\n")

        update = mock_collection.update_one.call_args[0][1]
        stored = update["$set"]["logo"]
        assert isinstance(stored, Binary)
        assert bytes(stored) == b"\x89PNG\r\n"
