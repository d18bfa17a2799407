"""
Unit tests for request and response models.
"""

import pytest
from bson import ObjectId
from pydantic import ValidationError
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult

from feature_board.models import (
    BoardDetailUpdate,
    CommentListUpdate,
    DeleteAck,
    FeatureRequestCreate,
    InsertAck,
    UpdateAck,
    UserDocument,
)


class TestFeatureRequestCreate:
    """Test feature request submission body"""

    def test_defaults(self):
        request = FeatureRequestCreate(title="Dark mode")

        assert request.model_dump() == {
            "title": "Dark mode",
            "description": "",
            "votes": 0,
            "status": "pending",
            "comments": [],
        }

    def test_extra_fields_kept(self):
        request = FeatureRequestCreate(title="Dark mode", author="dev@example.com")

        assert request.model_dump()["author"] == "dev@example.com"

    def test_title_required(self):
        with pytest.raises(ValidationError):
            FeatureRequestCreate(description="no title")


class TestCommentListUpdate:
    """Test action interpretation"""

    @pytest.mark.parametrize("action,expected", [(1, True), (-1, True), (0, False)])
    def test_is_add(self, action, expected):
        update = CommentListUpdate(comment_id="c", request_id="r", action=action)

        assert update.is_add is expected


class TestBoardDetailUpdate:
    """Test partial board updates"""

    def test_only_sent_fields(self):
        assert BoardDetailUpdate(desc="New").provided_fields() == {"desc": "New"}

    def test_empty_title_is_kept(self):
        """An explicit empty string clears the title"""
        assert BoardDetailUpdate(title="").provided_fields() == {"title": ""}

    def test_both_fields(self):
        update = BoardDetailUpdate(title="Board", desc="Ideas")

        assert update.provided_fields() == {"title": "Board", "desc": "Ideas"}

    def test_nothing_sent(self):
        assert BoardDetailUpdate().provided_fields() == {}


class TestUserDocument:
    """Test user documents"""

    def test_profile_fields_kept(self):
        user = UserDocument(email="dev@example.com", name="Dev")

        assert user.to_document() == {"email": "dev@example.com", "name": "Dev"}

    def test_role_and_id_dropped(self):
        """A client cannot grant itself a role or pick its _id"""
        user = UserDocument(email="dev@example.com", role="admin", _id="forged")

        assert user.to_document() == {"email": "dev@example.com"}


class TestAcks:
    """Test driver result conversion"""

    def test_insert_ack(self):
        oid = ObjectId()

        ack = InsertAck.from_result(InsertOneResult(oid, True))

        assert ack.model_dump() == {"acknowledged": True, "insertedId": str(oid)}

    def test_update_ack(self):
        ack = UpdateAck.from_result(UpdateResult({"n": 1, "nModified": 1}, True))

        assert ack.matchedCount == 1
        assert ack.modifiedCount == 1
        assert ack.upsertedCount == 0
        assert ack.upsertedId is None

    def test_update_ack_upsert(self):
        result = UpdateResult(
            {"n": 1, "nModified": 0, "upserted": "board"}, True
        )

        ack = UpdateAck.from_result(result)

        assert ack.upsertedCount == 1
        assert ack.upsertedId == "board"

    def test_delete_ack(self):
        ack = DeleteAck.from_result(DeleteResult({"n": 3}, True))

        assert ack.model_dump() == {"acknowledged": True, "deletedCount": 3}
