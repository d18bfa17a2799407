"""
Unit tests for shared serialization and identifier helpers.
"""

from datetime import datetime, timezone

import pytest
from bson import Binary, ObjectId

from feature_board.core.exceptions import ValidationError
from feature_board.database.object_ids import id_variants, parse_object_id
from feature_board.shared.serializers import (
    serialize_document,
    serialize_documents,
    serialize_value,
)

OID = "64b7f0c2a1b2c3d4e5f60718"


class TestSerializeValue:
    """Test BSON to JSON conversion"""

    def test_object_id(self):
        assert serialize_value(ObjectId(OID)) == OID

    def test_datetime(self):
        value = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

        assert serialize_value(value) == "2024-01-02T03:04:05+00:00"

    def test_binary_is_base64(self):
        """Stored logo bytes come back as base64 text"""
        assert serialize_value(Binary(b"\x89PNG")) == "iVBORw=="
        assert serialize_value(b"\x89PNG") == "iVBORw=="

    def test_nested_containers(self):
        document = {
            "_id": ObjectId(OID),
            "comments": [ObjectId(OID), "plain"],
            "meta": {"owner": ObjectId(OID)},
        }

        assert serialize_value(document) == {
            "_id": OID,
            "comments": [OID, "plain"],
            "meta": {"owner": OID},
        }

    def test_scalars_unchanged(self):
        assert serialize_value(5) == 5
        assert serialize_value("text") == "text"
        assert serialize_value(None) is None


class TestSerializeDocument:
    """Test document helpers"""

    def test_none_passes_through(self):
        assert serialize_document(None) is None

    def test_keeps_underscore_id(self):
        assert serialize_document({"_id": ObjectId(OID)}) == {"_id": OID}

    def test_documents(self):
        assert serialize_documents([{"_id": ObjectId(OID)}, {"x": 1}]) == [
            {"_id": OID},
            {"x": 1},
        ]


class TestObjectIds:
    """Test identifier parsing"""

    def test_parse_valid(self):
        assert parse_object_id(OID) == ObjectId(OID)

    @pytest.mark.parametrize("value", ["", "123", "zz" * 12])
    def test_parse_invalid(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_object_id(value, "request_id")

        assert exc_info.value.status_code == 400
        assert exc_info.value.context["field"] == "request_id"

    def test_variants_of_valid_id(self):
        assert id_variants(OID) == [OID, ObjectId(OID)]

    def test_variants_of_plain_string(self):
        assert id_variants("c1") == ["c1"]
