"""
Shared document serialization utilities.

Converts raw MongoDB documents into JSON-safe structures for responses:
- ObjectId -> hex string
- datetime -> ISO 8601 string
- binary data (bytes, bson.Binary) -> base64 text
"""

import base64
from datetime import datetime
from typing import Any

from bson import ObjectId


def serialize_value(value: Any) -> Any:
    """
    Convert a single BSON value into a JSON-safe value, recursing into containers.

    Args:
        value: Value read from MongoDB

    Returns:
        JSON-serializable equivalent

    Examples:
        >>> serialize_value(ObjectId("64b7f0c2a1b2c3d4e5f60718"))
        '64b7f0c2a1b2c3d4e5f60718'
        >>> serialize_value(b"\\x89PNG")
        'iVBORw=='
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    # bson.Binary subclasses bytes
    if isinstance(value, bytes | bytearray):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, dict):
        return {key: serialize_value(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [serialize_value(item) for item in value]
    return value


def serialize_document(document: dict[str, Any] | None) -> dict[str, Any] | None:
    """Serialize a MongoDB document, keeping the `_id` key clients expect."""
    if document is None:
        return None
    return serialize_value(document)


def serialize_documents(documents: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """Serialize a list of MongoDB documents."""
    return [serialize_value(document) for document in documents]
