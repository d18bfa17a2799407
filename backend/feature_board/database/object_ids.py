"""Conversion of path and body identifiers to MongoDB ObjectIds."""

from bson import ObjectId
from bson.errors import InvalidId

from ..core.exceptions import ValidationError


def parse_object_id(value: str, field: str = "_id") -> ObjectId:
    """
    Parse a 24-character hex string into an ObjectId.

    Raises:
        ValidationError: If the value is not a valid ObjectId
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError) as e:
        raise ValidationError(
            f"Invalid identifier for {field}: {value!r}", field=field
        ) from e


def id_variants(value: str) -> list[str | ObjectId]:
    """
    Return every stored form an identifier may take.

    Comment references are stored as strings by clients, but older documents
    may hold ObjectIds; matching on both keeps removals from silently missing.
    """
    variants: list[str | ObjectId] = [value]
    if ObjectId.is_valid(value):
        variants.append(ObjectId(value))
    return variants
