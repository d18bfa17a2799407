"""
Shared utilities module.

Provides common utility functions used across the backend codebase.
"""

from .serializers import (
    serialize_document,
    serialize_documents,
    serialize_value,
)

__all__ = [
    "serialize_document",
    "serialize_documents",
    "serialize_value",
]
