"""
Board error hierarchy and its HTTP status mapping.

Handlers and services raise BoardError subclasses; the global handler in
main.py logs them with their context and answers with
``{"detail": message, "error_type": ...}``.

Usage:
    from feature_board.core.exceptions import NotFoundError

    raise NotFoundError("Feature request not found", request_id=request_id)
"""

from typing import Any


class BoardError(Exception):
    """Base error carrying an HTTP status and structured logging context."""

    status_code: int = 500
    error_type: str = "internal_error"

    def __init__(self, message: str, **context: Any):
        """
        Args:
            message: Human-readable description, returned as ``detail``
            **context: Identifiers involved (request_id, email, ...) for the logs
        """
        super().__init__(message)
        self.message = message
        self.context = context

    def to_dict(self) -> dict[str, Any]:
        """Flatten into one mapping for structured logging."""
        return {
            "error_type": self.error_type,
            "message": self.message,
            "status_code": self.status_code,
            **self.context,
        }

    def to_response(self) -> dict[str, str]:
        """Body sent to the client; context stays in the logs."""
        return {"detail": self.message, "error_type": self.error_type}


# ===== Client errors =====


class ValidationError(BoardError):
    """Malformed identifier, empty update body, page or size below 1."""

    status_code = 400
    error_type = "validation_error"


class AuthorizationError(BoardError):
    """No verified identity, or the identity is not an admin."""

    status_code = 403
    error_type = "authorization_error"


class NotFoundError(BoardError):
    """Request, comment, user or board document does not exist."""

    status_code = 404
    error_type = "not_found_error"


class ConflictError(BoardError):
    """A second user registered with an existing email."""

    status_code = 409
    error_type = "conflict_error"


# ===== Server errors =====


class DatabaseError(BoardError):
    """Document store unreachable or not connected yet."""

    status_code = 500
    error_type = "database_error"


class ConfigurationError(BoardError):
    """
    Settings cannot be used (e.g. MONGODB_URL without a database name).

    Raised during startup, never while serving a request.
    """

    status_code = 500
    error_type = "configuration_error"
