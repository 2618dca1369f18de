"""Typed errors surfaced to API callers.

Every error carries a machine-readable ``code`` and the HTTP status it maps
to. ``NotFound`` is used both for missing records and for records owned by
another user, so callers cannot probe for other users' ids.
"""

from typing import Any


class ClipboardError(Exception):
    """Base class for errors that terminate a request with a typed code."""

    code = "INTERNAL_ERROR"
    http_status = 500
    default_message = "An unexpected error occurred"

    def __init__(self, message: str | None = None, details: list[dict[str, Any]] | None = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_response(self) -> dict:
        error: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            error["details"] = self.details
        return {"success": False, "error": error}


class Unauthorized(ClipboardError):
    code = "UNAUTHORIZED"
    http_status = 401
    default_message = "You must be signed in to perform this action."


class ValidationFailed(ClipboardError):
    code = "VALIDATION_FAILED"
    http_status = 400
    default_message = "Invalid request data"


class NotFound(ClipboardError):
    code = "NOT_FOUND"
    http_status = 404
    default_message = "Translation not found."


class StorageFailure(ClipboardError):
    code = "STORAGE_FAILURE"
    http_status = 500
    default_message = "The storage backend failed to complete the request"
