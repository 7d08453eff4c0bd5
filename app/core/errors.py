"""Error taxonomy for the joke service.

Every error carries the HTTP status it maps to and renders itself as the
``{"error": ...}`` body returned to clients.
"""

from typing import Any


class JokeAPIError(Exception):
    """Base exception for all failures surfaced by the joke service."""

    http_status: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_response(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(JokeAPIError):
    """Client supplied malformed or incomplete input."""

    http_status = 400

    def __init__(self, message: str, details: list[dict[str, str]] | None = None):
        super().__init__(message)
        self.details = details or []

    def to_response(self) -> dict[str, Any]:
        response = super().to_response()
        if self.details:
            response["details"] = self.details
        return response


class NotFoundError(JokeAPIError):
    """The requested identifier, or the random pick, has no record."""

    http_status = 404


class StorageError(JokeAPIError):
    """The persistence layer failed."""

    http_status = 500

    def __init__(self, operation: str, message: str = "Server error"):
        super().__init__(message)
        self.operation = operation


def field_errors(errors) -> list[dict[str, str]]:
    """Flatten pydantic error dicts into ``{"field", "message"}`` pairs."""
    details = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        # FastAPI prefixes request locations with "body", "path" or "query".
        if len(loc) > 1 and loc[0] in {"body", "path", "query"}:
            loc = loc[1:]
        details.append({"field": ".".join(loc), "message": error.get("msg", "")})
    return details
