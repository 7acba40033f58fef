"""Domain exceptions for community search.

Defines domain-level exceptions independent of infrastructure concerns.
The presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class CommunitySearchException(Exception):
    """Base exception for all community search errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, search_time).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON error responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(CommunitySearchException):
    """Raised when input validation fails (e.g. query too long, bad filter value)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class SearchFailedException(CommunitySearchException):
    """Raised when a search fails outside the per-module fetch boundary.

    No partial result set is returned; the elapsed time is kept for observability.
    """

    def __init__(self, search_time_ms: int, reason: str) -> None:
        """Initialize with elapsed time and the underlying error message.

        Args:
            search_time_ms: Milliseconds spent before the failure.
            reason: Message of the underlying error.
        """
        super().__init__(
            "Search failed",
            "SEARCH_FAILED",
            {"searchTime": search_time_ms, "error": reason},
        )
        self.search_time_ms = search_time_ms


class SuggestionsFailedException(CommunitySearchException):
    """Raised when suggestion generation fails outside its sub-pipelines."""

    def __init__(self, search_time_ms: int) -> None:
        super().__init__(
            "Failed to generate suggestions",
            "SUGGESTIONS_FAILED",
            {"searchTime": search_time_ms},
        )
        self.search_time_ms = search_time_ms


class SqlNotConfiguredException(CommunitySearchException):
    """Raised when an operation requires the SQL database but it is not configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
