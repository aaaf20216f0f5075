"""Domain exceptions for the sportsdb search service.

"Nothing found" is never an exception: searches return an empty list.
These exceptions cover invalid input and infrastructure failures that must
reach the caller. Presentation layer maps them to HTTP responses in
exception handlers.
"""

from typing import Any


class SportsDbException(Exception):
    """Base exception for all sportsdb application errors.

    Presentation layer maps these to HTTP responses using message,
    error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, operation).
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
        """Return the JSON error body used by the exception handlers."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(SportsDbException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class StoreUnavailableException(SportsDbException):
    """Raised when the search store cannot be reached or times out.

    Distinct from an empty result: callers must never see this as "no matches".
    """

    def __init__(self, operation: str, reason: str | None = None) -> None:
        """Initialize with the failing store operation.

        Args:
            operation: Store operation that failed (e.g. 'query_ranked').
            reason: Optional short description of the underlying failure.
        """
        details: dict[str, Any] = {"operation": operation}
        if reason:
            details["reason"] = reason
        super().__init__(
            f"Search store unavailable during {operation}",
            "STORE_UNAVAILABLE",
            details,
        )


class SqlNotConfiguredException(SportsDbException):
    """Raised when an operation requires Postgres but DATABASE_URL is not set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SQL_NOT_CONFIGURED",
        )
