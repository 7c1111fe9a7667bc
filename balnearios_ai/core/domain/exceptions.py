"""
Domain Exceptions

These exceptions represent failures that callers must handle. "Nothing found"
is never an exception here: searches answer with empty collections.
They should be caught and translated to appropriate HTTP responses in the API layer.
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "DATA_STORE_ERROR")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class DataStoreException(DomainException):
    """
    Raised when a read against the data store fails
    (connectivity, malformed query, permissions).

    Never retried by the domain; the caller decides.
    """

    def __init__(self, operation: str, message: str, original_error: Exception | None = None):
        self.operation = operation
        self.original_error = original_error
        details: dict[str, Any] = {"operation": operation}
        if original_error is not None:
            details["original_error"] = type(original_error).__name__
        super().__init__(message, "DATA_STORE_ERROR", details)
