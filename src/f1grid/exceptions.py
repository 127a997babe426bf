"""Custom exceptions for the F1 Grid client."""

from __future__ import annotations


class F1GridError(Exception):
    """Base exception for all F1 Grid client errors."""


class F1GridConnectionError(F1GridError):
    """Raised when the client cannot reach the drivers endpoint."""


class F1GridTimeoutError(F1GridError):
    """Raised when a request to the drivers endpoint times out."""


class F1GridAPIError(F1GridError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class F1GridValidationError(F1GridError):
    """Raised when the response body is not JSON or fails model validation."""
