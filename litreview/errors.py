"""Exception hierarchy for the literature analysis workflow.

Every error carries a short, user-facing ``message`` (shown in the error
banner) and an optional ``details`` dict for logging and diagnostics.
"""

from typing import Any


class LitReviewError(Exception):
    """Base exception for all litreview errors.

    Attributes:
        message: Human-readable error description
        details: Additional error context (never shown to the user)
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(LitReviewError):
    """User input rejected before anything is sent (bad URL, empty batch)."""


class TransportError(LitReviewError):
    """The analysis engine could not be reached or answered with an HTTP error."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)
        self.status_code = status_code


class EngineError(LitReviewError):
    """The engine answered but reported ``success: false``."""


class ContractError(LitReviewError):
    """The engine's response does not match the expected result contract."""
