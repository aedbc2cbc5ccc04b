"""Domain exceptions for the Prospect Agent.

All failures surfaced by report generation inherit from
``ProspectingError`` so callers can catch the whole family with a single
``except`` clause.  The concrete subclass is the error *kind*: the UI
distinguishes :class:`CredentialError` (ask the user to reselect the key)
from the other two (show the message inline).
"""

from __future__ import annotations

from typing import Any

from .enums import ErrorKind


class ProspectingError(Exception):
    """Base exception for all report-generation failures."""

    kind: ErrorKind = ErrorKind.FATAL

    def __init__(
        self,
        message: str = "",
        attempts: int = 0,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.attempts = attempts
        self.details: dict[str, Any] = details or {}


class CredentialError(ProspectingError):
    """Raised when no credential is available or the endpoint rejected it.

    Never retried.
    """

    kind = ErrorKind.CREDENTIAL

    def __init__(
        self,
        message: str = "API Key issue",
        attempts: int = 0,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, attempts, details)


class TransientServiceError(ProspectingError):
    """Raised when the service stayed overloaded through every retry."""

    kind = ErrorKind.TRANSIENT

    def __init__(
        self,
        message: str = "The AI model is currently overloaded",
        attempts: int = 0,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, attempts, details)


class FatalRequestError(ProspectingError):
    """Raised for any other failure: bad request, unexpected response
    shape, network errors without overload markers, cancellation."""

    kind = ErrorKind.FATAL

    def __init__(
        self,
        message: str = "Failed to generate prospect data",
        attempts: int = 0,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, attempts, details)
