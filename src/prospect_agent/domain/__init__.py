"""Domain layer: value objects, enums, and the error taxonomy."""

from .enums import DEFAULT_FOCUS_AREA, CallState, ErrorKind, FocusArea
from .exceptions import (
    CredentialError,
    FatalRequestError,
    ProspectingError,
    TransientServiceError,
)
from .values import GroundingLink, ProspectInput, ProspectReport, RetryState

__all__ = [
    # Enums
    "CallState",
    "DEFAULT_FOCUS_AREA",
    "ErrorKind",
    "FocusArea",
    # Values
    "GroundingLink",
    "ProspectInput",
    "ProspectReport",
    "RetryState",
    # Exceptions
    "CredentialError",
    "FatalRequestError",
    "ProspectingError",
    "TransientServiceError",
]
