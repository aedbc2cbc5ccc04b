"""Error classification for failed model calls.

Decides whether a failure is worth retrying (*transient*), whether it is a
credential problem, or neither.  The upstream service reports failures as
human-readable text, so :class:`SubstringErrorClassifier` matches known
phrases.  :class:`StatusCodeErrorClassifier` prefers a structured status
code when the port provides one and falls back to the phrases.

The retry engine only consumes the boolean :meth:`ErrorClassifier.is_transient`
verdict; the orchestrator uses :meth:`ErrorClassifier.classify` to pick the
exception it raises.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from prospect_agent.domain.enums import ErrorKind

logger = logging.getLogger(__name__)

TRANSIENT_MARKERS: tuple[str, ...] = ("503", "unavailable", "overloaded")

MISSING_CREDENTIAL_MARKER = "API_KEY environment variable is not set"

CREDENTIAL_MARKERS: tuple[str, ...] = (
    "entity was not found",
    MISSING_CREDENTIAL_MARKER,
)

TRANSIENT_STATUS_CODES = frozenset({503})
CREDENTIAL_STATUS_CODES = frozenset({401, 403})


def _error_text(error: BaseException) -> str:
    return (getattr(error, "message", None) or str(error)).lower()


class ErrorClassifier(ABC):
    """Maps a failure to an :class:`ErrorKind`."""

    @abstractmethod
    def classify(self, error: BaseException) -> ErrorKind:
        ...

    def is_transient(self, error: BaseException) -> bool:
        return self.classify(error) is ErrorKind.TRANSIENT

    def is_credential_failure(self, error: BaseException) -> bool:
        return self.classify(error) is ErrorKind.CREDENTIAL


class SubstringErrorClassifier(ErrorClassifier):
    """Classifies on case-insensitive substrings of the error message.

    Credential markers win over transient markers, so a rejected key is
    never retried.

    Parameters
    ----------
    transient_markers:
        Phrases that mark an overloaded or unavailable service.
    credential_markers:
        Phrases that mark a missing or rejected credential.
    """

    def __init__(
        self,
        transient_markers: tuple[str, ...] = TRANSIENT_MARKERS,
        credential_markers: tuple[str, ...] = CREDENTIAL_MARKERS,
    ) -> None:
        self._transient = tuple(m.lower() for m in transient_markers)
        self._credential = tuple(m.lower() for m in credential_markers)

    def classify(self, error: BaseException) -> ErrorKind:
        text = _error_text(error)
        if any(marker in text for marker in self._credential):
            return ErrorKind.CREDENTIAL
        if any(marker in text for marker in self._transient):
            return ErrorKind.TRANSIENT
        return ErrorKind.FATAL

    def __repr__(self) -> str:
        return (
            f"SubstringErrorClassifier(transient={self._transient!r}, "
            f"credential={self._credential!r})"
        )


class StatusCodeErrorClassifier(ErrorClassifier):
    """Classifies on ``error.status_code`` first, then on message text.

    Parameters
    ----------
    fallback:
        Classifier used when there is no status code or the code is not
        one of the known ones.  Defaults to :class:`SubstringErrorClassifier`.
    """

    def __init__(self, fallback: ErrorClassifier | None = None) -> None:
        self._fallback = fallback or SubstringErrorClassifier()

    def classify(self, error: BaseException) -> ErrorKind:
        status = getattr(error, "status_code", None)
        if status in CREDENTIAL_STATUS_CODES:
            return ErrorKind.CREDENTIAL
        if status in TRANSIENT_STATUS_CODES:
            return ErrorKind.TRANSIENT
        kind = self._fallback.classify(error)
        if status is not None:
            logger.debug(
                "Status %s not mapped, message heuristic gave %s", status, kind.value
            )
        return kind

    def __repr__(self) -> str:
        return f"StatusCodeErrorClassifier(fallback={self._fallback!r})"
