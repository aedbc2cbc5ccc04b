"""Model invocation layer for the Prospect Agent.

This sub-package defines the **port** the orchestrator talks to and the
raw shapes that cross it.  The orchestrator never touches a vendor SDK;
concrete adapters (see :mod:`prospect_agent.infrastructure.llm.gemini`)
implement :class:`ModelInvocationPort`.

Public API
----------
ModelInvocationPort
    Abstract base class every adapter must implement.
InvocationOptions
    Per-call options (model, search grounding, credential).
RawModelResponse
    Text plus raw citations, exactly as the model returned them.
RawCitation
    One citation entry; both fields may be missing.
ModelError
    The only exception an adapter may raise.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


# =========================================================================== #
#  Exceptions                                                                  #
# =========================================================================== #

class ModelError(Exception):
    """Failure reported by a model invocation port.

    Parameters
    ----------
    message:
        Human-readable description.  Adapters keep the upstream service's
        wording here since the classifier inspects it.
    status_code:
        HTTP-like status code when the upstream reported one.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


# =========================================================================== #
#  Data structures                                                             #
# =========================================================================== #

@dataclass(frozen=True)
class InvocationOptions:
    """Per-call options for a model invocation.

    Attributes
    ----------
    enable_search_grounding:
        Ask the model to ground its answer with web search and return
        citations.
    model:
        Model identifier.  Empty means the adapter's default.
    api_key:
        Credential resolved for this call.  Never shown in ``repr``.
    """

    enable_search_grounding: bool = True
    model: str = ""
    api_key: str = field(default="", repr=False)


@dataclass(frozen=True)
class RawCitation:
    """A citation as returned by the model; either field may be absent."""

    uri: str | None = None
    title: str | None = None


@dataclass(frozen=True)
class RawModelResponse:
    """Structured response from a model port.

    Attributes
    ----------
    text:
        The generated markdown.
    citations:
        Citation entries in model order, unfiltered.
    model:
        The model that produced the response, when the adapter knows it.
    """

    text: str
    citations: tuple[RawCitation, ...] = ()
    model: str = ""


# =========================================================================== #
#  Abstract port                                                               #
# =========================================================================== #

class ModelInvocationPort(ABC):
    """Abstract capability that runs one prompt against a hosted model.

    Usage::

        port = GeminiModelPort()
        options = InvocationOptions(model="gemini-2.5-flash", api_key="...")
        response = await port.invoke(prompt, options)
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Human-readable provider identifier (e.g. ``"gemini"``)."""
        ...

    @abstractmethod
    async def invoke(
        self,
        prompt: str,
        options: InvocationOptions,
    ) -> RawModelResponse:
        """Send *prompt* and wait for the complete answer.

        There are no partial or streamed results.

        Raises
        ------
        ModelError
            On any failure.
        """
        ...


__all__ = [
    "InvocationOptions",
    "ModelError",
    "ModelInvocationPort",
    "RawCitation",
    "RawModelResponse",
]
