"""Google Gemini adapter for the model invocation port.

Wraps the ``google-genai`` SDK.  A new client is built for every call so
the most recently resolved API key is always the one used, and its async
HTTP session is closed before the call returns.  Search
grounding is requested through the SDK's ``GoogleSearch`` tool and the
citations are read back from the first candidate's grounding metadata.

Every SDK failure is converted to :class:`ModelError`, keeping the
upstream message (which carries the status, e.g. ``503 UNAVAILABLE``) and
the HTTP code.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

from prospect_agent.infrastructure.config import DEFAULT_MODEL
from prospect_agent.infrastructure.llm import (
    InvocationOptions,
    ModelError,
    ModelInvocationPort,
    RawCitation,
    RawModelResponse,
)

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_MESSAGE = "Failed to get a response from the model."


def _default_client_factory(api_key: str) -> Any:
    return genai.Client(api_key=api_key)


class GeminiModelPort(ModelInvocationPort):
    """Model port backed by the Gemini ``generateContent`` endpoint.

    Parameters
    ----------
    default_model:
        Model used when the call options do not name one.
    client_factory:
        Builds an SDK client from an API key.  Defaults to
        ``google.genai.Client``.
    """

    def __init__(
        self,
        default_model: str = DEFAULT_MODEL,
        client_factory: Callable[[str], Any] | None = None,
    ) -> None:
        self._default_model = default_model
        self._client_factory = client_factory or _default_client_factory

    @property
    def provider_name(self) -> str:
        """Return ``'gemini'``."""
        return "gemini"

    async def invoke(
        self,
        prompt: str,
        options: InvocationOptions,
    ) -> RawModelResponse:
        """Run *prompt* through Gemini and return text plus citations.

        Raises
        ------
        ModelError
            On SDK, network, or response-shape failures.
        """
        model = options.model or self._default_model
        client = self._client_factory(options.api_key)

        config = None
        if options.enable_search_grounding:
            config = genai_types.GenerateContentConfig(
                tools=[genai_types.Tool(google_search=genai_types.GoogleSearch())],
            )

        try:
            response = await client.aio.models.generate_content(
                model=model,
                contents=prompt,
                config=config,
            )
        except genai_errors.APIError as exc:
            raise ModelError(str(exc), status_code=exc.code) from exc
        except Exception as exc:
            raise ModelError(f"Unexpected error calling Gemini API: {exc}") from exc
        finally:
            await client.aio.aclose()

        return self._parse_response(response, model)

    # -- internal helpers -----------------------------------------------------

    def _parse_response(self, response: Any, model: str) -> RawModelResponse:
        """Parse a ``GenerateContentResponse`` into a :class:`RawModelResponse`."""
        if response is None:
            raise ModelError(EMPTY_RESPONSE_MESSAGE)

        try:
            text = response.text
        except Exception as exc:
            raise ModelError(f"Failed to parse Gemini response: {exc}") from exc
        if not text:
            raise ModelError(EMPTY_RESPONSE_MESSAGE)

        citations: list[RawCitation] = []
        for chunk in self._grounding_chunks(response):
            # Non-web chunks (e.g. maps) still occupy a slot.
            web = getattr(chunk, "web", None)
            citations.append(
                RawCitation(
                    uri=getattr(web, "uri", None),
                    title=getattr(web, "title", None),
                )
            )
        logger.debug(
            "GeminiModelPort: %d chars, %d citations from %s",
            len(text),
            len(citations),
            model,
        )
        return RawModelResponse(
            text=text,
            citations=tuple(citations),
            model=getattr(response, "model_version", None) or model,
        )

    @staticmethod
    def _grounding_chunks(response: Any) -> list[Any]:
        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            return []
        metadata = getattr(candidates[0], "grounding_metadata", None)
        if metadata is None:
            return []
        return list(getattr(metadata, "grounding_chunks", None) or [])

    def __repr__(self) -> str:
        return f"GeminiModelPort(model={self._default_model!r})"
