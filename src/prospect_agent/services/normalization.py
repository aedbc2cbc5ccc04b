"""Turn a raw model response into a :class:`ProspectReport`."""

from __future__ import annotations

from collections.abc import Iterable

from prospect_agent.domain.values import GroundingLink, ProspectReport
from prospect_agent.infrastructure.llm import RawModelResponse


def normalize_response(raw: RawModelResponse) -> ProspectReport:
    """Copy the text verbatim and map every citation, in order.

    Citations without a uri or title are kept; filtering happens at
    display time (see :func:`filter_valid_links`).
    """
    return ProspectReport(
        text=raw.text,
        grounding_links=tuple(
            GroundingLink(uri=citation.uri, title=citation.title)
            for citation in raw.citations
        ),
    )


def filter_valid_links(links: Iterable[GroundingLink]) -> list[GroundingLink]:
    """Links that have a usable address, order preserved."""
    return [link for link in links if link.is_valid]
