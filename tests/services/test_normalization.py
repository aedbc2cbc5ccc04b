"""Tests for response normalization and the display-time link filter."""

from __future__ import annotations

from prospect_agent.domain.values import GroundingLink
from prospect_agent.infrastructure.llm import RawModelResponse
from prospect_agent.services.normalization import (
    filter_valid_links,
    normalize_response,
)


class TestNormalizeResponse:

    def test_keeps_text_and_all_citations(self, raw_response: RawModelResponse) -> None:
        report = normalize_response(raw_response)
        assert report.text == "## Hi"
        assert report.grounding_links == (
            GroundingLink(uri="https://a", title="A"),
            GroundingLink(uri=None, title="B"),
        )

    def test_filter_keeps_only_addressed(self, raw_response: RawModelResponse) -> None:
        report = normalize_response(raw_response)
        assert filter_valid_links(report.grounding_links) == [
            GroundingLink(uri="https://a", title="A"),
        ]

    def test_no_citations(self) -> None:
        report = normalize_response(RawModelResponse(text="plain"))
        assert report.grounding_links == ()

    def test_text_not_reformatted(self) -> None:
        text = "## H\n\n* **bold**  \n- item\r\n"
        assert normalize_response(RawModelResponse(text=text)).text == text
