"""Shared fixtures for the Prospect Agent test suite."""

from __future__ import annotations

import pytest

from prospect_agent.domain.values import ProspectInput
from prospect_agent.infrastructure.config import RetryConfig
from prospect_agent.infrastructure.credentials import StaticCredentialProvider
from prospect_agent.infrastructure.llm import RawCitation, RawModelResponse
from prospect_agent.services.orchestrator import ProspectRequestOrchestrator
from prospect_agent.testing import ScriptedModelPort, SleepRecorder

# ---------------------------------------------------------------------------
# Value-object fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def target_input() -> ProspectInput:
    """Target / Cloud Migration with no extra keywords."""
    return ProspectInput(
        company_or_industry="Target",
        focus_area="Cloud Migration",
        additional_keywords="",
    )


@pytest.fixture
def keyword_input() -> ProspectInput:
    """An industry query with extra context."""
    return ProspectInput(
        company_or_industry="Fashion Retail",
        focus_area="Supply Chain Challenges",
        additional_keywords="high return rates",
    )


@pytest.fixture
def raw_response() -> RawModelResponse:
    """A grounded answer with one valid and one address-less citation."""
    return RawModelResponse(
        text="## Hi",
        citations=(
            RawCitation(uri="https://a", title="A"),
            RawCitation(uri=None, title="B"),
        ),
    )


# ---------------------------------------------------------------------------
# Orchestrator fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def credentials() -> StaticCredentialProvider:
    return StaticCredentialProvider("test-key")


@pytest.fixture
def make_orchestrator(credentials, sleep_recorder):
    """Factory building an orchestrator around a scripted port."""

    def _make(
        port: ScriptedModelPort,
        credential_provider=None,
        retry_config: RetryConfig | None = None,
        classifier=None,
    ) -> ProspectRequestOrchestrator:
        return ProspectRequestOrchestrator(
            port=port,
            credentials=credential_provider or credentials,
            classifier=classifier,
            retry_config=retry_config,
            sleep=sleep_recorder,
        )

    return _make
