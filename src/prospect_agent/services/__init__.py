"""Service layer: prompt building, retry, classification, orchestration."""

from prospect_agent.services.classification import (
    ErrorClassifier,
    StatusCodeErrorClassifier,
    SubstringErrorClassifier,
)
from prospect_agent.services.normalization import (
    filter_valid_links,
    normalize_response,
)
from prospect_agent.services.orchestrator import (
    ProspectRequestOrchestrator,
    build_default_orchestrator,
    generate_prospect_data,
)
from prospect_agent.services.prompt import build_prompt
from prospect_agent.services.retry import RetryEngine

__all__ = [
    "ErrorClassifier",
    "ProspectRequestOrchestrator",
    "RetryEngine",
    "StatusCodeErrorClassifier",
    "SubstringErrorClassifier",
    "build_default_orchestrator",
    "build_prompt",
    "filter_valid_links",
    "generate_prospect_data",
    "normalize_response",
]
