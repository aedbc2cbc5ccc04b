"""Prospect Agent.

Sales prospecting client that sends a structured, search-grounded prompt
to a hosted generative model and returns the markdown report together
with its citations.
"""

__version__ = "0.1.0"

from prospect_agent.domain import (
    CredentialError,
    FatalRequestError,
    FocusArea,
    GroundingLink,
    ProspectingError,
    ProspectInput,
    ProspectReport,
    TransientServiceError,
)
from prospect_agent.services.orchestrator import (
    ProspectRequestOrchestrator,
    build_default_orchestrator,
    generate_prospect_data,
)

__all__ = [
    "CredentialError",
    "FatalRequestError",
    "FocusArea",
    "GroundingLink",
    "ProspectInput",
    "ProspectReport",
    "ProspectRequestOrchestrator",
    "ProspectingError",
    "TransientServiceError",
    "build_default_orchestrator",
    "generate_prospect_data",
]
