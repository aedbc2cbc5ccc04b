"""Domain enumerations for the Prospect Agent.

These enums capture the fixed vocabularies used across the domain layer:
the focus areas offered by the prospecting form, the error taxonomy exposed
to callers, and the states of a single report-generation call.
"""

from enum import Enum


class FocusArea(Enum):
    """Buying-signal focus areas a user can pick for a query."""

    OMNICHANNEL_INVESTMENT = "Omnichannel Investment"
    SUPPLY_CHAIN_CHALLENGES = "Supply Chain Challenges"
    EXECUTIVE_CHANGES = "Executive Changes"
    CLOUD_MIGRATION = "Cloud Migration"
    FINANCIAL_PERFORMANCE = "Financial Performance (AI/Digital Transformation)"
    INDUSTRY_EVENTS = "Industry Event Participation"
    WEBSITE_CAPABILITY_GAPS = "Website Capability Gaps"
    GENERAL_OMS_IMS = "General OMS/IMS Needs"
    OMS_JOB_POSTS = "OMS related job posts"

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        """All labels in form order."""
        return tuple(member.value for member in cls)


DEFAULT_FOCUS_AREA = FocusArea.OMNICHANNEL_INVESTMENT


class ErrorKind(Enum):
    """Classification of a failed model call."""

    CREDENTIAL = "credential"  # missing or rejected credential
    TRANSIENT = "transient"  # overload / unavailability, retryable
    FATAL = "fatal"  # anything else


class CallState(Enum):
    """States of one report-generation call."""

    IDLE = "idle"
    BUILDING = "building"
    ATTEMPTING = "attempting"
    BACKING_OFF = "backing_off"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
