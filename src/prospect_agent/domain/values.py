"""Value objects for the Prospect Agent.

All types here except :class:`RetryState` are frozen dataclasses, immutable
and compared by value.  They live for a single submission only; nothing is
cached or shared between calls.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .enums import DEFAULT_FOCUS_AREA, FocusArea

# ---------------------------------------------------------------------------
# ProspectInput
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProspectInput:
    """The query a user submits from the prospecting form.

    Attributes
    ----------
    company_or_industry:
        A company name (``"Target"``) or an industry focus
        (``"Fashion Retail"``).  Must not be blank.
    focus_area:
        One of the :class:`FocusArea` labels.
    additional_keywords:
        Free-form extra context.  Empty when the user gave none.
    """

    company_or_industry: str
    focus_area: str = DEFAULT_FOCUS_AREA.value
    additional_keywords: str = ""

    def __post_init__(self) -> None:
        if self.additional_keywords is None:
            object.__setattr__(self, "additional_keywords", "")

    def validate(self) -> None:
        """Raise ``ValueError`` if the input would not pass the form."""
        if not self.company_or_industry or not self.company_or_industry.strip():
            raise ValueError("company_or_industry must not be empty")
        if self.focus_area not in FocusArea.labels():
            raise ValueError(
                f"focus_area must be one of {list(FocusArea.labels())}, "
                f"got '{self.focus_area}'"
            )

    @classmethod
    def from_form(
        cls,
        company_or_industry: str,
        focus_area: str | FocusArea = DEFAULT_FOCUS_AREA,
        additional_keywords: str | None = None,
    ) -> ProspectInput:
        """Build a validated input from raw form values."""
        if isinstance(focus_area, FocusArea):
            focus_area = focus_area.value
        inputs = cls(
            company_or_industry=(company_or_industry or "").strip(),
            focus_area=(focus_area or "").strip(),
            additional_keywords=(additional_keywords or "").strip(),
        )
        inputs.validate()
        return inputs


# ---------------------------------------------------------------------------
# GroundingLink
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class GroundingLink:
    """A citation returned by the search-grounded model.

    Either field may be missing.  A link is only displayable when it has a
    ``uri``; invalid links are still kept in the report.
    """

    uri: str | None = None
    title: str | None = None

    @property
    def is_valid(self) -> bool:
        return bool(self.uri)

    @property
    def label(self) -> str:
        """Text to show for the link: the title, else the address."""
        return self.title or self.uri or ""

    def to_dict(self) -> dict[str, str | None]:
        return {"uri": self.uri, "title": self.title}


# ---------------------------------------------------------------------------
# ProspectReport
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ProspectReport:
    """The finished report: markdown text plus its citations.

    ``grounding_links`` is the complete raw citation list in model order.
    Use :attr:`valid_links` for display.
    """

    text: str
    grounding_links: tuple[GroundingLink, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.grounding_links, tuple):
            object.__setattr__(self, "grounding_links", tuple(self.grounding_links))

    @property
    def valid_links(self) -> tuple[GroundingLink, ...]:
        return tuple(link for link in self.grounding_links if link.is_valid)

    def to_dict(self) -> dict[str, Any]:
        return {
            "text": self.text,
            "grounding_links": [link.to_dict() for link in self.grounding_links],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProspectReport:
        links: Iterable[dict[str, Any]] = data.get("grounding_links") or []
        return cls(
            text=data.get("text", ""),
            grounding_links=tuple(
                GroundingLink(uri=item.get("uri"), title=item.get("title"))
                for item in links
            ),
        )


# ---------------------------------------------------------------------------
# RetryState
# ---------------------------------------------------------------------------

@dataclass
class RetryState:
    """Bookkeeping for one retrying call.  Not shared, not persisted.

    Attributes
    ----------
    attempt:
        Number of attempts started so far (1-based once running).
    last_error:
        The most recent failure, if any.
    delay:
        The backoff delay computed after the most recent failure.
    total_delay:
        Sum of all backoff delays actually waited.
    delays:
        Every backoff delay waited, in order.
    """

    attempt: int = 0
    last_error: BaseException | None = None
    delay: float = 0.0
    total_delay: float = 0.0
    delays: list[float] = field(default_factory=list)

    def record_backoff(self, delay: float) -> None:
        self.delay = delay
        self.total_delay += delay
        self.delays.append(delay)
