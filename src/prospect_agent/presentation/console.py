"""Rich-based console display for prospect reports.

:class:`ReportConsole` is the terminal display surface: it renders the
report's markdown, the list of citations that have a usable address, and
failures.  Credential failures get their own remedy text since the fix
(selecting a valid key) is on the user's side.
"""

from __future__ import annotations

import sys
from typing import Any

from rich.console import Console as RichConsole
from rich.markdown import Markdown as RichMarkdown
from rich.panel import Panel as RichPanel
from rich.rule import Rule as RichRule
from rich.text import Text as RichText

from prospect_agent.domain.exceptions import CredentialError
from prospect_agent.domain.values import ProspectReport
from prospect_agent.services.normalization import filter_valid_links

BILLING_DOCS_URL = "https://ai.google.dev/gemini-api/docs/billing"

CREDENTIAL_HINT = (
    "There's an issue with the API key. Please try re-selecting it or "
    "ensure it's valid."
)
CREDENTIAL_REMEDY = (
    "Ensure your API key is properly selected and has the necessary "
    "permissions. Refer to the Gemini API billing documentation: "
    + BILLING_DOCS_URL
)


class ReportConsole:
    """Console presentation layer for reports and failures.

    Parameters
    ----------
    file:
        Output stream.  Defaults to ``sys.stdout``.
    width:
        Fixed console width, or ``None`` to auto-detect.
    """

    def __init__(self, file: Any = None, width: int | None = None) -> None:
        self._file = file or sys.stdout
        self._console = RichConsole(file=self._file, width=width)

    @property
    def console(self) -> RichConsole:
        return self._console

    # -- public API --------------------------------------------------------

    def print_report(self, report: ProspectReport) -> None:
        """Render the report markdown followed by its valid citations."""
        self._console.print()
        self._console.print(RichMarkdown(report.text))
        self.print_links(report)

    def print_links(self, report: ProspectReport) -> None:
        """Print the "Sources & References" block, or nothing when there
        are no valid links."""
        links = filter_valid_links(report.grounding_links)
        if not links:
            return

        self._console.print()
        self._console.print(RichRule("Sources & References", style="cyan"))
        for idx, link in enumerate(links, start=1):
            line = RichText(f"{idx:>2}. ")
            line.append(link.label, style=f"bold link {link.uri}")
            self._console.print(line)
            if link.title:
                self._console.print(RichText(f"    {link.uri}", style="dim"))
        self._console.print()

    def print_error(self, error: BaseException) -> None:
        """Show a failure inline; credential failures include the remedy."""
        if isinstance(error, CredentialError):
            body = RichText()
            body.append(CREDENTIAL_HINT + "\n", style="bold")
            body.append(str(error) + "\n\n")
            body.append(CREDENTIAL_REMEDY, style="dim")
            title = "API Key issue"
        else:
            body = RichText(f"Failed to generate report: {error}")
            title = "Error"
        self._console.print(RichPanel(body, title=title, border_style="red"))

    def print_status(self, message: str) -> None:
        self._console.print(f"[dim]{message}[/dim]")
