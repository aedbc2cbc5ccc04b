"""Presentation layer: console display and report export."""

from prospect_agent.presentation.console import ReportConsole
from prospect_agent.presentation.export import (
    EXPORT_FORMATS,
    export_html,
    export_json,
    export_markdown,
    export_report,
    render_html,
    render_markdown,
    resolve_export_format,
)

__all__ = [
    "EXPORT_FORMATS",
    "ReportConsole",
    "export_html",
    "export_json",
    "export_markdown",
    "export_report",
    "render_html",
    "render_markdown",
    "resolve_export_format",
]
