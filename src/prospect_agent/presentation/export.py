"""Export utilities for prospect reports.

Supports a self-contained printable HTML page (the "print to PDF" surface:
open it in a browser and print), plain Markdown, and JSON.  The HTML page
converts the report markdown with the ``markdown`` package and lists only
citations that have an address.
"""

from __future__ import annotations

import datetime
import html
import json
from pathlib import Path

import markdown as markdown_lib

from prospect_agent.domain.values import ProspectReport
from prospect_agent.services.normalization import filter_valid_links

EXPORT_FORMATS: tuple[str, ...] = ("html", "md", "json")

_MARKDOWN_EXTENSIONS = ["extra", "sane_lists", "nl2br"]

# ---------------------------------------------------------------------------
# JSON
# ---------------------------------------------------------------------------

def export_json(report: ProspectReport, path: str) -> None:
    """Export the complete report, unfiltered citations included."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    with open(out, "w", encoding="utf-8") as fh:
        json.dump(report.to_dict(), fh, indent=2, ensure_ascii=False)


# ---------------------------------------------------------------------------
# Markdown
# ---------------------------------------------------------------------------

def render_markdown(report: ProspectReport) -> str:
    """Report text followed by a numbered source list."""
    parts = [report.text.rstrip()]
    links = filter_valid_links(report.grounding_links)
    if links:
        parts.append("## Sources & References")
        parts.append(
            "\n".join(
                f"{idx}. [{link.label}]({link.uri})"
                for idx, link in enumerate(links, start=1)
            )
        )
    return "\n\n".join(parts) + "\n"


def export_markdown(report: ProspectReport, path: str) -> None:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_markdown(report), encoding="utf-8")


# ---------------------------------------------------------------------------
# HTML
# ---------------------------------------------------------------------------

_HTML_TEMPLATE = """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{title}</title>
<style>
  :root {{
    --bg: #f9fafb;
    --card-bg: #ffffff;
    --border: #e5e7eb;
    --text: #1f2937;
    --muted: #6b7280;
    --accent: #1e40af;
    --link: #2563eb;
  }}
  * {{ box-sizing: border-box; }}
  body {{
    font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto,
                 'Helvetica Neue', Arial, sans-serif;
    background: var(--bg);
    color: var(--text);
    margin: 0;
    padding: 2rem;
    line-height: 1.6;
  }}
  .container {{ max-width: 900px; margin: 0 auto; }}
  .toolbar {{ text-align: right; margin-bottom: 1rem; }}
  .toolbar button {{
    background: var(--accent);
    color: #fff;
    border: none;
    border-radius: 6px;
    padding: 0.5rem 1rem;
    font-size: 0.9rem;
    cursor: pointer;
  }}
  .card {{
    background: var(--card-bg);
    border: 1px solid var(--border);
    border-radius: 8px;
    padding: 1.5rem 2rem;
    margin-bottom: 1.5rem;
  }}
  h1, h2, h3 {{ color: var(--accent); line-height: 1.3; }}
  a {{ color: var(--link); word-break: break-word; }}
  .sources h3 {{ margin-top: 0; }}
  .sources li {{ margin-bottom: 0.35rem; }}
  footer {{ text-align: center; color: var(--muted); font-size: 0.8rem; }}
  @media print {{
    body {{ background: #fff; padding: 0; }}
    .toolbar {{ display: none; }}
    .card {{ border: none; padding: 0; }}
    a {{ color: var(--text); text-decoration: none; }}
  }}
</style>
</head>
<body>
<div class="container">
  <div class="toolbar"><button type="button" onclick="window.print()">Save as PDF</button></div>
  <div class="card report">
{report_html}
  </div>
{sources_section}
  <footer>Generated {generated_iso} &middot; prospect-agent {version}</footer>
</div>
</body>
</html>
"""


def render_html(report: ProspectReport, title: str = "Prospect Report") -> str:
    """Render the report as a self-contained printable HTML page."""
    from prospect_agent import __version__

    report_html = markdown_lib.markdown(
        report.text, extensions=_MARKDOWN_EXTENSIONS, output_format="html"
    )

    sources_section = ""
    links = filter_valid_links(report.grounding_links)
    if links:
        items = "\n".join(
            f'      <li><a href="{html.escape(link.uri or "")}" target="_blank" '
            f'rel="noopener noreferrer">{html.escape(link.label)}</a></li>'
            for link in links
        )
        sources_section = (
            '  <div class="card sources">\n'
            "    <h3>Sources &amp; References</h3>\n"
            f"    <ol>\n{items}\n    </ol>\n"
            "  </div>\n"
        )

    generated = datetime.datetime.now(tz=datetime.timezone.utc).isoformat(
        timespec="seconds"
    )
    return _HTML_TEMPLATE.format(
        title=html.escape(title),
        report_html=report_html,
        sources_section=sources_section,
        generated_iso=generated,
        version=__version__,
    )


def export_html(report: ProspectReport, path: str, title: str = "Prospect Report") -> None:
    """Write :func:`render_html` output to *path*."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(render_html(report, title=title), encoding="utf-8")


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def resolve_export_format(path: str, fmt: str | None = None) -> str:
    """Return *fmt*, or the format implied by the suffix of *path*.

    Raises
    ------
    ValueError
        If the format is not one of :data:`EXPORT_FORMATS`.
    """
    if fmt is None:
        suffix = Path(path).suffix.lower().lstrip(".")
        fmt = {"htm": "html", "markdown": "md"}.get(suffix, suffix) or "html"
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"format must be one of {list(EXPORT_FORMATS)}, got '{fmt}'")
    return fmt


def export_report(report: ProspectReport, path: str, fmt: str | None = None) -> str:
    """Export in *fmt*, or the format implied by the file suffix.

    Returns the format used.
    """
    fmt = resolve_export_format(path, fmt)

    if fmt == "html":
        export_html(report, path)
    elif fmt == "md":
        export_markdown(report, path)
    else:
        export_json(report, path)
    return fmt
