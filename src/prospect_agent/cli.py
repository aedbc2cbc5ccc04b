"""Command-line interface for the Prospect Agent.

Plays the part of the prospecting form: it collects the query, validates
it, runs the orchestrator, and hands the report to the console and,
optionally, to the printable exporter.

Entry point
-----------
The ``main()`` function is registered as a console script in
``pyproject.toml``::

    [project.scripts]
    prospect-agent = "prospect_agent.cli:main"

Usage examples::

    prospect-agent generate --company Target --focus "Cloud Migration"
    prospect-agent generate --company "Fashion Retail" --keywords "high return rates" --output report.html
    prospect-agent focus-areas
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Any

from prospect_agent.domain.enums import DEFAULT_FOCUS_AREA, FocusArea

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CREDENTIAL = 2
EXIT_INTERRUPTED = 130


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="prospect-agent",
        description=(
            "AI Sales Prospecting Agent -- identifies retailers and B2B "
            "companies needing OMS/IMS solutions and drafts tailored outreach."
        ),
    )
    parser.add_argument(
        "--version",
        action="store_true",
        default=False,
        help="Show version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Enable debug logging.",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available subcommands")

    # -- generate ----------------------------------------------------------
    gen_parser = subparsers.add_parser(
        "generate",
        help="Generate a prospect report.",
        description="Generate a search-grounded prospect report.",
    )
    gen_parser.add_argument(
        "--company",
        type=str,
        required=True,
        help='Company name or industry focus (e.g. "Target" or "Retailers in North America").',
    )
    gen_parser.add_argument(
        "--focus",
        type=str,
        default=DEFAULT_FOCUS_AREA.value,
        choices=list(FocusArea.labels()),
        metavar="FOCUS",
        help=f"Key buying signal / focus area. (default: {DEFAULT_FOCUS_AREA.value})",
    )
    gen_parser.add_argument(
        "--keywords",
        type=str,
        default="",
        help="Additional keywords or context (optional).",
    )
    gen_parser.add_argument(
        "--model",
        type=str,
        default=None,
        help="Model identifier.  Overrides the config file.",
    )
    gen_parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a JSON config file with 'retry' and 'model' sections.",
    )
    gen_parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the report to this file as well as printing it.",
    )
    gen_parser.add_argument(
        "--format",
        type=str,
        default=None,
        choices=["html", "md", "json"],
        help="Export format.  Defaults to the --output suffix, else html.",
    )
    gen_parser.add_argument(
        "--no-grounding",
        action="store_true",
        default=False,
        help="Do not ask the model for search grounding.",
    )

    # -- focus-areas -------------------------------------------------------
    subparsers.add_parser(
        "focus-areas",
        help="List the available focus areas.",
        description="List the focus area labels accepted by --focus.",
    )

    return parser


def _log_level(verbosity: int) -> int:
    return logging.DEBUG if verbosity > 0 else logging.WARNING


def _configure_logging(verbosity: int) -> None:
    logging.basicConfig(
        level=_log_level(verbosity),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _load_configs(args: argparse.Namespace) -> tuple[Any, Any]:
    """Return ``(model_config, retry_config)`` from file and flags."""
    from dataclasses import replace

    from prospect_agent.infrastructure.config import (
        ModelConfig,
        RetryConfig,
        load_config_from_json,
    )

    model_config = ModelConfig()
    retry_config = RetryConfig()
    if args.config is not None:
        text = Path(args.config).read_text(encoding="utf-8")
        loaded = load_config_from_json(text)
        model_config = loaded["model"]
        retry_config = loaded["retry"]

    if args.model:
        model_config = replace(model_config, model=args.model)
    if args.no_grounding:
        model_config = replace(model_config, enable_search_grounding=False)
    model_config.validate()
    return model_config, retry_config


# =========================================================================
# Subcommand handlers
# =========================================================================

def _cmd_generate(args: argparse.Namespace, orchestrator: Any = None) -> int:
    """Handle the ``generate`` subcommand."""
    from prospect_agent.domain.exceptions import CredentialError, ProspectingError
    from prospect_agent.domain.values import ProspectInput
    from prospect_agent.presentation.console import ReportConsole
    from prospect_agent.presentation.export import export_report, resolve_export_format
    from prospect_agent.services.orchestrator import build_default_orchestrator

    dashboard = ReportConsole()

    try:
        inputs = ProspectInput.from_form(args.company, args.focus, args.keywords)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    fmt = None
    if args.output is not None:
        try:
            fmt = resolve_export_format(args.output, args.format)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return EXIT_FAILURE

    if orchestrator is None:
        model_config, retry_config = _load_configs(args)
        orchestrator = build_default_orchestrator(model_config, retry_config)

    dashboard.print_status("Analyzing market signals and company data...")
    try:
        report = asyncio.run(orchestrator.generate_prospect_data(inputs))
    except CredentialError as exc:
        dashboard.print_error(exc)
        return EXIT_CREDENTIAL
    except ProspectingError as exc:
        dashboard.print_error(exc)
        return EXIT_FAILURE

    dashboard.print_report(report)

    if args.output is not None:
        export_report(report, args.output, fmt)
        print(f"Exported [{fmt}] {args.output}")

    return EXIT_OK


def _cmd_focus_areas(args: argparse.Namespace) -> int:
    """Handle the ``focus-areas`` subcommand."""
    for label in FocusArea.labels():
        marker = " (default)" if label == DEFAULT_FOCUS_AREA.value else ""
        print(f"  {label}{marker}")
    return EXIT_OK


# =========================================================================
# Main entry point
# =========================================================================

def main(argv: list[str] | None = None) -> None:
    """CLI entry point.

    Parameters
    ----------
    argv:
        Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from prospect_agent import __version__
        print(f"prospect-agent {__version__}")
        sys.exit(EXIT_OK)

    if args.command is None:
        parser.print_help()
        sys.exit(EXIT_OK)

    _configure_logging(args.verbose)

    handlers: dict[str, Any] = {
        "generate": _cmd_generate,
        "focus-areas": _cmd_focus_areas,
    }

    handler = handlers.get(args.command)
    if handler is None:
        parser.print_help()
        sys.exit(EXIT_FAILURE)

    try:
        exit_code = handler(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        exit_code = EXIT_INTERRUPTED
    except Exception as exc:
        print(f"Error: {exc}", file=sys.stderr)
        exit_code = EXIT_FAILURE

    sys.exit(exit_code)
