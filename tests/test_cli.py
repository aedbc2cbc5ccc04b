"""Tests for the command-line interface."""

from __future__ import annotations

import argparse
import logging

import pytest

from prospect_agent import cli
from prospect_agent.infrastructure.credentials import StaticCredentialProvider
from prospect_agent.infrastructure.llm import RawCitation
from prospect_agent.services.orchestrator import ProspectRequestOrchestrator
from prospect_agent.testing import ScriptedModelPort, SleepRecorder


def _args(**overrides) -> argparse.Namespace:
    values = {
        "company": "Target",
        "focus": "Cloud Migration",
        "keywords": "",
        "model": None,
        "config": None,
        "output": None,
        "format": None,
        "no_grounding": False,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


def _orchestrator(port: ScriptedModelPort, api_key: str | None = "k") -> ProspectRequestOrchestrator:
    return ProspectRequestOrchestrator(
        port=port,
        credentials=StaticCredentialProvider(api_key),
        sleep=SleepRecorder(),
    )


class TestMain:

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--version"])
        assert exc_info.value.code == 0
        assert "prospect-agent" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main([])
        assert exc_info.value.code == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_focus_areas(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["focus-areas"])
        assert exc_info.value.code == 0
        out = capsys.readouterr().out
        assert "Omnichannel Investment (default)" in out
        assert "OMS related job posts" in out

    def test_unknown_focus_rejected(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["generate", "--company", "Target", "--focus", "Astrology"])
        assert exc_info.value.code == 2

    def test_missing_key_exits_with_credential_code(self, monkeypatch) -> None:
        monkeypatch.delenv("API_KEY", raising=False)
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["generate", "--company", "Target"])
        assert exc_info.value.code == cli.EXIT_CREDENTIAL


class TestGenerateCommand:

    def test_success_prints_report(self, capsys) -> None:
        port = ScriptedModelPort.succeeding(
            "## Prospect Report for Target", [RawCitation("https://a", "Source A")]
        )
        code = cli._cmd_generate(_args(), orchestrator=_orchestrator(port))
        out = capsys.readouterr().out
        assert code == cli.EXIT_OK
        assert "Prospect Report for Target" in out
        assert "Source A" in out

    def test_blank_company_rejected(self, capsys) -> None:
        port = ScriptedModelPort.succeeding()
        code = cli._cmd_generate(_args(company="  "), orchestrator=_orchestrator(port))
        assert code == cli.EXIT_FAILURE
        assert port.call_count == 0

    def test_fatal_error_exit_code(self, capsys) -> None:
        port = ScriptedModelPort.always_failing("400 bad request")
        code = cli._cmd_generate(_args(), orchestrator=_orchestrator(port))
        assert code == cli.EXIT_FAILURE
        assert "400" in capsys.readouterr().out

    def test_credential_error_exit_code(self) -> None:
        port = ScriptedModelPort.succeeding()
        code = cli._cmd_generate(_args(), orchestrator=_orchestrator(port, api_key=None))
        assert code == cli.EXIT_CREDENTIAL

    def test_unknown_export_format_rejected_before_model_call(self, tmp_path, capsys) -> None:
        port = ScriptedModelPort.succeeding("## Hi")
        path = tmp_path / "report.pdf"
        code = cli._cmd_generate(
            _args(output=str(path)), orchestrator=_orchestrator(port)
        )
        assert code == cli.EXIT_FAILURE
        assert port.call_count == 0
        assert not path.exists()
        assert "format must be one of" in capsys.readouterr().err

    def test_explicit_format_used_for_export(self, tmp_path, capsys) -> None:
        path = tmp_path / "report.txt"
        port = ScriptedModelPort.succeeding("## Hi")
        code = cli._cmd_generate(
            _args(output=str(path), format="json"), orchestrator=_orchestrator(port)
        )
        assert code == cli.EXIT_OK
        assert "Exported [json]" in capsys.readouterr().out

    def test_output_written(self, tmp_path, capsys) -> None:
        path = tmp_path / "report.md"
        port = ScriptedModelPort.succeeding("## Hi")
        code = cli._cmd_generate(
            _args(output=str(path)), orchestrator=_orchestrator(port)
        )
        assert code == cli.EXIT_OK
        assert path.read_text(encoding="utf-8").startswith("## Hi")


class TestLoadConfigs:

    def test_flags_override_file(self, tmp_path) -> None:
        cfg = tmp_path / "config.json"
        cfg.write_text(
            '{"model": {"model": "from-file"}, "retry": {"max_attempts": 5}}',
            encoding="utf-8",
        )
        model_config, retry_config = cli._load_configs(
            _args(config=str(cfg), model="from-flag", no_grounding=True)
        )
        assert model_config.model == "from-flag"
        assert model_config.enable_search_grounding is False
        assert retry_config.max_attempts == 5

    def test_defaults_without_file(self) -> None:
        model_config, retry_config = cli._load_configs(_args())
        assert retry_config.max_attempts == 3
        assert model_config.enable_search_grounding is True


class TestLogLevel:

    def test_default_is_warning(self) -> None:
        assert cli._log_level(0) == logging.WARNING

    def test_single_flag_enables_debug(self) -> None:
        assert cli._log_level(1) == logging.DEBUG
        assert cli._log_level(2) == logging.DEBUG
