from __future__ import annotations

import json
import re
from pathlib import Path

import pytest
from click.testing import CliRunner

from lib_log_facade import __init__conf__
from lib_log_facade import cli as cli_mod


ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes."""

    return ANSI_RE.sub("", text)


def run_cli(args: list[str] | None = None):
    runner = CliRunner()
    return runner.invoke(cli_mod.cli, args or [], prog_name=__init__conf__.shell_command)


def test_cli_without_subcommand_prints_summary() -> None:
    result = run_cli()

    assert result.exit_code == 0
    assert result.output == cli_mod.summary_info()


def test_cli_info_command_matches_summary() -> None:
    result = run_cli(["info"])

    assert result.exit_code == 0
    assert "Info for lib_log_facade" in result.output
    assert "version" in result.output


def test_cli_version_flag() -> None:
    result = run_cli(["--version"])

    assert result.exit_code == 0
    assert result.output.strip() == __init__conf__.version


def test_cli_render_pattern() -> None:
    result = run_cli(["render", "%-5p %c{1} - %m%n", "-m", "ok", "-c", "app.db", "-l", "warn"])

    assert result.exit_code == 0
    assert result.output == "WARN  db - ok\n"


def test_cli_render_appends_newline_when_pattern_has_none() -> None:
    result = run_cli(["render", "%p"])

    assert result.output == "INFO\n"


def test_cli_demo_uses_config_file(tmp_path: Path) -> None:
    config_file = tmp_path / "demo.json"
    config_file.write_text(
        json.dumps(
            {
                "appenders": [{"type": "console", "layout": {"type": "pattern", "pattern": "%p %c %m"}}],
                "levels": {"demo": "WARN"},
            }
        ),
        encoding="utf-8",
    )

    result = run_cli(["demo", "--config", str(config_file)])

    assert result.exit_code == 0, result.output
    assert strip_ansi(result.output).splitlines() == [
        "WARN demo warn message",
        "ERROR demo error message",
        "FATAL demo fatal message",
    ]


def test_cli_demo_defaults_to_console(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("LOG_FACADE_CONFIG", raising=False)

    result = run_cli(["demo"])

    assert result.exit_code == 0, result.output
    output = strip_ansi(result.output)
    assert "[TRACE] demo - trace message" in output
    assert "ValueError: sample failure" in output


def test_cli_demo_reports_configuration_errors(tmp_path: Path) -> None:
    config_file = tmp_path / "bad.json"
    config_file.write_text(json.dumps({"appenders": [{"type": "bogus"}]}), encoding="utf-8")

    result = run_cli(["demo", "--config", str(config_file)])

    assert result.exit_code == 1
    assert "Unknown appender type 'bogus'" in result.output


def test_main_returns_exit_codes(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli_mod.main(["render", "%m", "-m", "direct"]) == 0
    assert capsys.readouterr().out == "direct\n"
    assert cli_mod.main(["--version"]) == 0
    assert cli_mod.main(["no-such-command"]) == 2
