from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from subreflow.cli.main import app
from subreflow.exceptions import ConfigurationError

SRT = "1\n00:00:01,000 --> 00:00:03,000\nHello\n"


def test_cli_reports_config_error(monkeypatch, tmp_path: Path) -> None:
    import subreflow.cli.main as cli_main

    def fake_get_rules(_language):  # noqa: ANN001
        raise ConfigurationError("bad config value")

    monkeypatch.setattr(cli_main, "get_rules", fake_get_rules)
    source = tmp_path / "in.srt"
    source.write_text(SRT, encoding="utf-8")

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["fix", str(source)])

    assert result.exit_code == 2
    assert "Configuration error: bad config value" in result.stderr


def test_cli_rejects_invalid_setting_from_env(monkeypatch) -> None:
    monkeypatch.setenv("SUBREFLOW_MAX_LINES", "0")

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["config"])

    assert result.exit_code == 2
    assert "Configuration error: Invalid settings" in result.stderr


def test_cli_rejects_unknown_language(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("SUBREFLOW_LANGUAGE", "xx")
    source = tmp_path / "in.srt"
    source.write_text(SRT, encoding="utf-8")

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["fix", str(source)])

    assert result.exit_code == 2
    assert "No rule tables for language 'xx'" in result.stderr


def test_cli_reports_missing_input(tmp_path: Path) -> None:
    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["fix", str(tmp_path / "missing.srt")])

    assert result.exit_code == 4
    assert "Input error: Input file not found" in result.stderr


def test_cli_rejects_non_subtitle_input(tmp_path: Path) -> None:
    source = tmp_path / "notes.txt"
    source.write_text("just some notes\n\nnothing timed here", encoding="utf-8")

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["check", str(source)])

    assert result.exit_code == 4
    assert "Input error: No SubRip timing lines found" in result.stderr


def test_cli_reports_missing_cue_position(tmp_path: Path) -> None:
    source = tmp_path / "in.srt"
    source.write_text(SRT, encoding="utf-8")

    runner = CliRunner(mix_stderr=False)
    result = runner.invoke(app, ["fix", str(source), "--only", "5"])

    assert result.exit_code == 4
    assert "Input error: No cue at position 5" in result.stderr
