from __future__ import annotations

from pathlib import Path

import pytest

from tally import __version__
from tally.cli import build_parser, main


def test_cli_help_includes_subcommands(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main([])
    assert rc == 2
    out = capsys.readouterr().out
    assert "api" in out
    assert "status" in out


def test_cli_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["--version"])
    assert rc == 0
    assert capsys.readouterr().out.strip() == f"tally v{__version__}"


def test_cli_api_args_parse() -> None:
    args = build_parser().parse_args(["api", "--host", "0.0.0.0", "--port", "9000"])
    assert args.command == "api"
    assert args.host == "0.0.0.0"
    assert args.port == 9000


def test_cli_status_uses_defaults_without_config(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str], test_config
) -> None:
    monkeypatch.chdir(tmp_path)
    rc = main(["status"])
    assert rc == 0
    out = capsys.readouterr().out
    assert "built-in defaults" in out
    assert "127.0.0.1:8000" in out


def test_cli_status_reads_explicit_config(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], test_config
) -> None:
    path = tmp_path / "tally.yaml"
    path.write_text("api:\n  port: 9300\n")
    rc = main(["status", "--config", str(path)])
    assert rc == 0
    out = capsys.readouterr().out
    assert str(path) in out
    assert "127.0.0.1:9300" in out


def test_cli_api_reports_config_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    rc = main(["api", "--config", str(tmp_path / "missing.yaml")])
    assert rc == 1
    assert "config error" in capsys.readouterr().err


def test_cli_api_runs_uvicorn_with_resolved_settings(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, test_config
) -> None:
    import uvicorn

    calls: dict = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr(uvicorn, "run", fake_run)
    monkeypatch.setattr("tally.core.log.configure_logging", lambda cfg: None)
    monkeypatch.chdir(tmp_path)

    rc = main(["api", "--port", "9400"])
    assert rc == 0
    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 9400
    assert calls["log_level"] == "info"
    assert calls["log_config"] is None
    assert calls["app"].state.store is not None
