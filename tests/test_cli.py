"""CLI parser and command behaviour tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from install_bridge.cli import _build_parser, main
from install_bridge.config import BADGE_FILENAME, CONFIG_FILENAME


def test_cli_accepts_verbose_before_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["--verbose", "validate"])
    assert args.verbose is True
    assert args.command == "validate"


def test_cli_accepts_verbose_after_command() -> None:
    parser = _build_parser()
    args = parser.parse_args(["badge", "--verbose"])
    assert args.verbose is True
    assert args.command == "badge"
    assert args.path == "."


def test_cli_init_options() -> None:
    parser = _build_parser()
    args = parser.parse_args(["init", "project", "--name", "Demo", "--force"])
    assert args.path == "project"
    assert args.name == "Demo"
    assert args.force is True


def test_init_writes_template(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["init", str(tmp_path), "--name", "Demo"])
    data = json.loads((tmp_path / CONFIG_FILENAME).read_text(encoding="utf-8"))
    assert data["name"] == "Demo"
    assert "Config created at" in capsys.readouterr().out


def test_init_refuses_existing_config(tmp_path: Path) -> None:
    main(["init", str(tmp_path)])
    with pytest.raises(SystemExit) as excinfo:
        main(["init", str(tmp_path)])
    assert excinfo.value.code == 1


def test_validate_reports_success(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["init", str(tmp_path)])
    capsys.readouterr()
    main(["validate", str(tmp_path)])
    assert "Config is valid (3 installer(s))" in capsys.readouterr().out


def test_validate_lists_errors(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / CONFIG_FILENAME).write_text(
        json.dumps({"installers": {"windows": "https://example.com/app.exe"}}),
        encoding="utf-8",
    )
    with pytest.raises(SystemExit) as excinfo:
        main(["validate", str(tmp_path)])
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "name is required and must be a string" in err
    assert "invalid platform: windows" in err


def test_validate_missing_config(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["validate", str(tmp_path)])
    assert excinfo.value.code == 1


def test_badge_writes_svg_and_prints_snippets(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["init", str(tmp_path), "--name", "Demo"])
    capsys.readouterr()
    main(["badge", str(tmp_path)])
    svg = (tmp_path / BADGE_FILENAME).read_text(encoding="utf-8")
    assert svg.startswith("<svg")
    assert "Demo" in svg
    out = capsys.readouterr().out
    assert "[![Install Demo](./install-badge.svg)](https://github.com/user/repo)" in out


def test_snippets_uses_explicit_url(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    main(["init", str(tmp_path), "--name", "Demo"])
    capsys.readouterr()
    main(["snippets", str(tmp_path), "--badge-path", "badge.svg", "--url", "https://example.com/get"])
    out = capsys.readouterr().out
    assert "[![Install Demo](badge.svg)](https://example.com/get)" in out
    assert '<a href="https://example.com/get">' in out


def test_detect_prints_platform(capsys: pytest.CaptureFixture[str]) -> None:
    main(["detect", "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"])
    assert capsys.readouterr().out.strip() == "win32"


def test_cli_accepts_log_file_before_or_after_command() -> None:
    parser = _build_parser()
    assert parser.parse_args(["validate"]).log_file is None
    assert parser.parse_args(["--log-file", "a.log", "validate"]).log_file == Path("a.log")
    assert parser.parse_args(["validate", "--log-file", "b.log"]).log_file == Path("b.log")


def test_log_file_receives_verbose_output(tmp_path: Path) -> None:
    log_file = tmp_path / "bridge.log"
    main(["init", str(tmp_path), "--name", "Demo"])
    main(["badge", str(tmp_path), "--verbose", "--log-file", str(log_file)])
    content = log_file.read_text(encoding="utf-8")
    assert "Running badge" in content
    assert BADGE_FILENAME in content
