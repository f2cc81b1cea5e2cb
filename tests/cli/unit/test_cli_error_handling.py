"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from metamodel_codegen.cli import main


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["emit", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_invalid_log_level_returns_clean_click_error(capsys) -> None:
    exit_code = main(["emit", "--log-level", "loud"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "--log-level" in captured.err


def test_missing_configuration_file_exits_non_zero(tmp_path: Path, capsys) -> None:
    exit_code = main(["emit", "--config", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert "Traceback" not in captured.err


def test_missing_source_file_exits_non_zero(tmp_path: Path, capsys) -> None:
    exit_code = main(["emit", "--source-file", str(tmp_path / "missing.json")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to read meta-model file" in captured.err
