"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner
from metamodel_codegen.cli import cli, main


def _sample_path() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "sample-meta-model.json"


def test_emit_writes_declarations_to_stdout() -> None:
    runner = CliRunner()

    result = runner.invoke(cli, ["emit", "--source-file", str(_sample_path())])

    assert result.exit_code == 0
    assert result.output.startswith("type Position struct {\n")
    assert result.output.endswith(
        '\tCodeDescription *CodeDescription `json:"codeDescription,omitempty"`\n}\n'
    )
    assert result.output.count("type Position struct") == 1


def test_emit_writes_declarations_to_file(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "range.go"

    result = runner.invoke(
        cli,
        [
            "emit",
            "--source-file",
            str(_sample_path()),
            "--type",
            "Range",
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0
    assert result.output == ""
    assert output_path.read_text(encoding="utf-8") == (
        "type Position struct {\n"
        '\tLine string `json:"line"`\n'
        '\tCharacter string `json:"character"`\n'
        "}\n"
        "type Range struct {\n"
        '\tStart *Position `json:"start"`\n'
        '\tEnd *Position `json:"end"`\n'
        "}\n"
    )


def test_emit_reads_configuration_file(tmp_path: Path) -> None:
    config_path = tmp_path / "metamodel-codegen.yaml"
    config_path.write_text(
        json.dumps(
            {
                "source": {"path": str(_sample_path())},
                "generation": {"type_name": "HoverParams", "flatten_inheritance": False},
            }
        ),
        encoding="utf-8",
    )
    runner = CliRunner()

    result = runner.invoke(cli, ["emit", "--config", str(config_path)])

    assert result.exit_code == 0
    assert result.output == "type HoverParams struct {\n}\n"


def test_unsupported_type_exits_non_zero(capsys) -> None:
    exit_code = main(
        ["emit", "--source-file", str(_sample_path()), "--type", "PublishDiagnosticsParams"]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "No Go type mapping for base type 'integer'" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_structure_exits_non_zero(capsys) -> None:
    exit_code = main(["emit", "--source-file", str(_sample_path()), "--type", "MarkupKind"])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Structure not found: MarkupKind" in captured.err


def test_generate_config_writes_scaffold(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "metamodel-codegen.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert output_path.exists()
    assert str(output_path.resolve()) in result.output


def test_generate_config_refuses_to_overwrite(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "metamodel-codegen.yaml"
    output_path.write_text("existing", encoding="utf-8")

    exit_code = main(["generate-config", "--output", str(output_path)])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "already exists" in captured.err


def test_no_flatten_ignores_unknown_parent(tmp_path: Path) -> None:
    meta_model_path = tmp_path / "meta-model.json"
    meta_model_path.write_text(
        json.dumps(
            {
                "metaData": {"version": "1"},
                "structures": [
                    {
                        "name": "Child",
                        "properties": [
                            {"name": "name", "type": {"kind": "base", "name": "string"}}
                        ],
                        "extends": [{"kind": "reference", "name": "Gone"}],
                    }
                ],
            }
        ),
        encoding="utf-8",
    )
    runner = CliRunner()
    arguments = ["emit", "--source-file", str(meta_model_path), "--type", "Child"]

    flattened = runner.invoke(cli, arguments)
    unflattened = runner.invoke(cli, [*arguments, "--no-flatten"])

    assert flattened.exit_code == 1
    assert "Reference not found: Gone" in str(flattened.exception)
    assert unflattened.exit_code == 0
    assert unflattened.output == 'type Child struct {\n\tName string `json:"name"`\n}\n'


def test_failed_run_keeps_existing_output_file(tmp_path: Path, capsys) -> None:
    output_path = tmp_path / "out.go"
    output_path.write_text("package lsp\n", encoding="utf-8")

    exit_code = main(
        [
            "emit",
            "--source-file",
            str(tmp_path / "missing.json"),
            "--output",
            str(output_path),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Failed to read meta-model file" in captured.err
    assert output_path.read_text(encoding="utf-8") == "package lsp\n"
