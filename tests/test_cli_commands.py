from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from doctags import cli
from tests.payloads import foo_declaration


@pytest.fixture(autouse=True)
def _restore_logging():
    yield
    logger.remove()
    logger.add(sys.stderr)


def _write(tmp_path: Path, payload: dict) -> Path:
    path = tmp_path / "decl.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_cli_help_lists_subcommands() -> None:
    result = CliRunner().invoke(cli.app, ["--help"])
    assert result.exit_code == 0
    for name in ("plan", "render", "lsp"):
        assert name in result.output


def test_plan_prints_insertions(tmp_path: Path) -> None:
    path = _write(tmp_path, {"declaration": foo_declaration()})
    result = CliRunner().invoke(cli.app, ["plan", str(path), "--root", str(tmp_path)])
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert [item["rendered"] for item in payload["insertions"]] == [
        "@param b",
        "@param a",
        "@return",
        "@throws IOException",
    ]


def test_plan_accepts_bare_declaration_on_stdin(tmp_path: Path) -> None:
    result = CliRunner().invoke(
        cli.app,
        ["plan", "-", "--single", "return", "--root", str(tmp_path)],
        input=json.dumps(foo_declaration()),
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert [item["rendered"] for item in payload["insertions"]] == ["@return"]


def test_plan_rejects_unknown_role(tmp_path: Path) -> None:
    path = _write(tmp_path, {"declaration": foo_declaration()})
    result = CliRunner().invoke(cli.app, ["plan", str(path), "--single", "annotation:0"])
    assert result.exit_code != 0


def test_plan_exits_with_errors_for_invalid_payload(tmp_path: Path) -> None:
    path = _write(tmp_path, {"declaration": {"kind": "module"}})
    result = CliRunner().invoke(cli.app, ["plan", str(path), "--root", str(tmp_path)])
    assert result.exit_code == 2


def test_render_prints_completed_comment(tmp_path: Path) -> None:
    path = _write(tmp_path, foo_declaration())
    result = CliRunner().invoke(cli.app, ["render", str(path), "--root", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert result.stdout == (
        "/**\n"
        " * Does foo.\n"
        " *\n"
        " * @param a\n"
        " * @param b\n"
        " * @return\n"
        " * @throws IOException\n"
        " */\n"
    )


def test_render_prints_stub_for_undocumented(tmp_path: Path) -> None:
    payload = foo_declaration()
    payload["doc"] = None
    path = _write(tmp_path, payload)
    result = CliRunner().invoke(cli.app, ["render", str(path), "--root", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("/**\n")
    assert " * @throws Unresolved\n" in result.stdout


def test_render_honours_payload_overrides(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        {"declaration": foo_declaration(), "qualified_exception_names": True},
    )
    result = CliRunner().invoke(cli.app, ["render", str(path), "--root", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert " * @throws java.io.IOException\n" in result.stdout
    planned = CliRunner().invoke(cli.app, ["plan", str(path), "--root", str(tmp_path)])
    assert json.loads(planned.stdout)["insertions"][-1]["rendered"] == (
        "@throws java.io.IOException"
    )


def test_render_indents_stub_from_payload(tmp_path: Path) -> None:
    declaration = foo_declaration()
    declaration["doc"] = None
    path = _write(tmp_path, {"declaration": declaration, "indent": "  "})
    result = CliRunner().invoke(cli.app, ["render", str(path), "--root", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert result.stdout.startswith("/**\n   *\n   * @param a\n")
    assert result.stdout.endswith("   */\n  ")


def test_plan_single_skips_documented_parameter(tmp_path: Path) -> None:
    doc = {
        "tags": [{"name": "param", "fragments": [{"kind": "identifier", "value": "a"}]}]
    }
    path = _write(tmp_path, {"declaration": foo_declaration(doc)})
    result = CliRunner().invoke(
        cli.app, ["plan", str(path), "--single", "value_parameter:0", "--root", str(tmp_path)]
    )
    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["insertions"] == []
    assert payload["warnings"]


def test_render_logs_progress_to_stderr(tmp_path: Path) -> None:
    path = _write(tmp_path, foo_declaration())
    result = CliRunner().invoke(cli.app, ["render", str(path), "--root", str(tmp_path)])
    assert result.exit_code == 0, result.output
    assert "added 4 tag(s) to 'foo'" in result.stderr
    assert "added" not in result.stdout
