from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError

from doctags.commands import missing_tags_command, policy_for
from doctags.javadoc.inspection import MissingRole
from doctags.javadoc.rendering import render_doc_block
from doctags.logging_setup import configure_logging
from doctags.proposals import ProposalEngine
from doctags.schema import MissingTagsRequest, declaration_from_dto

app = typer.Typer(add_completion=False)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log placement decisions."),
) -> None:
    """Add missing Javadoc tags in canonical order."""
    configure_logging(verbose)


def _read_payload(path: str) -> dict[str, object]:
    try:
        raw = sys.stdin.read() if path == "-" else Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise typer.BadParameter(f"cannot read payload {path}: {exc}") from exc
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"payload {path} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise typer.BadParameter(f"payload {path} must be a JSON object")
    if "declaration" not in payload:
        payload = {"declaration": payload}
    return payload


def _parse_element(value: str) -> dict[str, object]:
    role, _, position = value.partition(":")
    try:
        parsed_role = MissingRole(role.strip())
    except ValueError as exc:
        choices = ", ".join(item.value for item in MissingRole)
        raise typer.BadParameter(f"unknown role {role!r} (expected one of {choices})") from exc
    try:
        parsed_position = int(position) if position.strip() else 0
    except ValueError as exc:
        raise typer.BadParameter(f"invalid position {position!r}") from exc
    return {"role": parsed_role.value, "position": parsed_position}


@app.command("plan")
def plan(
    payload_path: str = typer.Argument(..., help="Declaration JSON file, or '-' for stdin."),
    single: Optional[str] = typer.Option(
        None, "--single", help="Insert one tag only, given as ROLE[:POSITION]."
    ),
    root: Path = typer.Option(Path("."), "--root"),
    config: Optional[Path] = typer.Option(None, "--config"),
) -> None:
    """Print the tag insertions for a declaration as JSON."""
    payload = _read_payload(payload_path)
    if single is not None:
        payload["element"] = _parse_element(single)
    result = missing_tags_command(payload, root=root, config_path=config)
    typer.echo(json.dumps(result, indent=2, sort_keys=True))
    if result.get("errors"):
        raise typer.Exit(code=2)


@app.command("render")
def render(
    payload_path: str = typer.Argument(..., help="Declaration JSON file, or '-' for stdin."),
    root: Path = typer.Option(Path("."), "--root"),
    config: Optional[Path] = typer.Option(None, "--config"),
) -> None:
    """Print the doc comment after all missing tags are added."""
    payload = _read_payload(payload_path)
    try:
        request = MissingTagsRequest.model_validate(payload)
    except ValidationError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    declaration = declaration_from_dto(request.declaration)
    engine = ProposalEngine(policy=policy_for(request, root, config))
    result = engine.plan_missing_tags(declaration, request.indent)
    for warning in result.warnings:
        typer.echo(warning, err=True)
    if result.stub is not None:
        typer.echo(result.stub, nl=False)
    elif declaration.doc is not None:
        typer.echo(render_doc_block(declaration.doc), nl=False)


@app.command("lsp")
def lsp() -> None:
    """Run the language server over stdio."""
    from doctags.server import start

    start()


if __name__ == "__main__":  # pragma: no cover
    app()  # pragma: no cover
