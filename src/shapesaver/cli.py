from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Optional
import json
import sys

import typer

from shapesaver.codec import format_text, parse_document, render_document
from shapesaver.config import (
    DEFAULT_LIMIT,
    default_collapsed,
    default_indent,
    default_limit,
    merge_payload,
    render_defaults,
    tree_defaults,
    trim_defaults,
)
from shapesaver.dto import ShapeReportDTO
from shapesaver.exceptions import DocumentParseError, OutputWriteError, ShapeSaverError
from shapesaver.infer import generate_schema, generate_schema_from_samples
from shapesaver.limits import parse_limit
from shapesaver.tree_view import format_tree, render_tree, toggle_collapsed
from shapesaver.trim import trim
from shapesaver.value_model import JsonValue, to_json

app = typer.Typer(add_completion=False)

_STDIO_ALIAS = "-"


def _read_input(source: Path) -> str:
    try:
        if str(source) == _STDIO_ALIAS:
            return sys.stdin.read()
        return source.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DocumentParseError(f"{source} is not valid UTF-8: {exc.reason}") from exc
    except OSError as exc:
        raise typer.BadParameter(f"Cannot read {source}: {exc}") from exc


def _write_output(target: Optional[Path], payload: str) -> None:
    if target is None or str(target) == _STDIO_ALIAS:
        typer.echo(payload)
        return
    try:
        target.write_text(payload + "\n", encoding="utf-8")
    except (OSError, UnicodeError) as exc:
        raise OutputWriteError(str(exc)) from exc


def _fail(error: ShapeSaverError) -> typer.Exit:
    typer.secho(error.report(), err=True, fg=typer.colors.RED)
    return typer.Exit(code=1)


def _run_reported(action: Callable[[], None]) -> None:
    try:
        action()
    except ShapeSaverError as exc:
        raise _fail(exc) from exc


def _resolve_limit(limit: Optional[str], *, root: Optional[Path], config: Optional[Path]) -> int:
    settings = merge_payload({"limit": limit}, trim_defaults(root=root, config_path=config))
    return default_limit(settings)


def _resolve_indent(indent: Optional[int], *, root: Optional[Path], config: Optional[Path]) -> int:
    if indent is not None and indent < 0:
        raise typer.BadParameter("--indent must be non-negative.")
    settings = merge_payload({"indent": indent}, render_defaults(root=root, config_path=config))
    return default_indent(settings)


@app.command("trim")
def trim_command(
    source: Path = typer.Argument(..., help="JSON document to trim; use '-' for stdin."),
    limit: Optional[str] = typer.Option(
        None, "--limit", "-n", help="Maximum number of items kept in every array."
    ),
    indent: Optional[int] = typer.Option(None, "--indent"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the result to this path or '-' for stdout."
    ),
    root: Optional[Path] = typer.Option(None, "--root"),
    config: Optional[Path] = typer.Option(None, "--config"),
) -> None:
    """Cap every array at --limit items while keeping the document structure."""

    def _run() -> None:
        resolved_limit = _resolve_limit(limit, root=root, config=config)
        resolved_indent = _resolve_indent(indent, root=root, config=config)
        value = parse_document(_read_input(source))
        trimmed = trim(value, resolved_limit)
        _write_output(output, render_document(trimmed, indent=resolved_indent))

    _run_reported(_run)


@app.command("schema")
def schema_command(
    sources: List[Path] = typer.Argument(
        ..., help="One or more sample documents; use '-' for stdin."
    ),
    indent: Optional[int] = typer.Option(None, "--indent"),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
    root: Optional[Path] = typer.Option(None, "--root"),
    config: Optional[Path] = typer.Option(None, "--config"),
) -> None:
    """Infer a JSON Schema; several samples are merged into one schema."""

    def _run() -> None:
        resolved_indent = _resolve_indent(indent, root=root, config=config)
        values = [parse_document(_read_input(source)) for source in sources]
        if len(values) == 1:
            schema = generate_schema(values[0])
        else:
            schema = generate_schema_from_samples(values)
        _write_output(output, render_document(schema, indent=resolved_indent))

    _run_reported(_run)


@app.command("format")
def format_command(
    source: Path = typer.Argument(..., help="JSON document to pretty-print."),
    indent: Optional[int] = typer.Option(None, "--indent"),
    output: Optional[Path] = typer.Option(None, "--output", "-o"),
    root: Optional[Path] = typer.Option(None, "--root"),
    config: Optional[Path] = typer.Option(None, "--config"),
) -> None:
    """Re-indent a JSON document without changing it."""

    def _run() -> None:
        resolved_indent = _resolve_indent(indent, root=root, config=config)
        _write_output(output, format_text(_read_input(source), indent=resolved_indent))

    _run_reported(_run)


@app.command("tree")
def tree_command(
    source: Path = typer.Argument(..., help="JSON document to show as a tree."),
    limit: Optional[str] = typer.Option(
        None, "--limit", "-n", help="Trim arrays before rendering."
    ),
    collapse: Optional[List[str]] = typer.Option(
        None,
        "--collapse",
        help="Toggle collapse for a structural path such as $.users[0] (repeatable).",
    ),
    root: Optional[Path] = typer.Option(None, "--root"),
    config: Optional[Path] = typer.Option(None, "--config"),
) -> None:
    """Render a document as a collapsible tree keyed by structural paths."""

    def _run() -> None:
        value: JsonValue = parse_document(_read_input(source))
        if limit is not None:
            value = trim(value, parse_limit(limit))
        collapsed = frozenset(default_collapsed(tree_defaults(root=root, config_path=config)))
        for path in collapse or []:
            collapsed = toggle_collapsed(collapsed, path)
        typer.echo(format_tree(render_tree(value, collapsed)))

    _run_reported(_run)


@app.command("report")
def report_command(
    source: Path = typer.Argument(..., help="JSON document; use '-' for stdin."),
    limit: Optional[str] = typer.Option(None, "--limit", "-n"),
    root: Optional[Path] = typer.Option(None, "--root"),
    config: Optional[Path] = typer.Option(None, "--config"),
) -> None:
    """Emit the trimmed document and its schema in one JSON envelope."""
    resolved_limit = DEFAULT_LIMIT
    errors: list[str] = []
    trimmed = None
    schema_payload: dict[str, object] = {}
    try:
        resolved_limit = _resolve_limit(limit, root=root, config=config)
        value = parse_document(_read_input(source))
        trimmed = to_json(trim(value, resolved_limit))
        schema_payload = generate_schema(value).to_json()
    except ShapeSaverError as exc:
        errors.append(exc.report())
    result = ShapeReportDTO(
        source=str(source),
        limit=resolved_limit,
        trimmed=trimmed,
        json_schema=schema_payload,
        errors=errors,
        exit_code=1 if errors else 0,
    )
    _emit_report(result)


def _emit_report(result: ShapeReportDTO) -> None:
    normalized = result.model_dump()
    typer.echo(json.dumps(normalized, indent=2, ensure_ascii=False))
    for error in result.errors:
        typer.secho(str(error), err=True, fg=typer.colors.RED)
    if result.exit_code:
        raise typer.Exit(code=result.exit_code)


def main() -> None:
    app()
