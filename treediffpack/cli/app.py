import json
from importlib.metadata import PackageNotFoundError, version as package_version
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer

from treediffpack.core import DiffConfigError, DiffDepthError, DocumentError
from treediffpack.diff import (
    DiffOptions,
    assert_trees,
    diff_values,
    render_diff_summary,
    render_differences,
)
from treediffpack.documents import load_document

app = typer.Typer(help="treediff CLI")


@dataclass(slots=True)
class _OutputOptions:
    quiet: bool = False
    stable_json: bool = True


_OUTPUT_OPTIONS = _OutputOptions()


def _resolve_cli_version() -> str:
    try:
        return package_version("treediff")
    except PackageNotFoundError:
        from treediff import __version__ as local_version

        return local_version


def _version_callback(value: bool) -> None:
    if not value:
        return
    typer.echo(_resolve_cli_version(), color=False)
    raise typer.Exit()


@app.callback()
def app_options(
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show treediff version and exit.",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress non-error text output.",
    ),
    stable_json: bool = typer.Option(
        True,
        "--stable-json/--pretty-json",
        help="Emit stable compact JSON (or pretty JSON).",
    ),
) -> None:
    """Global output controls for all CLI commands."""
    _OUTPUT_OPTIONS.quiet = quiet
    _OUTPUT_OPTIONS.stable_json = stable_json


def _echo(message: str, *, err: bool = False, force: bool = False) -> None:
    if _OUTPUT_OPTIONS.quiet and not err and not force:
        return
    typer.echo(message, err=err)


def _echo_json(payload: dict[str, Any], *, err: bool = False) -> None:
    if _OUTPUT_OPTIONS.stable_json:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            separators=(",", ":"),
        )
    else:
        rendered = json.dumps(
            payload,
            ensure_ascii=True,
            sort_keys=True,
            indent=2,
        )
    typer.echo(rendered, err=err)


def _fail(
    message: str,
    *,
    json_output: bool,
    exit_code: int,
    extra: dict[str, Any] | None = None,
) -> typer.Exit:
    if json_output:
        _echo_json({"status": "error", "exit_code": exit_code, "message": message, **(extra or {})})
    else:
        _echo(message, err=True)
    return typer.Exit(code=exit_code)


@app.command()
def diff(
    left: Path = typer.Argument(..., help="Path to left JSON document."),
    right: Path = typer.Argument(..., help="Path to right JSON document."),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable diff output.",
    ),
    max_changes: int = typer.Option(
        8,
        "--max-changes",
        help="Maximum number of differences to print in text mode.",
    ),
    max_depth: int | None = typer.Option(
        None,
        "--max-depth",
        help="Refuse to descend into more than this many nested arrays/objects.",
    ),
    limit: int | None = typer.Option(
        None,
        "--limit",
        help="Stop collecting after this many differences.",
    ),
    decimal_numbers: bool = typer.Option(
        False,
        "--decimal-numbers",
        help="Parse fractional numbers as exact decimals.",
    ),
) -> None:
    """Diff two JSON documents and list every divergent path."""
    paths = {"left_path": str(left), "right_path": str(right)}
    try:
        options = DiffOptions(max_depth=max_depth, max_differences=limit)
    except DiffConfigError as error:
        raise _fail(
            f"diff failed: {error}", json_output=json_output, exit_code=2, extra=paths
        ) from error

    try:
        left_tree = load_document(left, decimal_numbers=decimal_numbers)
        right_tree = load_document(right, decimal_numbers=decimal_numbers)
    except DocumentError as error:
        raise _fail(
            f"diff failed: {error}", json_output=json_output, exit_code=1, extra=paths
        ) from error

    try:
        result = diff_values(left_tree, right_tree, options=options)
    except DiffDepthError as error:
        raise _fail(
            f"diff failed: {error}", json_output=json_output, exit_code=2, extra=paths
        ) from error

    if json_output:
        _echo_json(
            {
                **result.to_dict(),
                "status": "ok",
                "exit_code": 0,
                "message": "diff completed",
                "options": options.to_dict(),
                **paths,
            }
        )
        return

    _echo(render_diff_summary(result))
    _echo(render_differences(result, max_changes=max_changes))


@app.command(name="assert")
def assert_document(
    baseline: Path = typer.Argument(..., help="Path to baseline JSON document."),
    candidate: Path | None = typer.Option(
        None,
        "--candidate",
        "-c",
        help="Path to candidate JSON document to compare against baseline.",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Emit machine-readable assertion output.",
    ),
    max_changes: int = typer.Option(
        8,
        "--max-changes",
        help="Maximum number of differences to print in text mode.",
    ),
    decimal_numbers: bool = typer.Option(
        False,
        "--decimal-numbers",
        help="Parse fractional numbers as exact decimals.",
    ),
) -> None:
    """Assert candidate document matches baseline document."""
    if candidate is None:
        raise _fail(
            "assert failed: missing candidate document. Provide --candidate PATH.",
            json_output=json_output,
            exit_code=1,
        )

    try:
        baseline_tree = load_document(baseline, decimal_numbers=decimal_numbers)
        candidate_tree = load_document(candidate, decimal_numbers=decimal_numbers)
    except DocumentError as error:
        raise _fail(
            f"assert failed: {error}", json_output=json_output, exit_code=1
        ) from error

    result = assert_trees(baseline_tree, candidate_tree)

    if json_output:
        payload = result.to_dict()
        payload["baseline_path"] = str(baseline)
        payload["candidate_path"] = str(candidate)
        _echo_json(payload)
    else:
        if result.passed:
            _echo(f"assert passed: baseline={baseline} candidate={candidate}")
        else:
            _echo(
                f"assert failed: divergence detected (baseline={baseline} candidate={candidate})",
                force=True,
            )
            _echo(render_diff_summary(result.diff))
            _echo(render_differences(result.diff, max_changes=max_changes))

    if not result.passed:
        raise typer.Exit(code=result.exit_code)


def main() -> None:
    app()
