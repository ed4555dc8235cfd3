"""Typer CLI interface for Decision Trace."""

import json
import logging
from pathlib import Path
from typing import Any

import typer

app = typer.Typer(
    name="decision-trace",
    help="Decision Trace: normalize and validate LLM-extracted decision data.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Decision Trace: normalize and validate LLM-extracted decision data."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_json(file_path: Path) -> Any:
    """Read a JSON document, exiting with code 2 if it cannot be read."""
    try:
        return json.loads(file_path.read_text())
    except FileNotFoundError:
        typer.echo(f"Error: File not found: {file_path}", err=True)
        raise typer.Exit(2)
    except json.JSONDecodeError as exc:
        typer.echo(f"Error: {file_path.name} is not valid JSON: {exc}", err=True)
        raise typer.Exit(2)


def _emit(document: Any, output: Path | None = None) -> None:
    text = json.dumps(document, indent=2, ensure_ascii=False)
    if output is None:
        typer.echo(text)
    else:
        output.write_text(text + "\n")
        typer.echo(f"Wrote {output}", err=True)


@app.command()
def normalize(
    file: Path = typer.Argument(..., help="Step 2 JSON: a full {step, status, data} envelope or the data object"),
    data_only: bool = typer.Option(
        False,
        "--data-only",
        help="Treat the file as the data object even when it has a 'data' key",
    ),
) -> None:
    """Normalize decision data into the canonical camelCase view model.

    Files holding a 'data' object are read as step envelopes.
    """
    from decision_trace.normalization.decision import normalize_decision_data, normalize_step2_response

    raw = _load_json(file)
    envelope = not data_only and isinstance(raw, dict) and isinstance(raw.get("data"), dict)

    view = normalize_step2_response(raw) if envelope else normalize_decision_data(raw)
    _emit(view)


@app.command()
def validate(
    file: Path = typer.Argument(..., help="Decision ledger JSON"),
    json_output: bool = typer.Option(False, "--json", help="Output the result as JSON"),
) -> None:
    """Check a decision ledger for required structure. Exits 1 when invalid."""
    from decision_trace.validation.ledger import validate_decision_ledger

    result = validate_decision_ledger(_load_json(file))

    if json_output:
        _emit(result.as_dict())
    else:
        from rich.console import Console
        from rich.table import Table

        console = Console()
        if result.ok:
            console.print(f"[green]OK[/green] {file.name} is a structurally complete decision ledger")
        else:
            console.print(f"[red]INVALID[/red] {file.name}: {result.error}")
            table = Table(title="Missing fields")
            table.add_column("#", justify="right")
            table.add_column("Field")
            for i, field_path in enumerate(result.missing_fields, start=1):
                table.add_row(str(i), field_path)
            console.print(table)

    if not result.ok:
        raise typer.Exit(1)


@app.command(name="normalize-ledger")
def normalize_ledger_cmd(
    file: Path = typer.Argument(..., help="Ledger-like JSON produced by the extraction model"),
    ensure_rationale: bool = typer.Option(
        False,
        "--ensure-rationale",
        help="Derive score rationale when it is missing or too generic",
    ),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the ledger here instead of stdout"),
) -> None:
    """Coerce ledger-like JSON into a complete decision ledger."""
    from decision_trace.exceptions import LedgerInputError
    from decision_trace.normalization.ledger import normalize_ledger
    from decision_trace.normalization.rationale import ensure_score_rationale

    try:
        ledger = normalize_ledger(_load_json(file))
    except LedgerInputError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(1)

    if ensure_rationale:
        ledger = ensure_score_rationale(ledger)
    _emit(ledger.to_document(), output)


@app.command(name="check-step")
def check_step(
    file: Path = typer.Argument(..., help="Stored step payload JSON ({step, status, data, ...})"),
) -> None:
    """Validate a pipeline step payload against its schema. Exits 1 on errors."""
    from decision_trace.validation.steps import validate_step_payload

    result = validate_step_payload(_load_json(file))
    if result.success:
        typer.echo(f"OK: {file.name} is a valid step {result.data.step} payload")
        return

    typer.echo(f"{file.name}: {len(result.errors)} validation error(s)", err=True)
    for message in result.errors:
        typer.echo(f"  - {message}", err=True)
    raise typer.Exit(1)


@app.command(name="echo-check")
def echo_check(
    file: Path = typer.Argument(..., help="Generated JSON to inspect"),
    source: Path = typer.Option(..., "--source", "-s", help="Plain-text source document"),
    threshold: float = typer.Option(30.0, "--threshold", "-t", help="Maximum allowed overlap percentage"),
) -> None:
    """List fields that copy the source document verbatim. Exits 1 if any are found."""
    from decision_trace.validation.echo import find_echo_violations

    data = _load_json(file)
    if not isinstance(data, dict):
        typer.echo("Error: expected a JSON object", err=True)
        raise typer.Exit(2)
    try:
        source_text = source.read_text()
    except FileNotFoundError:
        typer.echo(f"Error: File not found: {source}", err=True)
        raise typer.Exit(2)

    violations = find_echo_violations(data, source_text, threshold)
    if not violations:
        typer.echo("No echoed fields found")
        return

    typer.echo(f"{len(violations)} field(s) exceed {threshold:g}% overlap with {source.name}:")
    for path in violations:
        typer.echo(f"  {path}")
    raise typer.Exit(1)


if __name__ == "__main__":
    app()
