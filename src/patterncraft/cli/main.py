"""Command line interface entry points."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from ..config import configure_logging, get_settings
from ..errors import IngestionFailure

app = typer.Typer()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override PATTERNCRAFT_LOG_LEVEL"),
) -> None:
    """Classify datasets into fibonacci, sine-wave or exponential patterns."""

    configure_logging(log_level.upper() if log_level else None)


@app.command("classify")
def classify(
    path: Path = typer.Argument(..., exists=True, file_okay=True, dir_okay=False),
    source_name: Optional[str] = typer.Option(
        None, "--source-name", help="Name used for the filename hint (defaults to the file name)"
    ),
    save: bool = typer.Option(False, "--save/--no-save", help="Persist the result"),
    owner: str = typer.Option("anonymous", "--owner"),
) -> None:
    """Classify a CSV or JSON dataset and print the result as JSON."""

    from ..detect.engine import classify_file

    try:
        result = classify_file(path, source_name=source_name)
    except IngestionFailure as exc:
        typer.echo(f"Classification failed: {exc}", err=True)
        raise typer.Exit(1)

    payload = result.to_dict()
    if save:
        from ..persistence import PatternRecord, PatternResultsRepository, session

        record = PatternRecord.from_result(
            result, owner_id=owner, filename=path.name, original_name=source_name or path.name
        )
        with session() as conn:
            payload["id"] = PatternResultsRepository(conn).insert(record)
    typer.echo(json.dumps(payload, separators=(",", ":")))


@app.command("patterns")
def patterns(
    owner: str = typer.Option("anonymous", "--owner"),
    limit: Optional[int] = typer.Option(None, "--limit", min=1),
) -> None:
    """Print the most recent persisted results for an owner."""

    from ..persistence import PatternResultsRepository, session

    with session() as conn:
        records = PatternResultsRepository(conn).list_recent(
            owner, limit=limit or get_settings().recent_limit
        )
    typer.echo(json.dumps([r.to_dict() for r in records], separators=(",", ":")))


if __name__ == "__main__":
    app()
