from __future__ import annotations

"""CLI entrypoint for docsim."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import ComparisonSettings, load_settings
from .runner.runner import ComparisonRunner
from .utils import textio
from .utils.logs import configure_logging, get_logger

app = typer.Typer(help="Edit-distance similarity checker for duplicate documents.")
console = Console()


def _settings_or_exit(config: Optional[Path]) -> ComparisonSettings:
    try:
        return load_settings(config)
    except (OSError, ValueError) as exc:
        console.print(f"[red]Bad configuration[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)


@app.command()
def compare(
    original: Path = typer.Argument(..., help="Path to the original document."),
    compared: Path = typer.Argument(..., help="Path to the document checked against it."),
    output: Path = typer.Argument(..., help="File that receives the similarity score."),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML file with comparison settings."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details."),
) -> None:
    logger = configure_logging(logging.DEBUG if verbose else logging.INFO)
    settings = _settings_or_exit(config)
    runner = ComparisonRunner(settings, logger=get_logger("runner"))
    try:
        record = runner.run(original, compared, output)
    except (OSError, UnicodeDecodeError) as exc:
        logger.debug("Comparison aborted", exc_info=exc)
        console.print(f"[red]Comparison failed[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)
    console.print(record.formatted)


@app.command()
def inspect(
    original: Path = typer.Argument(..., help="Path to the original document."),
    compared: Path = typer.Argument(..., help="Path to the document checked against it."),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="YAML file with comparison settings."
    ),
) -> None:
    settings = _settings_or_exit(config)
    try:
        original_text = textio.read_document(original, encoding=settings.encoding)
        compared_text = textio.read_document(compared, encoding=settings.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        console.print(f"[red]Could not read input[/red]: {escape(str(exc))}")
        raise typer.Exit(code=1)

    record = ComparisonRunner(settings).compare(original_text, compared_text)

    table = Table(title="Similarity")
    table.add_column("metric")
    table.add_column("value", justify="right")
    for key, value in record.to_dict().items():
        if value is None:
            continue
        table.add_row(key, str(value))
    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    app()
