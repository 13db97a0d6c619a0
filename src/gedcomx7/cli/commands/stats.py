from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from gedcomx7.cli.utils import run_conversion
from gedcomx7.core.exceptions import ConversionError

console = Console()

RECORD_LABELS = {
    "INDI": "Individuals",
    "FAM": "Families",
    "SOUR": "Sources",
    "OBJE": "Media Objects",
}


def stats_command(
    gedcomx: Path = typer.Argument(..., exists=True, readable=True),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Show summary statistics for a GEDCOM X file and its conversion.
    """
    try:
        _, ctx, diagnostics = run_conversion(gedcomx, verbose=verbose)
    except ConversionError as exc:
        console.print(f"[bold red]error:[/bold red] {exc}", highlight=False)
        raise typer.Exit(code=1)

    table = Table(title="GEDCOM X Conversion Statistics")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Persons (input)", str(len(ctx.graph.persons)))
    table.add_row("Relationships (input)", str(len(ctx.graph.relationships)))
    table.add_row("Generation numbers", str(ctx.stats.get("generation_numbers", 0)))

    counts = ctx.registry.count_by_tag()
    for tag, label in RECORD_LABELS.items():
        table.add_row(label, str(counts.get(tag, 0)))

    table.add_row("Warnings", str(len(diagnostics)))

    console.print(table)
