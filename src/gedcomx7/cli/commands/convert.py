from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from gedcomx7.assembler.document import write_document
from gedcomx7.cli.utils import print_diagnostics, run_conversion
from gedcomx7.core.exceptions import ConversionError

console = Console(stderr=True)


def convert_command(
    gedcomx: Path = typer.Argument(..., exists=True, readable=True),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Do not print conversion warnings",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable rich logging",
    ),
):
    """
    Convert a GEDCOM X JSON file to GEDCOM 7 (stdout by default).
    """
    try:
        text, _ctx, diagnostics = run_conversion(gedcomx, verbose=verbose)
    except ConversionError as exc:
        console.print(f"[bold red]error:[/bold red] {exc}", highlight=False)
        raise typer.Exit(code=1)

    if not quiet:
        print_diagnostics(diagnostics)

    if out:
        write_document(text, out)
        if verbose:
            console.log(f"Wrote {out}")
    else:
        print(text, end="")
