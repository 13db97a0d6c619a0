from __future__ import annotations

import time
from pathlib import Path
from typing import List, Tuple

from rich.console import Console

from gedcomx7.core.context import ConversionContext
from gedcomx7.core.pipeline import Pipeline
from gedcomx7.gedcomx.loader import load_gedcomx

console = Console(stderr=True)


def run_conversion(path: Path, *, verbose: bool = False) -> Tuple[str, ConversionContext, List[str]]:
    """
    Load a GEDCOM X file and convert it.

    Returns the document text, the finished context, and the diagnostics
    reported along the way.
    """
    t0 = time.perf_counter()

    gx = load_gedcomx(path)
    diagnostics: List[str] = []
    pipeline = Pipeline(gx, reporter=diagnostics.append)
    text = pipeline.run()

    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Converted {path.name} in {elapsed:.2f}s")

    return text, pipeline.ctx, diagnostics


def print_diagnostics(diagnostics: List[str]) -> None:
    for message in diagnostics:
        console.print(f"[yellow]warning:[/yellow] {message}", highlight=False)
