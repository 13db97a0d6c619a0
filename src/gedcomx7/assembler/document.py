"""
document.py
GEDCOM 7 document assembly.

Order is fixed: HEAD, every registered record in registration order, TRLR.
Only registry membership decides what is emitted; pointers never cause a
record to be written.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from gedcomx7.gedcom7.node import G7Node, g7
from gedcomx7.gedcom7.serializer import Serializer
from gedcomx7.logging import get_logger

log = get_logger(__name__)

GEDCOM_VERSION = "7.0"


def build_header(ctx) -> G7Node:
    """
    HEAD record: GEDC.VERS, SCHMA for every extension tag used during the
    conversion, and the producing product from configuration.
    """
    header = g7("HEAD", None, g7("GEDC", None, g7("VERS", GEDCOM_VERSION)))

    if ctx.extensions:
        header.add(g7(
            "SCHMA",
            None,
            *[g7("TAG", f"{tag} {uri}") for tag, uri in sorted(ctx.extensions.items())],
        ))

    product = ctx.config.header.get("product")
    if product:
        header.add(g7(
            "SOUR",
            product,
            g7("VERS", ctx.config.header.get("version")),
            g7("NAME", ctx.config.header.get("name")),
        ))
    return header


def document_records(ctx) -> List[G7Node]:
    return [build_header(ctx), *ctx.registry, g7("TRLR")]


def assemble_document(ctx) -> str:
    """Serialize the whole document; anchors are assigned in output order."""
    records = document_records(ctx)
    serializer = Serializer()
    text = serializer.render_document(records)

    for target in serializer.dangling:
        ctx.report(f"Pointer to unregistered {target.tag} structure @{target.anchor}@")

    log.info(
        "Assembled GEDCOM 7 document (records=%d, lines=%d)",
        len(records),
        text.count("\n"),
    )
    return text


def write_document(text: str, output_path: str | Path) -> Path:
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(text)

    log.info("GEDCOM export complete: %s (size=%d bytes)", output_path, output_path.stat().st_size)
    return output_path
