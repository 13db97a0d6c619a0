from __future__ import annotations

from typing import Any, Dict, Optional

from gedcomx7.gedcom7.node import G7Node, g7
from gedcomx7.gedcom7.registry import source_key
from gedcomx7.gedcomx.index import resource_id
from gedcomx7.vocab.terms import EXID_SOURCE_DESCRIPTION


def _source_id(ref: Dict[str, Any]) -> Optional[str]:
    return ref.get("descriptionId") or resource_id(ref.get("description")) or ref.get("id")


def build_source(ctx, ref: Dict[str, Any]) -> Optional[G7Node]:
    """
    Return the shared SOUR record for a GEDCOM X SourceReference.

    Every reference to the same source description yields the same record.
    Title and citation come from the SourceDescription when the graph has it.
    """
    sid = _source_id(ref)
    if not sid:
        ctx.report("Source reference without a description id; citation skipped")
        return None

    def factory() -> G7Node:
        record = g7("SOUR")
        description = ctx.lookup(ref.get("description")) if ref.get("description") else None
        if description is not None:
            titles = description.get("titles") or []
            if titles and titles[0].get("value"):
                record.add(g7("TITL", titles[0]["value"]))
        record.add(g7("EXID", sid, g7("TYPE", EXID_SOURCE_DESCRIPTION)))
        if description is not None:
            citations = description.get("citations") or []
            if citations and citations[0].get("value"):
                record.add(g7("NOTE", citations[0]["value"]))
        ctx.bump("sources")
        return record

    return ctx.registry.resolve(source_key(sid), factory)


def source_citation(ctx, ref: Dict[str, Any]) -> Optional[G7Node]:
    """A ``SOUR @X@`` pointer structure to the shared source record."""
    record = build_source(ctx, ref)
    return g7("SOUR", record) if record is not None else None
