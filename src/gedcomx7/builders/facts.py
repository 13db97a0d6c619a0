# src/gedcomx7/builders/facts.py

from __future__ import annotations

import base64
import re
from typing import Any, Dict, Optional
from urllib.parse import unquote

from gedcomx7.builders.dates import date_value
from gedcomx7.builders.places import place_value
from gedcomx7.builders.sources import source_citation
from gedcomx7.gedcom7.node import G7Node, g7
from gedcomx7.vocab.facts import (
    AGE_SCOPES,
    QUALIFIER_NOTES,
    QUALIFIER_TAGS,
    FactKind,
    FactScope,
    lookup_fact,
)

DATA_URL = re.compile(r"^data:([^;,]+)?(;base64)?,(.*)$", re.DOTALL)


def parse_data_url(uri: str) -> str:
    """Decode the payload of a ``data:`` URI (plain or base64)."""
    m = DATA_URL.match(uri)
    if not m:
        raise ValueError(f"Not a data URL: {uri[:40]!r}")
    _media_type, is_base64, data = m.groups()
    data = unquote(data)
    if is_base64:
        data = base64.b64decode(data).decode("utf-8")
    return data


# ---------------------------------------------------------------------------
# Fact head (one lookup, one arm per kind)
# ---------------------------------------------------------------------------

def _fact_head(ctx, fact: Dict[str, Any], scope: FactScope) -> G7Node:
    fact_type = fact.get("type")
    value = fact.get("value")
    mapping = lookup_fact(fact_type, scope)

    if mapping.kind is FactKind.EVENT:
        node = g7(mapping.tag)
        if value:
            node.add(g7("TYPE", value))
        return node

    if mapping.kind is FactKind.ATTRIBUTE:
        node = g7(mapping.tag, value)
        if mapping.tag == "IDNO":
            node.add(g7("TYPE", "Unspecified"))
        return node

    if mapping.kind is FactKind.GENERIC_EVENT:
        node = g7("EVEN", None, g7("TYPE", mapping.description))
        if value:
            node.add(g7("NOTE", value))
        return node

    if mapping.kind is FactKind.GENERIC_FACT:
        return g7("FACT", value, g7("TYPE", mapping.description))

    if mapping.kind is FactKind.DATA_URI:
        try:
            label = parse_data_url(fact_type)
        except (ValueError, UnicodeDecodeError) as exc:
            ctx.report(f"Undecodable data: fact type ({exc})")
            label = fact_type
        return g7("EVEN", value, g7("TYPE", label))

    label = "individual" if scope is FactScope.INDIVIDUAL else "family"
    ctx.report(f"Unknown {label} fact type: {fact_type}")
    return g7("EVEN", value, g7("TYPE", fact_type or "Unknown"))


def _qualifier(ctx, qualifier: Dict[str, Any], scope: FactScope) -> G7Node:
    name = qualifier.get("name")
    value = qualifier.get("value")

    tag = QUALIFIER_TAGS.get(name)
    if tag == "AGE" and scope not in AGE_SCOPES:
        tag = None
    if tag:
        return g7(tag, value)

    template = QUALIFIER_NOTES.get(name)
    if template:
        return g7("NOTE", template.format(value=value))

    ctx.report(f"Unknown fact qualifier: {name}")
    return g7("NOTE", f"{name} is {value}")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def fact_value(ctx, fact: Dict[str, Any], scope: FactScope = FactScope.INDIVIDUAL) -> Optional[G7Node]:
    """
    Build the event/attribute structure for a GEDCOM X Fact.

    Unknown fact types and qualifiers are reported through ``ctx`` and
    degraded into generic EVEN / NOTE structures.
    """
    if not fact:
        return None

    node = _fact_head(ctx, fact, scope)

    node.add(date_value(ctx, fact.get("date")))
    node.add(place_value(ctx, fact.get("place")))
    for ref in fact.get("sources") or []:
        node.add(source_citation(ctx, ref))
    for qualifier in fact.get("qualifiers") or []:
        node.add(_qualifier(ctx, qualifier, scope))

    if not node.children and node.payload is None:
        node.set_payload("Y")
    return node
