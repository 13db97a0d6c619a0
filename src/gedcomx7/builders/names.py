from __future__ import annotations

import re
from typing import Any, Dict, List, Optional

from gedcomx7.builders.dates import date_value
from gedcomx7.builders.notes import note_value
from gedcomx7.builders.sources import source_citation
from gedcomx7.gedcom7.node import G7Node, g7
from gedcomx7.vocab.terms import (
    NAME_PART_GIVEN,
    NAME_PART_PREFIX,
    NAME_PART_SUFFIX,
    NAME_PART_SURNAME,
    NAME_TYPES,
    QUALIFIER_FAMILIAR,
    QUALIFIER_PRIMARY,
)

FULLWIDTH_SOLIDUS = "\uff0f"
_EMPTY_GAP = re.compile(r"/(\s*)/")


def _has_qualifier(part: Dict[str, Any], name: str) -> bool:
    return any(q.get("name") == name for q in part.get("qualifiers") or [])


def name_text(form: Dict[str, Any]) -> str:
    """
    GEDCOM personal-name text for one NameForm, surname between slashes.

    Literal slashes in the full text are replaced by a full-width solidus;
    adjacent surnames are merged and at most one slash pair is kept.
    """
    parts: List[Dict[str, Any]] = form.get("parts") or []

    if form.get("fullText"):
        text = form["fullText"].replace("/", FULLWIDTH_SOLIDUS)
        for part in parts:
            value = part.get("value")
            if part.get("type") == NAME_PART_SURNAME and value:
                text = text.replace(value, f"/{value}/", 1)
    else:
        text = " ".join(
            f"/{p.get('value', '')}/" if p.get("type") == NAME_PART_SURNAME else p.get("value", "")
            for p in parts
        )

    text = _EMPTY_GAP.sub(r"\1", text)
    while text.count("/") > 2:
        text = text.replace("/", "", 1)
    return text


def name_form(ctx, form: Dict[str, Any], tag: str) -> G7Node:
    node = g7(tag, name_text(form))

    for part in form.get("parts") or []:
        ptype = part.get("type")
        value = part.get("value")
        if ptype == NAME_PART_PREFIX:
            node.add(g7("NPFX", value))
        elif ptype == NAME_PART_SUFFIX:
            node.add(g7("NSFX", value))
        elif ptype == NAME_PART_GIVEN:
            node.add(g7("GIVN", value))
            if _has_qualifier(part, QUALIFIER_PRIMARY):
                node.add(g7(ctx.use_extension("_RUFNAM"), value))
        elif ptype == NAME_PART_SURNAME:
            node.add(g7("SURN", value))
        elif _has_qualifier(part, QUALIFIER_FAMILIAR):
            node.add(g7("NICK", value))

    lang = form.get("lang")
    if lang:
        node.add(g7(ctx.use_extension("_LANG") if tag == "NAME" else "LANG", lang))
    elif tag == "TRAN":
        node.add(g7("LANG", "und"))
    return node


def name_value(ctx, name: Dict[str, Any]) -> Optional[G7Node]:
    """
    Build a NAME structure from a GEDCOM X Name.

    The first name form is the NAME payload; the others become TRAN.
    """
    forms = name.get("nameForms") or []
    if not forms:
        ctx.report(f"Name {name.get('id', '')!s} has no name forms; skipped")
        return None

    node = name_form(ctx, forms[0], "NAME")
    for form in forms[1:]:
        node.add(name_form(ctx, form, "TRAN"))

    name_type = NAME_TYPES.get(name.get("type"))
    if name_type:
        kind, phrase = name_type
        node.add(g7("TYPE", kind, g7("PHRASE", phrase) if phrase else None))

    date = date_value(ctx, name.get("date"))
    if date is not None:
        date.tag = ctx.use_extension("_DATE")
        node.add(date)

    for ref in name.get("sources") or []:
        node.add(source_citation(ctx, ref))

    if name.get("lang") and node.find_first("_LANG") is None:
        node.add(g7(ctx.use_extension("_LANG"), name["lang"]))

    for note in name.get("notes") or []:
        node.add(note_value(note))

    return node
