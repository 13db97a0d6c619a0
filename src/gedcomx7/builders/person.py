from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from gedcomx7.builders.dates import date_value
from gedcomx7.builders.facts import fact_value
from gedcomx7.builders.names import name_value
from gedcomx7.builders.notes import note_value
from gedcomx7.builders.sources import source_citation
from gedcomx7.gedcom7.node import G7Node, g7
from gedcomx7.gedcom7.registry import person_key
from gedcomx7.vocab.facts import FactScope
from gedcomx7.vocab.terms import EXID_PERSON, SEX_CODES

NUMBERING_FIELDS = ("ascendancyNumber", "descendancyNumber")


def person_stub(person_id: str) -> G7Node:
    """Minimal INDI record: just the FamilySearch person id."""
    node = g7("INDI", None, g7("EXID", person_id, g7("TYPE", EXID_PERSON)))
    node.source_id = person_id
    return node


def ensure_person(ctx, person_id: str) -> G7Node:
    """The INDI record for ``person_id``, created as a stub if unseen."""
    return ctx.registry.resolve(person_key(person_id), lambda: person_stub(person_id))


def _modified(items: Iterable[Optional[Dict[str, Any]]]) -> int:
    latest = 0
    for item in items:
        if not item:
            continue
        stamp = (item.get("attribution") or {}).get("modified") or item.get("modified")
        if isinstance(stamp, (int, float)) and not isinstance(stamp, bool) and stamp > latest:
            latest = stamp
    return latest


def _sex(gender: Dict[str, Any]) -> Optional[G7Node]:
    gtype = gender.get("type")
    if not gtype:
        return None
    code = SEX_CODES.get(gtype)
    if code:
        return g7("SEX", code)
    return g7("FACT", gtype, g7("TYPE", "Gender"))


def _restriction(person_info: Any) -> Optional[G7Node]:
    if not person_info:
        return None
    info = person_info[0] if isinstance(person_info, list) else person_info
    flags = []
    if info.get("readOnly"):
        flags.append("LOCKED")
    if not info.get("visibleToAll"):
        flags.extend(["PRIVACY", "CONFIDENTIAL"])
    elif info.get("privateSpaceRestricted"):
        flags.append("CONFIDENTIAL")
    return g7("RESN", ", ".join(flags)) if flags else None


def _register_numbers(ctx, person: Dict[str, Any], record: G7Node) -> None:
    display = person.get("display") or {}
    for field_name in NUMBERING_FIELDS:
        number = display.get(field_name)
        if number is None or number == "":
            continue
        key = str(number).strip()
        previous = ctx.numbering.person_at.get(key)
        if previous is not None and previous is not record:
            ctx.report(
                f"Generation number {key} is used by {previous.source_id} and "
                f"{record.source_id}; keeping {record.source_id}"
            )
        ctx.numbering.person_at[key] = record


def build_person(ctx, person: Dict[str, Any]) -> Optional[G7Node]:
    """
    Build (or complete) the INDI record for a GEDCOM X Person.

    Generation numbers from ``display`` are registered for the numbering
    resolver; family links are added later by the relationship passes.
    """
    pid = person.get("id")
    if not pid:
        ctx.report("Person without an id; skipped")
        return None

    me = ensure_person(ctx, str(pid))

    gender = person.get("gender") or {}
    me.add(_sex(gender))

    for ref in person.get("sources") or []:
        me.add(source_citation(ctx, ref))

    for name in person.get("names") or []:
        me.add(name_value(ctx, name))

    for fact in person.get("facts") or []:
        me.add(fact_value(ctx, fact, FactScope.INDIVIDUAL))

    _register_numbers(ctx, person, me)

    for note in person.get("notes") or []:
        me.add(note_value(note))

    me.add(_restriction(person.get("personInfo")))

    living = person.get("living")
    if me.find_first("DEAT") is None:
        if living is False:
            me.add(g7("DEAT", "Y"))
        elif living:
            me.add(g7("NO", "DEAT"))

    modified = _modified([person, gender, *(person.get("names") or []), *(person.get("facts") or [])])
    if modified:
        me.add(g7("CHAN", None, date_value(ctx, modified)))

    ctx.bump("persons")
    return me
