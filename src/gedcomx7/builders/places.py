from __future__ import annotations

from typing import Any, Dict, List, Optional

from gedcomx7.gedcom7.node import G7Node, g7
from gedcomx7.gedcom7.registry import media_key
from gedcomx7.gedcomx.index import resource_id
from gedcomx7.vocab.terms import EXID_PLACE, EXID_URI, KML_MEDIA_TYPE

UNDETERMINED = "und"


def _ref_value(ref: Any) -> Optional[str]:
    """URI of a ResourceReference (or the value itself when it is a string)."""
    if isinstance(ref, dict):
        return ref.get("resource") or ref.get("resourceId")
    if isinstance(ref, str) and ref:
        return ref
    return None


def _coordinate(value: Any, positive: str, negative: str) -> str:
    number = float(value)
    text = repr(abs(number))
    if text.endswith(".0"):
        text = text[:-2]
    return f"{negative if number < 0 else positive}{text}"


def _type_label(place_type: str) -> str:
    return place_type.rstrip("/").rsplit("/", 1)[-1]


def _kml_record(ctx, url: str) -> G7Node:
    return ctx.registry.resolve(
        media_key(url),
        lambda: g7("OBJE", None, g7("FILE", url, g7("FORM", KML_MEDIA_TYPE))),
    )


def place_value(ctx, place: Any) -> Optional[G7Node]:
    """
    Build a PLAC structure from a GEDCOM X PlaceReference.

    The referenced PlaceDescription and its ``jurisdiction`` chain provide
    the comma-separated name, per-language translations, the FORM, an
    authority EXID, coordinates, and a KML spatial description (shared as
    an OBJE record).
    """
    if not place:
        return None
    if isinstance(place, str):
        place = {"original": place}

    original = place.get("original")
    description = place.get("description")

    preferred: List[str] = []
    by_lang: Dict[str, List[str]] = {}
    form: Optional[List[str]] = []
    authority: Optional[str] = None
    kml: Optional[str] = None
    coords: Optional[Dict[str, Any]] = None

    seen = set()
    ptr = ctx.lookup(description) if description else None
    while ptr is not None and id(ptr) not in seen:
        seen.add(id(ptr))

        names = [n for n in (ptr.get("names") or []) if n.get("value")]
        if names:
            preferred.append(names[0]["value"])
            for tv in names:
                values = by_lang.setdefault(tv.get("lang") or UNDETERMINED, [])
                while len(values) + 1 < len(preferred):
                    values.append("")
                if len(values) < len(preferred):
                    values.append(tv["value"])

            if form is not None and ptr.get("type"):
                form.append(_type_label(ptr["type"]))
            else:
                form = None

        authority = authority or _ref_value(ptr.get("place"))
        kml = kml or _ref_value(ptr.get("spatialDescription"))
        if coords is None and ptr.get("latitude") is not None and ptr.get("longitude") is not None:
            coords = ptr

        ptr = ctx.lookup(ptr.get("jurisdiction")) if ptr.get("jurisdiction") else None

    if preferred:
        text = ", ".join(preferred)
        forms = {
            lang: ", ".join(v or preferred[i] for i, v in enumerate(values + preferred[len(values):]))
            for lang, values in by_lang.items()
        }

        lang = next((l for l, v in forms.items() if v == text and l != UNDETERMINED), None)
        node = g7("PLAC", text)
        if lang:
            node.add(g7("LANG", lang))
        if form:
            node.add(g7("FORM", ", ".join(form)))
        for other, value in forms.items():
            if other != lang and value != text:
                node.add(g7("TRAN", value, g7("LANG", other)))
        if original and original != text:
            node.add(g7("NOTE", original))
    elif original:
        node = g7("PLAC", original)
    else:
        return None

    if authority:
        node.add(g7("EXID", authority, g7("TYPE", EXID_URI)))

    if kml:
        node.add(g7(ctx.use_extension("_OBJE"), _kml_record(ctx, kml)))

    if coords is not None:
        node.add(g7(
            "MAP",
            None,
            g7("LATI", _coordinate(coords["latitude"], "N", "S")),
            g7("LONG", _coordinate(coords["longitude"], "E", "W")),
        ))

    place_id = resource_id(description) if description else None
    if place_id:
        node.add(g7("EXID", place_id, g7("TYPE", EXID_PLACE)))

    return node
