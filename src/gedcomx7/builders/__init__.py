"""
Entity builders: GEDCOM X objects -> GEDCOM 7 structures.

Each builder takes the conversion context first so it can share records
through the identity registry and report non-fatal problems.
"""

from __future__ import annotations

from .dates import date_value, format_formal_date
from .facts import fact_value, parse_data_url
from .names import name_text, name_value
from .notes import note_value
from .person import build_person, ensure_person, person_stub
from .places import place_value
from .sources import build_source, source_citation

__all__ = [
    "build_person",
    "build_source",
    "date_value",
    "ensure_person",
    "fact_value",
    "format_formal_date",
    "name_text",
    "name_value",
    "note_value",
    "parse_data_url",
    "person_stub",
    "place_value",
    "source_citation",
]
