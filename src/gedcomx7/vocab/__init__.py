"""
Static GEDCOM X -> GEDCOM 7 lookup tables.
"""

from __future__ import annotations

from .facts import (
    COUPLE_FACTS,
    INDIVIDUAL_FACTS,
    FactKind,
    FactMapping,
    FactScope,
    lookup_fact,
)
from .terms import EXTENSION_URIS, NAME_TYPES, SEX_CODES

__all__ = [
    "COUPLE_FACTS",
    "INDIVIDUAL_FACTS",
    "FactKind",
    "FactMapping",
    "FactScope",
    "lookup_fact",
    "EXTENSION_URIS",
    "NAME_TYPES",
    "SEX_CODES",
]
