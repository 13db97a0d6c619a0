"""
GEDCOM 7 output model.

    from gedcomx7.gedcom7 import G7Node, g7, VOID, IdentityRegistry, Serializer
"""

from __future__ import annotations

from .node import G7Node, Payload, Reference, VOID, g7
from .registry import IdentityRegistry, couple_key, media_key, person_key, source_key
from .serializer import Serializer, serialize

__all__ = [
    "G7Node",
    "Payload",
    "Reference",
    "VOID",
    "g7",
    "IdentityRegistry",
    "couple_key",
    "media_key",
    "person_key",
    "source_key",
    "Serializer",
    "serialize",
]
