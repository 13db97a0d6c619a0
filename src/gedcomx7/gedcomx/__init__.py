"""
GEDCOM X input side: JSON loading and the id index.
"""

from __future__ import annotations

from .index import SourceGraph, resource_id
from .loader import load_gedcomx

__all__ = ["SourceGraph", "load_gedcomx", "resource_id"]
