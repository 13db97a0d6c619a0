"""
Family reconstruction: the couple relationship pass and the
generation-number resolver.
"""

from __future__ import annotations

from .couples import apply_couples, build_couple
from .families import (
    find_or_create_family,
    is_wife,
    order_spouses,
    place_child,
)
from .numbering import resolution_order, resolve_key, resolve_numbering

__all__ = [
    "apply_couples",
    "build_couple",
    "find_or_create_family",
    "is_wife",
    "order_spouses",
    "place_child",
    "resolution_order",
    "resolve_key",
    "resolve_numbering",
]
