from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Optional, Set

from gedcomx7.core.exceptions import RegistryError
from gedcomx7.gedcom7.node import G7Node


# -----------------------------
# Record keys
# -----------------------------

def person_key(person_id: str) -> str:
    return f"#{person_id}"


def source_key(source_id: str) -> str:
    return f"SOUR:{source_id}"


def media_key(url: str) -> str:
    return f"OBJE:{url}"


def couple_key(first_id: Optional[str], second_id: Optional[str]) -> str:
    """
    Order-independent key for a family: the same two people (or one person
    and an unknown partner) always map to the same FAM record.
    """
    return "FAM:" + "+".join(sorted([first_id or "", second_id or ""]))


# -----------------------------
# Registry
# -----------------------------

class IdentityRegistry:
    """
    In-memory record store: at most one G7Node per logical record.

    Records keep their registration order; that order is the output order
    of the document body.
    """

    def __init__(self) -> None:
        self._records: Dict[str, G7Node] = {}
        self._creating: Set[str] = set()

    def resolve(self, key: str, factory: Callable[[], G7Node]) -> G7Node:
        """
        Return the record for ``key``, building it with ``factory`` on first
        request. The factory may resolve other keys but not its own.
        """
        existing = self._records.get(key)
        if existing is not None:
            return existing

        if key in self._creating:
            raise RegistryError(f"Re-entrant creation of record {key!r}")

        self._creating.add(key)
        try:
            node = factory()
        finally:
            self._creating.discard(key)

        # A factory may have registered the key through another path.
        return self._records.setdefault(key, node)

    def register(self, key: str, node: G7Node) -> G7Node:
        """Store a pre-built record, keeping the first one on collision."""
        return self._records.setdefault(key, node)

    def get(self, key: str) -> Optional[G7Node]:
        return self._records.get(key)

    def records(self) -> List[G7Node]:
        return list(self._records.values())

    def keys(self) -> List[str]:
        return list(self._records.keys())

    def count_by_tag(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for node in self._records.values():
            counts[node.tag] = counts.get(node.tag, 0) + 1
        return counts

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[G7Node]:
        return iter(self._records.values())
