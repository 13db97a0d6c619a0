# src/gedcomx7/gedcomx/index.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional


def _walk(value: Any) -> Iterator[Dict[str, Any]]:
    """Yield every dict in a parsed JSON value, depth-first."""
    if isinstance(value, dict):
        yield value
        for v in value.values():
            yield from _walk(v)
    elif isinstance(value, list):
        for v in value:
            yield from _walk(v)


def resource_id(ref: Any) -> Optional[str]:
    """
    Local id of a GEDCOM X ResourceReference.

    Accepts ``{"resourceId": "X"}``, ``{"resource": "#X"}`` or a bare string.
    """
    if ref is None:
        return None
    if isinstance(ref, str):
        return ref[1:] if ref.startswith("#") else ref
    if isinstance(ref, dict):
        rid = ref.get("resourceId")
        if rid:
            return str(rid)
        res = ref.get("resource")
        if isinstance(res, str) and res:
            return res.rsplit("#", 1)[-1] if "#" in res else res
    return None


@dataclass
class SourceGraph:
    """
    A parsed GEDCOM X document plus a ``"#" + id`` index over every object
    that carries an ``id``, at any depth.

    The index is built once, up front, and is read-only afterwards.
    """

    data: Dict[str, Any]
    _index: Dict[str, Dict[str, Any]] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        for obj in _walk(self.data):
            oid = obj.get("id")
            if isinstance(oid, (str, int)) and not isinstance(oid, bool):
                self._index[f"#{oid}"] = obj

    # ------------------------------------------------------------------ #
    # Public query API
    # ------------------------------------------------------------------ #

    def lookup(self, ref: Any) -> Optional[Dict[str, Any]]:
        """
        Resolve ``"#id"``, a bare id, or a ResourceReference to its object.
        """
        if isinstance(ref, dict):
            ref = ref.get("resource") or ref.get("resourceId")
        if not isinstance(ref, str) or not ref:
            return None
        if "#" in ref:
            ref = "#" + ref.rsplit("#", 1)[-1]
        else:
            ref = "#" + ref
        return self._index.get(ref)

    @property
    def persons(self) -> List[Dict[str, Any]]:
        return list(self.data.get("persons") or [])

    @property
    def relationships(self) -> List[Dict[str, Any]]:
        return list(self.data.get("relationships") or [])

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, ref: object) -> bool:
        return self.lookup(ref) is not None
