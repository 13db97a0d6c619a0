# src/gedcomx7/gedcom7/node.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Union


class _Void:
    """
    Placeholder payload for a CHIL structure whose child is known to exist
    but is not part of the converted data. Renders as ``@VOID@``.
    """

    _instance: Optional["_Void"] = None

    def __new__(cls) -> "_Void":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return "VOID"


VOID = _Void()


@dataclass(frozen=True, eq=False)
class Reference:
    """Non-owning pointer payload; rendered as the target's anchor."""

    target: "G7Node"

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        return f"<Reference {self.target.tag}>"


Payload = Union[None, str, Reference, _Void]


def _normalize_payload(payload: object) -> Payload:
    if payload is None or isinstance(payload, (Reference, _Void)):
        return payload
    if isinstance(payload, G7Node):
        return Reference(payload)
    text = str(payload).replace("\r\n", "\n").replace("\r", "\n")
    return text or None


@dataclass(eq=False)
class G7Node:
    """
    One GEDCOM 7 structure.

    Attributes:
        tag: Structure tag (INDI, FAM, NAME, DATE, CHIL, ...).
        payload: None, line text, a Reference to another node, or VOID.
        children: Substructures in output order.
        anchor: Cross-reference id, assigned only when something points here.
        source_id: GEDCOM X id the node was built from (never serialized).

    Nodes compare by identity: the same record must be the same object.
    """

    tag: str
    payload: Payload = None
    children: List["G7Node"] = field(default_factory=list)
    anchor: Optional[str] = None
    source_id: Optional[str] = None

    def __post_init__(self) -> None:
        self.payload = _normalize_payload(self.payload)
        self.children = [c for c in self.children if c is not None]

    # ---------- Helper / Mixin Methods ----------

    def add(self, *children: Optional["G7Node"]) -> "G7Node":
        """Append children in order, skipping None entries."""
        self.children.extend(c for c in children if c is not None)
        return self

    def set_payload(self, payload: object) -> None:
        self.payload = _normalize_payload(payload)

    @property
    def reference(self) -> Optional["G7Node"]:
        """Target node when the payload is a Reference."""
        if isinstance(self.payload, Reference):
            return self.payload.target
        return None

    @property
    def is_void(self) -> bool:
        return self.payload is VOID

    def find_children(self, tag: str) -> List["G7Node"]:
        """Return all direct children with a given tag."""
        return [c for c in self.children if c.tag == tag]

    def find_first(self, tag: str) -> Optional["G7Node"]:
        """Return the first direct child with this tag, or None."""
        for c in self.children:
            if c.tag == tag:
                return c
        return None

    def points_to(self, tag: str, target: "G7Node") -> bool:
        """True when a direct ``tag`` child references ``target``."""
        return any(c.reference is target for c in self.find_children(tag))

    def iter_subtree(self) -> Iterator["G7Node"]:
        """Yield this node and all descendants in depth-first order."""
        yield self
        for child in self.children:
            yield from child.iter_subtree()

    def __repr__(self) -> str:
        anchor = f" @{self.anchor}@" if self.anchor else ""
        return f"<G7Node{anchor} {self.tag}: {self.payload!r}>"


def g7(tag: str, payload: object = None, *children: Optional[G7Node]) -> G7Node:
    """Shorthand constructor: ``g7("DATE", "1 JAN 1900", g7("TIME", "12:00"))``."""
    return G7Node(tag=tag, payload=_normalize_payload(payload), children=list(children))


__all__ = ["G7Node", "Payload", "Reference", "VOID", "g7"]
