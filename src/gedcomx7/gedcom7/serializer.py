"""
Line-oriented GEDCOM 7 serialization.

Serialization runs in two phases over the whole document:

1. ``assign_anchors`` walks every structure in output order and gives each
   reference target an ``X<n>`` anchor the first time it is pointed at.
2. ``render`` writes ``<level> [@anchor@] <tag> [payload]`` lines.

Anchors therefore depend only on document order, never on when a node
happened to be created.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List

from gedcomx7.gedcom7.node import G7Node, Reference, VOID

POINTER_PREFIX = "@"
CONTINUATION_TAG = "CONT"


class Serializer:
    """
    Holds the anchor counter for one document.

    A new Serializer must be used per conversion so that anchor numbering
    always starts at ``X1``.
    """

    def __init__(self, prefix: str = "X") -> None:
        self.prefix = prefix
        self._next_anchor = 0
        self.dangling: List[G7Node] = []

    # ------------------------------------------------------------------ #
    # Phase 1
    # ------------------------------------------------------------------ #

    def allocate(self, node: G7Node) -> str:
        if node.anchor is None:
            self._next_anchor += 1
            node.anchor = f"{self.prefix}{self._next_anchor}"
        return node.anchor

    def assign_anchors(self, records: Iterable[G7Node]) -> None:
        """
        Give anchors to every referenced node. Targets that are not among
        ``records`` are collected in ``self.dangling``.
        """
        records = list(records)
        top_level = {id(r) for r in records}
        for record in records:
            for node in record.iter_subtree():
                if isinstance(node.payload, Reference):
                    target = node.payload.target
                    if id(target) not in top_level and target not in self.dangling:
                        self.dangling.append(target)
                    self.allocate(target)

    # ------------------------------------------------------------------ #
    # Phase 2
    # ------------------------------------------------------------------ #

    def iter_lines(self, node: G7Node, level: int = 0) -> Iterator[str]:
        head = f"{level} @{node.anchor}@ {node.tag}" if node.anchor else f"{level} {node.tag}"
        payload = node.payload

        if isinstance(payload, Reference):
            yield f"{head} @{self.allocate(payload.target)}@"
        elif payload is VOID:
            yield f"{head} @VOID@"
        elif payload:
            first, *rest = payload.split("\n")
            yield f"{head} {_escape(first)}" if first else head
            for line in rest:
                cont = f"{level + 1} {CONTINUATION_TAG}"
                yield f"{cont} {_escape(line)}" if line else cont
        else:
            yield head

        for child in node.children:
            yield from self.iter_lines(child, level + 1)

    def render(self, node: G7Node, level: int = 0) -> str:
        return "".join(line + "\n" for line in self.iter_lines(node, level))

    def render_document(self, records: Iterable[G7Node]) -> str:
        records = list(records)
        self.assign_anchors(records)
        return "".join(self.render(r) for r in records)


def _escape(line: str) -> str:
    """Double a leading '@' so text is never read as a pointer."""
    if line.startswith(POINTER_PREFIX):
        return POINTER_PREFIX + line
    return line


def serialize(node: G7Node, level: int = 0) -> str:
    """Serialize a single structure with a fresh anchor counter."""
    serializer = Serializer()
    serializer.assign_anchors([node])
    return serializer.render(node, level)


__all__ = ["Serializer", "serialize"]
