from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from gedcomx7.gedcom7.node import G7Node
from gedcomx7.gedcom7.registry import IdentityRegistry
from gedcomx7.gedcomx.index import SourceGraph
from gedcomx7.vocab.terms import EXTENSION_URIS

Reporter = Callable[[str], None]


@dataclass
class NumberingTables:
    """
    Scratch state for the numbering resolver.

    person_at:  numbering key -> person record at that position
    family_at:  numbering key -> default family of the person at that position
    """

    person_at: Dict[str, G7Node] = field(default_factory=dict)
    family_at: Dict[str, G7Node] = field(default_factory=dict)


@dataclass
class ConversionContext:
    """
    Everything one conversion owns.

    A new context is created for every ``convert`` call; none of its tables
    may be reused across conversions.
    """

    config: Any
    logger: Any
    graph: SourceGraph

    reporter: Optional[Reporter] = None

    registry: IdentityRegistry = field(default_factory=IdentityRegistry)
    numbering: NumberingTables = field(default_factory=NumberingTables)

    # Extension tag -> URI, declared in HEAD.SCHMA
    extensions: Dict[str, str] = field(default_factory=dict)

    stats: Dict[str, Any] = field(default_factory=dict)
    diagnostics: List[str] = field(default_factory=list)

    def report(self, message: str) -> None:
        """Record a non-fatal problem; conversion continues."""
        self.diagnostics.append(message)
        self.logger.warning(message)
        if self.reporter is not None:
            self.reporter(message)

    def lookup(self, ref: Any) -> Optional[Dict[str, Any]]:
        return self.graph.lookup(ref)

    def use_extension(self, tag: str) -> str:
        """Mark an extension tag as used and return it."""
        if tag not in self.extensions:
            overrides = getattr(self.config, "schema", None) or {}
            self.extensions[tag] = overrides.get(tag) or EXTENSION_URIS[tag]
        return tag

    def bump(self, name: str, amount: int = 1) -> None:
        self.stats[name] = self.stats.get(name, 0) + amount
