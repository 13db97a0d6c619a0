from __future__ import annotations

from typing import Any, Dict, Optional

from gedcomx7.assembler.document import assemble_document
from gedcomx7.builders.person import build_person
from gedcomx7.config import get_config
from gedcomx7.core.context import ConversionContext, Reporter
from gedcomx7.core.exceptions import ConversionError, SourceGraphError
from gedcomx7.gedcomx.index import SourceGraph
from gedcomx7.logging import get_logger
from gedcomx7.relationships.couples import apply_couples
from gedcomx7.relationships.numbering import resolve_numbering

log = get_logger(__name__)


class Pipeline:
    """
    Orchestrates one GEDCOM X -> GEDCOM 7 conversion.

    Stages: index, persons, couple relationships, generation numbers,
    assembly. Each Pipeline owns a fresh ConversionContext.
    """

    def __init__(self, gx: Dict[str, Any], reporter: Optional[Reporter] = None, config: Any = None):
        if not isinstance(gx, dict):
            raise SourceGraphError(f"Expected a GEDCOM X object, got {type(gx).__name__}")
        self.ctx = ConversionContext(
            config=config or get_config(),
            logger=log,
            graph=SourceGraph(gx),
            reporter=reporter,
        )
        self.log = log

    def build_persons(self) -> None:
        for person in self.ctx.graph.persons:
            build_person(self.ctx, person)

    def run(self) -> str:
        self.log.info("Conversion starting (indexed objects=%d)", len(self.ctx.graph))

        try:
            self.build_persons()
            apply_couples(self.ctx)
            resolve_numbering(self.ctx)
            text = assemble_document(self.ctx)
        except ConversionError:
            self.log.exception("Conversion failed")
            raise
        except Exception as exc:
            self.log.exception("Conversion failed")
            raise ConversionError(str(exc)) from exc

        self.log.info(
            "Conversion completed (records=%d, diagnostics=%d)",
            len(self.ctx.registry),
            len(self.ctx.diagnostics),
        )
        return text


def convert(gx: Dict[str, Any], error: Optional[Reporter] = None, config: Any = None) -> str:
    """
    Convert a parsed GEDCOM X object into a GEDCOM 7.0 document.

    ``error`` receives a message for each non-fatal problem. A NumberingError
    is raised when the generation numbers are inconsistent.
    """
    return Pipeline(gx, reporter=error, config=config).run()
