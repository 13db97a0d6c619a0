"""
Assembler package.

Re-exports the document assembly entry points used by the pipeline.
"""

from __future__ import annotations

from .document import GEDCOM_VERSION, assemble_document, build_header, write_document

__all__ = ["GEDCOM_VERSION", "assemble_document", "build_header", "write_document"]
