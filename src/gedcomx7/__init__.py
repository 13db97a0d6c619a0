"""
gedcomx7: convert FamilySearch-style GEDCOM X JSON into GEDCOM 7.0.

    from gedcomx7 import convert
    text = convert(json.load(f), error=print)
"""

from __future__ import annotations

from gedcomx7.core.exceptions import ConversionError, NumberingError
from gedcomx7.core.pipeline import Pipeline, convert

__version__ = "0.1.0"

__all__ = [
    "ConversionError",
    "NumberingError",
    "Pipeline",
    "convert",
    "__version__",
]
