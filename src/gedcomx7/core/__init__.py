from __future__ import annotations

from .context import ConversionContext, NumberingTables
from .exceptions import ConversionError, NumberingError, RegistryError, SourceGraphError
from .pipeline import Pipeline, convert

__all__ = [
    "ConversionContext",
    "ConversionError",
    "NumberingError",
    "NumberingTables",
    "Pipeline",
    "RegistryError",
    "SourceGraphError",
    "convert",
]
