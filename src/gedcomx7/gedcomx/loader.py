from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from gedcomx7.core.exceptions import SourceGraphError
from gedcomx7.logging import get_logger

log = get_logger(__name__)


def load_gedcomx(path: str | Path) -> Dict[str, Any]:
    """
    Read a GEDCOM X JSON file into memory.

    The whole graph must be materialized: GEDCOM X and GEDCOM 7 both link
    records in directions that cannot be resolved while streaming.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    with path.open("r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise SourceGraphError(f"{path}: not valid JSON ({exc})") from exc

    if not isinstance(data, dict):
        raise SourceGraphError(f"{path}: expected a GEDCOM X object, got {type(data).__name__}")

    log.debug(
        "Loaded %s (persons=%d, relationships=%d)",
        path,
        len(data.get("persons") or []),
        len(data.get("relationships") or []),
    )
    return data
