from __future__ import annotations

from typing import Any, Dict, Optional

from gedcomx7.gedcom7.node import G7Node, g7


def note_value(note: Dict[str, Any]) -> Optional[G7Node]:
    """
    Build an inline NOTE from a GEDCOM X Note.

    The subject, when present, is prefixed to the text followed by a blank
    line so both survive as one multi-line payload.
    """
    if not note:
        return None

    text = note.get("text") or ""
    if note.get("subject"):
        text = f"{note['subject']}:\n\n{text}"

    node = g7("NOTE", text)
    if note.get("lang"):
        node.add(g7("LANG", note["lang"]))
    return node
