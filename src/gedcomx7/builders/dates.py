# src/gedcomx7/builders/dates.py

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, List, Optional, Tuple

from gedcomx7.gedcom7.node import G7Node, g7


# ---------------------------------------------------------------------------
# GEDCOM X formal date syntax
# ---------------------------------------------------------------------------

SIMPLE_DATE = re.compile(
    r"^(A)?([-+][0-9]{4})"
    r"(?:-([0-9]{2})"
    r"(?:-([0-9]{2})"
    r"(?:T([0-9]{2})"
    r"(?::([0-9]{2})"
    r"(?::([0-9]{2}(?:\.[0-9]+)?))?)?"
    r"([-+][0-9]{2}(?::[0-9]{2})?|Z)?)?)?)?$"
)

DURATION = re.compile(
    r"^P(?:([0-9]+)Y)?(?:([0-9]+)M)?(?:([0-9]+)D)?"
    r"(?:T(?:([0-9]+)H)?(?:([0-9]+)M)?(?:([0-9]+)S)?)?$"
)

MONTHS = {
    "01": "JAN",
    "02": "FEB",
    "03": "MAR",
    "04": "APR",
    "05": "MAY",
    "06": "JUN",
    "07": "JUL",
    "08": "AUG",
    "09": "SEP",
    "10": "OCT",
    "11": "NOV",
    "12": "DEC",
}

UNITS = ("years", "months", "days", "hours", "minutes", "seconds")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class DateFormatError(ValueError):
    """A formal date fragment that does not follow the GEDCOM X syntax."""


@dataclass
class SimpleDate:
    """One formal date (no range), already in GEDCOM 7 words."""
    date: str
    time: Optional[str] = None
    zone_phrase: Optional[str] = None


# ---------------------------------------------------------------------------
# Core parsing helpers
# ---------------------------------------------------------------------------

def _parse_simple(text: str) -> SimpleDate:
    m = SIMPLE_DATE.match(text)
    if not m:
        raise DateFormatError(f"not a formal date: {text!r}")

    approx, year, month, day, hour, minute, second, zone = m.groups()

    if month is not None and month not in MONTHS:
        raise DateFormatError(f"month out of range: {text!r}")

    y = int(year)
    epoch = ""
    if y <= 0:
        y = 1 - y
        epoch = " BCE"

    words: List[str] = []
    if approx:
        words.append("ABT")
    if day:
        words.append(str(int(day)))
    if month:
        words.append(MONTHS[month])
    words.append(f"{y}{epoch}")
    date = " ".join(words)

    if not hour:
        return SimpleDate(date)

    time = f"{hour}:{minute or '00'}" + (f":{second}" if second else "")
    if zone == "Z":
        return SimpleDate(date, time + "Z")
    if zone:
        return SimpleDate(date, time, f"Time zone {zone}")
    return SimpleDate(date, time)


def _components(text: str) -> Tuple[float, ...]:
    m = SIMPLE_DATE.match(text)
    if not m:
        raise DateFormatError(f"not a formal date: {text!r}")
    return tuple(float(g) if g else 0.0 for g in m.groups()[1:7])


def _every(amounts: Tuple[float, ...]) -> str:
    words = []
    for amount, unit in zip(amounts, UNITS):
        if amount:
            number = int(amount) if float(amount).is_integer() else amount
            words.append(f"{number} {unit}")
    return " ".join(words)


def _recurrence_phrase(count: str, start: str, end: str) -> str:
    times = count[1:]
    if not times:
        times = "indefinitely"
    elif times == "1":
        times = "once"
    else:
        times = f"{times} times"

    if end.startswith("P"):
        m = DURATION.match(end)
        if not m:
            raise DateFormatError(f"not a duration: {end!r}")
        amounts = tuple(float(g) if g else 0.0 for g in m.groups())
    else:
        a = _components(start)
        b = _components(end)
        amounts = tuple(y - x for x, y in zip(a, b))

    return f"repeats {times} every {_every(amounts)}".strip()


def _phrase(phrases: List[str]) -> Optional[G7Node]:
    return g7("PHRASE", "\n".join(phrases)) if phrases else None


def _format_range(d: str, start: str, end: str, phrases: List[str], period: bool) -> G7Node:
    if start.startswith("A"):
        phrases.append(f"gedcomx date: {d}")
        start = start[1:]

    sd = _parse_simple(start) if start else None
    ed = _parse_simple(end) if end else None

    s_zone = sd.zone_phrase if sd else None
    e_zone = ed.zone_phrase if ed else None
    if s_zone and e_zone:
        phrases.append(f"Starting in {s_zone}; ending in {e_zone}")
    elif s_zone or e_zone:
        phrases.append(s_zone or e_zone)

    if ((sd and sd.time) or (ed and ed.time)) and f"gedcomx date: {d}" not in phrases:
        phrases.append(f"gedcomx date: {d}")

    phrase = _phrase(phrases)
    lead, single_start, single_end, joiner = (
        ("FROM", "FROM", "TO", "TO") if period else ("BET", "AFT", "BEF", "AND")
    )
    if sd and ed:
        return g7("DATE", f"{lead} {sd.date} {joiner} {ed.date}", phrase)
    if sd:
        return g7("DATE", f"{single_start} {sd.date}", phrase)
    if ed:
        return g7("DATE", f"{single_end} {ed.date}", phrase)
    return g7("DATE", None, g7("PHRASE", f"gedcomx date: {d}"))


def format_formal_date(d: str, period: bool = False) -> G7Node:
    """
    Convert one GEDCOM X formal date string into a DATE structure.

    Supports:
        - '+1900', 'A+1900-05', '+1900-05-06T12:30:00Z'
        - '+1900/+1910' (BET/AND), '+1900/' (AFT), '/+1910' (BEF);
          FROM/TO instead when ``period`` is set
        - 'R3/+1900/P1Y' and 'R/+1900/+1901' recurrences (as a PHRASE)

    Raises DateFormatError on anything else.
    """
    bits = d.split("/")
    phrases: List[str] = []

    if len(bits) > 3:
        raise DateFormatError(f"too many '/' separators: {d!r}")

    if len(bits) == 3:
        if not bits[0].startswith("R"):
            raise DateFormatError(f"recurrence must start with 'R': {d!r}")
        phrases.append(_recurrence_phrase(bits[0], bits[1], bits[2]))
        bits = [bits[1]]

    if len(bits) == 2:
        return _format_range(d, bits[0], bits[1], phrases, period)

    od = _parse_simple(bits[0])
    if od.zone_phrase:
        phrases.append(od.zone_phrase)
    time = g7("TIME", od.time) if od.time else None
    return g7("DATE", od.date, time, _phrase(phrases))


def epoch_millis_to_formal(ms: float) -> str:
    """Milliseconds since 1970 (GEDCOM X timestamps) as a formal UTC date."""
    moment = EPOCH + timedelta(milliseconds=ms)
    return (
        f"+{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
        f".{moment.microsecond // 1000:03d}Z"
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def date_value(ctx, value: Any, period: bool = False) -> Optional[G7Node]:
    """
    Build a DATE structure from any GEDCOM X date representation.

    Returns None when there is no date information at all. Unparseable
    formal dates are reported through ``ctx`` and kept as a PHRASE.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, G7Node):
        return value

    if isinstance(value, (int, float)):
        value = epoch_millis_to_formal(value)

    if isinstance(value, dict):
        original = value.get("original")
        if value.get("formal"):
            node = date_value(ctx, value["formal"], period)
            if node is None:
                return g7("DATE", None, g7("PHRASE", original)) if original else None
            if original:
                phrase = node.find_first("PHRASE")
                if phrase is not None:
                    phrase.set_payload(original)
                else:
                    node.add(g7("PHRASE", original))
            return node
        if original:
            return g7("DATE", None, g7("PHRASE", original))
        return None

    text = str(value).strip()
    if not text:
        return None

    try:
        return format_formal_date(text, period)
    except DateFormatError as exc:
        ctx.report(f"Unsupported date {text!r}: {exc}")
        return g7("DATE", None, g7("PHRASE", f"unsupported gedcomx data: {text}"))
