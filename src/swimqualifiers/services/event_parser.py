"""Utilities for normalizing event names and reading swim times from cells."""

import datetime

from openpyxl.utils.datetime import to_excel

SECONDS_PER_DAY = 86400

# Applied in order after all "m" characters and spaces are removed. Each
# replacement sees the output of the previous one, so "M.E." must come
# before "M.E" and "I.M." before "I.M".
EVENT_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    # Full stroke names from meet sheets
    ("Free", "Fr"),
    ("Fly", "Bu"),
    ("Back", "Bk"),
    ("Breast", "Br"),
    # Medley spellings
    ("M.E.", "Me"),
    ("M.E", "Me"),
    ("I.M.", "Me"),
    ("I.M", "Me"),
    # Abbreviated butterfly used by standards sheets
    ("FL", "Bu"),
)

AND_UNDER_SUFFIX = "&U"


def normalize_event(event: str) -> str | None:
    """Canonicalize an event name from either a standards row or a meet sheet.

    Examples:
        "200 Free"  -> "200Fr"
        "200 Fr"    -> "200Fr"
        "100m Fly"  -> "100Bu"
        "50 FL"     -> "50Bu"
        "200 I.M."  -> "200Me"

    Args:
        event: Raw event name

    Returns:
        Normalized event name, or None for blank input
    """
    if not event.strip():
        return None

    normalized = event.strip().replace("m", "").replace(" ", "")
    for pattern, replacement in EVENT_REPLACEMENTS:
        normalized = normalized.replace(pattern, replacement)
    return normalized


def normalize_age(age: str) -> str:
    """Strip an "and under" marker from an age-group label ("13&U" -> "13")."""
    return age.strip().replace(AND_UNDER_SUFFIX, "")


def time_to_seconds(value: object) -> float | None:
    """Read a swim time in seconds from a spreadsheet cell value.

    Handles:
    - numbers, taken as seconds already
    - date/time cells, stored by Excel as a fraction of a day
    - text: "65.3" or "1:05.30" (minutes:seconds)

    Args:
        value: Cell value as returned by openpyxl

    Returns:
        Seconds, or None if the cell holds no readable time
    """
    # bool is an int subclass but never a time
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, (datetime.datetime, datetime.date, datetime.time, datetime.timedelta)):
        return to_excel(value) * SECONDS_PER_DAY
    if isinstance(value, str):
        return _text_to_seconds(value)
    return None


def _text_to_seconds(text: str) -> float | None:
    text = text.strip()
    if not text or text.lower() == "nan":
        return None

    if ":" in text:
        parts = text.split(":")
        if len(parts) == 2:
            try:
                minutes = float(parts[0])
                seconds = float(parts[1])
            except ValueError:
                return None
            return minutes * 60 + seconds

    try:
        return float(text)
    except ValueError:
        return None


def format_seconds(seconds: float) -> str:
    """Format seconds as SS.cc or M:SS.cc.

    Examples:
        59.45 -> "59.45"
        65.3  -> "1:05.30"
    """
    centiseconds = int(round(seconds * 100))
    minutes, cs = divmod(centiseconds, 6000)
    if minutes > 0:
        return f"{minutes}:{cs / 100:05.2f}"
    return f"{cs / 100:.2f}"
