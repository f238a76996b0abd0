"""Normalization of the date-time strings found in exported notes."""

import re
from datetime import datetime
from typing import Optional

CANONICAL_FORMAT = "%Y-%m-%d %H:%M:%S"

# ASCII digits only; fullwidth digits are left for the pass-through fallback.
_TIME = r"(?:\s+([0-9]{1,2}):([0-9]{1,2})(?::([0-9]{1,2}))?)?"
_YMD_RE = re.compile(r"([0-9]{4})[/-]([0-9]{1,2})[/-]([0-9]{1,2})" + _TIME)
_MDY_RE = re.compile(r"([0-9]{1,2})/([0-9]{1,2})/([0-9]{4})" + _TIME)


def now_timestamp(now: Optional[datetime] = None) -> str:
    """Current local time in canonical form."""
    return (now or datetime.now()).strftime(CANONICAL_FORMAT)


def _parse_iso(raw: str) -> Optional[datetime]:
    try:
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        # Render in local wall-clock time, like the export viewer does.
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _join(year: str, month: str, day: str, hour, minute, second) -> str:
    return (
        f"{year}-{month.zfill(2)}-{day.zfill(2)} "
        f"{(hour or '00').zfill(2)}:{(minute or '00').zfill(2)}:{(second or '00').zfill(2)}"
    )


def normalize_datetime(raw: str) -> str:
    """Convert a date-time string to ``YYYY-MM-DD HH:MM:SS``.

    Tries ISO 8601 (only when the string has a ``T`` designator), then
    ``Y-M-D``/``Y/M/D`` and finally US ``M/D/Y``, each with an optional
    ``H:M[:S]`` time. Missing time fields become ``00``. Strings matching
    none of these are returned unchanged.
    """
    if "T" in raw:
        parsed = _parse_iso(raw)
        if parsed is not None:
            return parsed.strftime(CANONICAL_FORMAT)

    match = _YMD_RE.search(raw)
    if match:
        year, month, day, hour, minute, second = match.groups()
        return _join(year, month, day, hour, minute, second)

    match = _MDY_RE.search(raw)
    if match:
        month, day, year, hour, minute, second = match.groups()
        return _join(year, month, day, hour, minute, second)

    return raw
