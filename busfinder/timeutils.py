"""Minute-of-day helpers shared by the search engine, countdown and loader."""

import re
from datetime import datetime, time

MINUTES_PER_DAY = 24 * 60
_HHMM_RE = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)


def _to_int(part: str) -> int:
    try:
        return int(part)
    except ValueError:
        return 0


def parse_time_of_day(s: str) -> int:
    """Lenient "H:MM" -> minutes since midnight.

    Unparsable components count as 0 instead of raising; the compiled-in timetable is trusted data.
    """
    parts = s.split(':')
    hour = _to_int(parts[0])
    minute = _to_int(parts[1]) if len(parts) > 1 else 0
    return hour * 60 + minute


def parse_hhmm(s: str) -> time:
    """Strict "H:MM" / "HH:MM" parser, raises ValueError on anything else."""
    match = _HHMM_RE.fullmatch(s.strip())
    if match is None:
        raise ValueError(f"Time string '{s}' is not in H:MM format")
    return time(hour=int(match[1]), minute=int(match[2]))


def minutes_since_midnight(instant: datetime | time) -> int:
    return instant.hour * 60 + instant.minute


def format_minutes(minutes: int) -> str:
    hour, minute = divmod(minutes % MINUTES_PER_DAY, 60)
    return f"{hour}:{minute:02d}"
