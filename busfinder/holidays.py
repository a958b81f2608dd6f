"""Service-suspension calendar: no buses run on weekends and Japanese public holidays."""

from datetime import date, datetime

# Python weekday numbering (Mon=0, Sun=6).
WEEKEND_DAYS = frozenset({5, 6})

HOLIDAYS: frozenset[str] = frozenset({
    "2025-01-01", "2025-01-13", "2025-02-11", "2025-02-23", "2025-03-20",
    "2025-04-29", "2025-05-03", "2025-05-04", "2025-05-05", "2025-07-21",
    "2025-08-11", "2025-09-15", "2025-09-23", "2025-10-13", "2025-11-03",
    "2025-11-23", "2025-12-23",
})

WEEKEND_MESSAGE = "No service today: weekend."
HOLIDAY_MESSAGE = "No service today: public holiday."


def _iso_day(day: date) -> str:
    # datetime.isoformat() would carry the clock time along
    if isinstance(day, datetime):
        day = day.date()
    return day.isoformat()


def is_weekend(day: date) -> bool:
    return day.weekday() in WEEKEND_DAYS


def is_service_suspended(day: date, holidays: frozenset[str] = HOLIDAYS) -> bool:
    return is_weekend(day) or _iso_day(day) in holidays


def suspension_message(day: date, holidays: frozenset[str] = HOLIDAYS) -> str | None:
    """Human readable reason for a suspended day, None when buses run."""
    if is_weekend(day):
        return WEEKEND_MESSAGE
    if _iso_day(day) in holidays:
        return HOLIDAY_MESSAGE
    return None
