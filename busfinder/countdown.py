from datetime import datetime, timedelta
from typing import Iterable

from .models import Bus
from .timeutils import parse_time_of_day

ALREADY_DEPARTED = "already departed"
DEPARTING_NOW = "departing now"


def next_departure(bus: Bus, now: datetime) -> datetime:
    """Today's run of `bus`, or tomorrow's when today's is already in the past."""
    hour, minute = divmod(parse_time_of_day(bus.departure), 60)
    candidate = now.replace(hour=hour % 24, minute=minute, second=0, microsecond=0)
    if candidate < now:
        candidate += timedelta(days=1)
    return candidate


def _whole_hours_minutes(delta: timedelta) -> tuple[int, int]:
    # truncate toward zero, seconds are dropped
    seconds = int(delta.total_seconds())
    sign = -1 if seconds < 0 else 1
    hours, rest = divmod(abs(seconds), 3600)
    return sign * hours, sign * (rest // 60)


def countdown_message(bus: Bus, now: datetime) -> str:
    hours, minutes = _whole_hours_minutes(next_departure(bus, now) - now)
    if hours < 0 or (hours == 0 and minutes < 0):
        return ALREADY_DEPARTED
    if hours > 0:
        return f"in {hours} hours {minutes} minutes"
    if minutes > 0:
        return f"in {minutes} minutes"
    return DEPARTING_NOW


def compute_countdowns(buses: Iterable[Bus], now: datetime) -> dict[str, str]:
    """Fresh bus id -> countdown text mapping for the given result set."""
    return {bus.id: countdown_message(bus, now) for bus in buses}
