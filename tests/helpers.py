from datetime import date, datetime

WEDNESDAY = date(2025, 10, 15)
SATURDAY = date(2025, 10, 18)
SUNDAY = date(2025, 10, 19)
SPORTS_DAY = date(2025, 10, 13)  # Monday, public holiday


def at(hour: int, minute: int, second: int = 0, day: date = WEDNESDAY) -> datetime:
    return datetime(day.year, day.month, day.day, hour, minute, second)


class FakeClock:
    """Callable clock the tests can move forward by hand."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now


def departures(buses) -> list[str]:
    return [bus.departure for bus in buses]


def arrivals(buses) -> list[str]:
    return [bus.arrival for bus in buses]
