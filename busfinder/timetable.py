"""Static timetable of the Columbus City shuttle plus a validating JSON loader for replacement data."""

import json
import logging
from pathlib import Path

import dacite

from .models import Bus, Route
from .timeutils import MINUTES_PER_DAY, parse_hhmm, parse_time_of_day

logger = logging.getLogger(__name__)

# Departures before this minute of the day belong to the previous service day.
EARLY_MORNING_CUTOFF = 4 * 60

# Published order, read-only.
Schedule = tuple[Bus, ...]


class InvalidTimetableData(ValueError):
    """Raised when external timetable data does not describe a usable schedule."""


def _buses(*pairs: tuple[str, str]) -> Schedule:
    return tuple(Bus(departure=departure, arrival=arrival) for departure, arrival in pairs)


TIMETABLES: dict[Route, Schedule] = {
    Route.OUTBOUND: _buses(
        ("6:03", "6:11"), ("6:30", "6:38"), ("6:40", "6:48"), ("6:50", "6:58"),
        ("7:00", "7:08"), ("7:10", "7:18"), ("7:20", "7:28"), ("7:30", "7:38"),
        ("7:40", "7:48"), ("7:50", "7:58"), ("8:00", "8:08"), ("8:10", "8:18"),
        ("8:20", "8:28"), ("8:30", "8:38"), ("8:40", "8:48"), ("9:00", "9:08"),
        ("9:30", "9:38"), ("10:00", "10:08"), ("10:30", "10:38"), ("11:00", "11:08"),
        ("11:30", "11:38"), ("13:00", "13:08"), ("13:30", "13:38"), ("14:00", "14:08"),
        ("14:30", "14:38"), ("15:00", "15:08"), ("15:30", "15:38"), ("16:00", "16:08"),
        ("16:30", "16:38"), ("17:04", "17:12"), ("17:37", "17:46"), ("18:02", "18:11"),
        ("18:19", "18:28"), ("18:37", "18:46"), ("19:01", "19:10"), ("19:18", "19:27"),
        ("19:32", "19:41"), ("19:51", "20:00"), ("20:11", "20:20"), ("20:51", "21:00"),
        ("21:08", "21:17"), ("21:55", "22:04"), ("22:19", "22:28"), ("22:37", "22:46"),
        ("23:06", "23:15"), ("23:38", "23:47"), ("0:04", "0:13"),
    ),
    Route.INBOUND: _buses(
        ("6:11", "6:18"), ("6:38", "6:45"), ("6:48", "6:55"), ("6:58", "7:05"),
        ("7:08", "7:15"), ("7:18", "7:25"), ("7:28", "7:35"), ("7:38", "7:45"),
        ("7:48", "7:55"), ("7:58", "8:05"), ("8:08", "8:15"), ("8:18", "8:25"),
        ("8:28", "8:35"), ("8:48", "8:55"), ("9:38", "9:53"), ("10:08", "10:15"),
        ("10:38", "10:53"), ("11:08", "11:15"), ("11:38", "11:53"), ("13:08", "13:15"),
        ("13:38", "13:53"), ("14:08", "14:15"), ("14:38", "14:53"), ("15:08", "15:15"),
        ("15:38", "15:53"), ("16:08", "16:15"), ("16:38", "16:53"), ("17:12", "17:19"),
        ("17:46", "17:53"), ("18:11", "18:18"), ("18:28", "18:35"), ("18:46", "18:53"),
        ("19:10", "19:17"), ("19:27", "19:34"), ("19:41", "19:48"), ("20:00", "20:07"),
        ("20:20", "20:27"), ("20:43", "20:50"), ("21:00", "21:07"), ("21:17", "21:24"),
        ("21:39", "21:46"), ("22:04", "22:11"), ("22:28", "22:35"), ("22:46", "22:53"),
        ("23:15", "23:22"), ("23:47", "23:54"), ("0:13", "0:20"),
    ),
}


def service_day_minutes(time_str: str) -> int:
    """Minute of the service day; after-midnight runs sort behind the late evening ones."""
    minutes = parse_time_of_day(time_str)
    if minutes < EARLY_MORNING_CUTOFF:
        minutes += MINUTES_PER_DAY
    return minutes


def get_schedule(route: Route, timetables: dict[Route, Schedule] | None = None) -> Schedule:
    if timetables is None:
        timetables = TIMETABLES
    return timetables.get(route, ())


# ---------------- Loading external data -----------------
def validate_schedule(buses: Schedule) -> None:
    seen: set[str] = set()
    previous: Bus | None = None
    for bus in buses:
        for field_name in ('departure', 'arrival'):
            value = getattr(bus, field_name)
            try:
                parse_hhmm(value)
            except ValueError as e:
                raise InvalidTimetableData(f"Bus {bus}: bad {field_name} time") from e
        if bus.id in seen:
            raise InvalidTimetableData(f"Duplicate departure {bus.id}")
        seen.add(bus.id)
        if previous is not None and service_day_minutes(bus.departure) < service_day_minutes(previous.departure):
            raise InvalidTimetableData(f"Departure {bus.departure} listed after {previous.departure}")
        previous = bus


def _parse_route(name: str) -> Route:
    try:
        return Route(name)
    except ValueError as e:
        raise InvalidTimetableData(f"Unknown route '{name}'") from e


def _parse_bus(route_name: str, entry: object) -> Bus:
    if not isinstance(entry, dict):
        raise InvalidTimetableData(f"Route '{route_name}': entry {entry!r} is not an object")
    try:
        return dacite.from_dict(data_class=Bus, data=entry, config=dacite.Config(strict=True))
    except dacite.DaciteError as e:
        raise InvalidTimetableData(f"Route '{route_name}': {e}") from e


def parse_timetable(loaded_data: dict) -> dict[Route, Schedule]:
    if not isinstance(loaded_data, dict):
        raise InvalidTimetableData("Timetable document must be a mapping of route -> list of buses")
    timetables: dict[Route, Schedule] = {}
    for route_name, entries in loaded_data.items():
        route = _parse_route(route_name)
        if not isinstance(entries, list):
            raise InvalidTimetableData(f"Route '{route_name}' must hold a list of buses")
        buses = tuple(_parse_bus(route_name, entry) for entry in entries)
        validate_schedule(buses)
        timetables[route] = buses
    return timetables


def load_timetable(path: Path) -> dict[Route, Schedule]:
    logger.info("Loading timetable from %s", path)
    with open(path, 'rt', encoding='utf-8') as f:
        try:
            loaded_data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidTimetableData(f"{path} is not valid UTF-8 JSON") from e
    timetables = parse_timetable(loaded_data)
    logger.debug("Loaded %s", {route.value: len(buses) for route, buses in timetables.items()})
    return timetables
