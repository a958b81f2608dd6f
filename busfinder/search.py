"""Entry points of the search engine: holiday gate first, then the mode specific finder."""

import logging
from datetime import date, datetime, time

from .holidays import HOLIDAYS, suspension_message
from .models import Route, SearchResult, SearchType
from .processing import ArrivalFinder, BaseBusFinder, DepartureFinder
from .timetable import Schedule, get_schedule

logger = logging.getLogger(__name__)

_FINDERS: dict[SearchType, BaseBusFinder] = {
    SearchType.DEPARTURE: DepartureFinder(),
    SearchType.ARRIVAL: ArrivalFinder(),
}


def search(
        route: Route,
        mode: SearchType,
        reference_time: datetime | time,
        today: date | None = None,
        timetables: dict[Route, Schedule] | None = None,
        holidays: frozenset[str] = HOLIDAYS,
) -> SearchResult:
    """Recommend up to two buses on `route` for the given mode and reference time.

    `today` decides whether buses run at all and defaults to the local calendar date. An empty result
    without a suspension message means no bus matched.
    """
    if today is None:
        today = date.today()
    message = suspension_message(today, holidays)
    if message is not None:
        logger.info("Service suspended on %s: %s", today.isoformat(), message)
        return SearchResult(suspension_message=message)

    schedule = get_schedule(route, timetables)
    buses = _FINDERS[mode].find(schedule, reference_time)
    logger.debug("%s search on %s at %s -> %s", mode.value, route.value, reference_time.strftime('%H:%M'),
                 [bus.id for bus in buses])
    return SearchResult(buses=tuple(buses))


def search_at_current_time(
        route: Route,
        now: datetime | None = None,
        timetables: dict[Route, Schedule] | None = None,
        holidays: frozenset[str] = HOLIDAYS,
) -> SearchResult:
    if now is None:
        now = datetime.now()
    return search(route, SearchType.DEPARTURE, now, today=now.date(), timetables=timetables, holidays=holidays)
