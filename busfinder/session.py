"""Stateful core consumed by the display layer.

A session remembers the picker state (route, search mode, chosen times), publishes the latest search
outcome and keeps the countdown texts fresh on a periodic tick. Every published value is replaced as a
whole under one lock, so readers never observe a half-updated result.
"""
import logging
import threading
import time
from datetime import datetime
from typing import Callable

import schedule

from .config import settings
from .countdown import compute_countdowns
from .holidays import HOLIDAYS, suspension_message
from .models import Bus, Route, SearchResult, SearchType
from .search import search
from .timetable import Schedule, get_schedule

logger = logging.getLogger(__name__)

NOT_SEARCHED_DESCRIPTION = "search: not searched yet"
SUSPENDED_DESCRIPTION = "search: no service today"

Observer = Callable[["TimetableSession"], None]


class TimetableSession:
    def __init__(
            self,
            clock: Callable[[], datetime] = datetime.now,
            timetables: dict[Route, Schedule] | None = None,
            holidays: frozenset[str] = HOLIDAYS,
    ):
        self.clock = clock
        self.timetables = timetables
        self.holidays = holidays

        now = clock()
        self.selected_route: Route = Route.OUTBOUND
        self.search_type: SearchType = SearchType.DEPARTURE
        self.departure_time: datetime = now
        self.arrival_time: datetime = now

        self._lock = threading.Lock()
        self._observers: list[Observer] = []
        self._scheduler = schedule.Scheduler()
        self._tick_job: schedule.Job | None = None

        self._search_results: tuple[Bus, ...] = ()
        self._search_criteria_description = NOT_SEARCHED_DESCRIPTION
        self._holiday_message: str | None = None
        self._countdown_messages: dict[str, str] = {}
        self.check_holiday()

    # ---------------- published state -----------------
    @property
    def search_results(self) -> tuple[Bus, ...]:
        return self._search_results

    @property
    def search_criteria_description(self) -> str:
        return self._search_criteria_description

    @property
    def holiday_message(self) -> str | None:
        return self._holiday_message

    @property
    def countdown_messages(self) -> dict[str, str]:
        return dict(self._countdown_messages)

    @property
    def current_full_timetable(self) -> Schedule:
        return get_schedule(self.selected_route, self.timetables)

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register `observer` to be called after every publish; returns the matching unsubscribe."""
        self._observers.append(observer)

        def unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return unsubscribe

    def _notify(self) -> None:
        for observer in list(self._observers):
            observer(self)

    # ---------------- actions -----------------
    def check_holiday(self) -> str | None:
        message = suspension_message(self.clock(), self.holidays)
        with self._lock:
            self._holiday_message = message
        return message

    def perform_search(self) -> SearchResult:
        now = self.clock()
        if self.search_type is SearchType.ARRIVAL:
            reference_time = self.arrival_time
        else:
            reference_time = self.departure_time
        result = search(self.selected_route, self.search_type, reference_time, today=now.date(),
                        timetables=self.timetables, holidays=self.holidays)

        if result.suspended:
            description = SUSPENDED_DESCRIPTION
        else:
            description = f"search: {self.search_type.value} target {reference_time.strftime('%H:%M')}"
        countdowns = compute_countdowns(result.buses, now)

        with self._lock:
            self._holiday_message = result.suspension_message
            self._search_results = result.buses
            self._search_criteria_description = description
            self._countdown_messages = countdowns
        logger.info("%s -> %s", description, [bus.id for bus in result.buses] or result.suspension_message)
        self._notify()
        return result

    def search_at_current_time(self) -> SearchResult:
        self.search_type = SearchType.DEPARTURE
        self.departure_time = self.clock()
        return self.perform_search()

    def update_countdown(self) -> None:
        with self._lock:
            buses = self._search_results
        countdowns = compute_countdowns(buses, self.clock())
        with self._lock:
            self._countdown_messages = countdowns
        self._notify()

    # ---------------- periodic tick -----------------
    def start_ticking(self, seconds: int | None = None) -> None:
        if self._tick_job is not None:
            return
        seconds = seconds or settings.tick_seconds
        self._tick_job = self._scheduler.every(seconds).seconds.do(self.update_countdown)
        logger.debug("Countdown tick every %ss", seconds)

    def stop_ticking(self) -> None:
        if self._tick_job is None:
            return
        self._scheduler.cancel_job(self._tick_job)
        self._tick_job = None
        logger.debug("Countdown tick stopped")

    @property
    def ticking(self) -> bool:
        return self._tick_job is not None

    def run_pending(self) -> None:
        self._scheduler.run_pending()

    def run_forever(self, stop_event: threading.Event, poll_seconds: float = 0.2) -> None:
        """Drive the tick until `stop_event` is set; the tick is stopped on the way out."""
        self.start_ticking()
        try:
            while not stop_event.is_set():
                try:
                    self.run_pending()
                except Exception:  # noqa: BLE001
                    logger.exception("Countdown tick failed")
                time.sleep(poll_seconds)
        finally:
            self.stop_ticking()
