"""
Bus finder for the Columbus City <-> Kaihin-Makuhari Station shuttle.
Next departures by departure or arrival time, with weekend/holiday suspension and countdowns.
"""

__version__ = "0.1.0"

from .countdown import compute_countdowns, countdown_message
from .holidays import HOLIDAYS, is_service_suspended
from .models import Bus, Route, SearchResult, SearchType
from .search import search, search_at_current_time
from .session import TimetableSession
from .timetable import InvalidTimetableData, get_schedule, load_timetable

__all__ = [
    "Bus",
    "HOLIDAYS",
    "InvalidTimetableData",
    "Route",
    "SearchResult",
    "SearchType",
    "TimetableSession",
    "compute_countdowns",
    "countdown_message",
    "get_schedule",
    "is_service_suspended",
    "load_timetable",
    "search",
    "search_at_current_time",
]
