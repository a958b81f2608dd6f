from .base import BaseBusFinder
from ..models import Bus
from ..timetable import EARLY_MORNING_CUTOFF
from ..timeutils import MINUTES_PER_DAY, parse_time_of_day

LATE_EVENING_START = 21 * 60


class DepartureFinder(BaseBusFinder):
    """Next buses leaving at or after the reference time, earliest first.

    Late in the evening (after 21:00) runs leaving before 04:00 are treated as the same night's last buses
    rather than this morning's, so they rank after the remaining evening departures.
    """

    @staticmethod
    def adjusted_departure(bus: Bus, reference_minutes: int) -> int:
        departure_minutes = parse_time_of_day(bus.departure)
        if reference_minutes > LATE_EVENING_START and departure_minutes < EARLY_MORNING_CUTOFF:
            departure_minutes += MINUTES_PER_DAY
        return departure_minutes

    def candidate_key(self, bus: Bus, reference_minutes: int) -> int | None:
        departure_minutes = self.adjusted_departure(bus, reference_minutes)
        return departure_minutes if departure_minutes >= reference_minutes else None
