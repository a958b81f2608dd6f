from .base import BaseBusFinder
from ..models import Bus
from ..timeutils import parse_time_of_day


class ArrivalFinder(BaseBusFinder):
    """Latest buses arriving no later than the target clock time, latest first.

    Compares clock faces only: no midnight rollover and no dependency on the current time.
    """
    descending = True

    def candidate_key(self, bus: Bus, reference_minutes: int) -> int | None:
        arrival_minutes = parse_time_of_day(bus.arrival)
        return arrival_minutes if arrival_minutes <= reference_minutes else None
