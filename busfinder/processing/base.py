from abc import ABC, abstractmethod
from datetime import datetime, time
from typing import Iterable

from ..models import Bus
from ..timeutils import minutes_since_midnight

# Number of buses recommended per search.
RESULT_LIMIT = 2


class BaseBusFinder(ABC):
    """Filter / rank / limit skeleton shared by the departure and arrival searches.

    Subclasses map each bus to a comparable minute value (or None to drop it) and pick the sort direction.
    Python's sort is stable, so buses with equal keys keep their published order.
    """
    descending: bool = False

    def __init__(self, limit: int = RESULT_LIMIT):
        self.limit = limit

    @abstractmethod
    def candidate_key(self, bus: Bus, reference_minutes: int) -> int | None:  # pragma: no cover
        raise NotImplementedError

    def _candidates(self, schedule: Iterable[Bus], reference_minutes: int) -> list[tuple[Bus, int]]:
        candidates = []
        for bus in schedule:
            key = self.candidate_key(bus, reference_minutes)
            if key is not None:
                candidates.append((bus, key))
        return candidates

    def find(self, schedule: Iterable[Bus], reference_time: datetime | time) -> list[Bus]:
        reference_minutes = minutes_since_midnight(reference_time)
        candidates = self._candidates(schedule, reference_minutes)
        candidates.sort(key=lambda item: item[1], reverse=self.descending)
        return [bus for bus, _ in candidates[:self.limit]]
