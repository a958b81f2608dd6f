from dataclasses import dataclass
from enum import Enum
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Bus:
    """Single scheduled run between the two stops.

    departure / arrival keep the published "H:MM" strings untouched; the departure string doubles as the
    identity of a bus within its route.
    """
    departure: str
    arrival: str

    @property
    def id(self) -> str:
        return self.departure


class Route(str, Enum):
    """Travel direction between Columbus City and Kaihin-Makuhari Station."""
    OUTBOUND = "outbound"
    INBOUND = "inbound"

    @property
    def label(self) -> str:
        return _ROUTE_LABELS[self]


_ROUTE_LABELS = {
    Route.OUTBOUND: "Columbus City -> Kaihin-Makuhari Sta.",
    Route.INBOUND: "Kaihin-Makuhari Sta. -> Columbus City",
}


class SearchType(str, Enum):
    DEPARTURE = "departure"
    ARRIVAL = "arrival"


@dataclass(frozen=True, slots=True)
class SearchResult:
    """Outcome of one search: at most two buses, closest to the reference first.

    suspension_message is set instead of buses on days without service, so an empty result with no message
    simply means nothing matched.
    """
    buses: tuple[Bus, ...] = ()
    suspension_message: str | None = None

    @property
    def suspended(self) -> bool:
        return self.suspension_message is not None

    def __iter__(self) -> Iterator[Bus]:
        return iter(self.buses)

    def __len__(self) -> int:
        return len(self.buses)

    def __getitem__(self, index: int) -> Bus:
        return self.buses[index]
