"""A bicycle and the stations it has travelled through."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import pairwise


@dataclass
class Bicycle:
    """A bicycle parked at ``location`` with its travel history."""

    bike_id: str
    location: str
    history: list[str] = field(init=False)

    def __post_init__(self) -> None:
        self.history = [self.location]

    def travel(self, station_id: str) -> None:
        """Ride to ``station_id``, recording the trip."""
        self.history.append(station_id)
        self.location = station_id

    def relocate(self, station_id: str) -> None:
        """Move to ``station_id`` without recording a trip."""
        self.location = station_id

    def trip_pairs(self) -> list[tuple[str, str]]:
        """Each recorded trip as an ``(origin, destination)`` pair, in order."""
        return list(pairwise(self.history))