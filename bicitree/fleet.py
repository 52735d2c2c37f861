"""The set of all registered bicycles, keyed by identifier."""

from __future__ import annotations

from typing import Iterator

from .bicycle import Bicycle


class Fleet:
    """Registered bicycles and where each of them is."""

    def __init__(self) -> None:
        self._bikes: dict[str, Bicycle] = {}

    def location(self, bike_id: str) -> str:
        """Station where the bicycle is; ``KeyError`` if it is unknown."""
        return self._bikes[bike_id].location

    def add(self, bike_id: str, station_id: str) -> None:
        """Register a new bicycle at ``station_id``."""
        self._bikes[bike_id] = Bicycle(bike_id, station_id)

    def remove(self, bike_id: str) -> None:
        """Forget a bicycle; unknown identifiers are ignored."""
        self._bikes.pop(bike_id, None)

    def __contains__(self, bike_id: object) -> bool:
        return bike_id in self._bikes

    def __len__(self) -> int:
        return len(self._bikes)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._bikes))

    def travel(self, bike_id: str, station_id: str) -> None:
        """Record a trip of the bicycle to ``station_id``."""
        self._bikes[bike_id].travel(station_id)

    def relocate(self, bike_id: str, station_id: str) -> None:
        """Move the bicycle to ``station_id`` without recording a trip."""
        self._bikes[bike_id].relocate(station_id)

    def trips(self, bike_id: str) -> list[tuple[str, str]]:
        """The bicycle's trips as ``(origin, destination)`` pairs."""
        return self._bikes[bike_id].trip_pairs()