"""A docking station with a capacity and the bicycles parked in it."""

from __future__ import annotations

from dataclasses import dataclass, field

from .bicycle import Bicycle


@dataclass
class Station:
    """A station holding up to ``capacity`` bicycles."""

    station_id: str
    capacity: int = 0
    bikes: dict[str, Bicycle] = field(default_factory=dict)

    def remove_bike(self, bike_id: str) -> Bicycle:
        """Take a bicycle out and return it; ``KeyError`` if it is not here."""
        try:
            return self.bikes.pop(bike_id)
        except KeyError:
            raise KeyError(
                f"bike {bike_id!r} is not at station {self.station_id!r}"
            ) from None

    def trips(self, bike_id: str) -> list[tuple[str, str]]:
        """Trips of a bicycle parked here."""
        return self.bikes[bike_id].trip_pairs()

    def bike_ids(self) -> list[str]:
        """Identifiers of the parked bicycles, sorted."""
        return sorted(self.bikes)

    def occupancy(self) -> int:
        """Number of parked bicycles."""
        return len(self.bikes)

    def __contains__(self, bike_id: object) -> bool:
        return bike_id in self.bikes

    def add_bike(self, bike_id: str) -> None:
        """Park a new bicycle here; an existing one is left untouched."""
        self.bikes.setdefault(bike_id, Bicycle(bike_id, self.station_id))

    def receive(self, bike: Bicycle) -> None:
        """Park an existing bicycle here, updating its location."""
        bike.relocate(self.station_id)
        self.bikes[bike.bike_id] = bike

    def set_capacity(self, capacity: int) -> None:
        """Change how many bicycles the station can hold."""
        self.capacity = capacity

    def free_slots(self) -> int:
        """Capacity left unused."""
        return self.capacity - len(self.bikes)