"""A tree of stations with the bicycles registered in them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from .bintree import BinTree
from .fleet import Fleet
from .station import Station


@dataclass
class Network:
    """Stations arranged in a binary tree, plus the fleet of bicycles."""

    tree: Optional[BinTree]
    stations: dict[str, Station]
    fleet: Fleet = field(default_factory=Fleet)
    free_total: int = 0

    @classmethod
    def read(cls, tokens: Iterable[str]) -> "Network":
        """Read the station tree in preorder: ``id capacity`` per node, ``#`` for empty.

        Tokens are consumed from ``tokens``; an iterator is left positioned after the tree.
        """
        tokens = iter(tokens)
        stations: dict[str, Station] = {}
        total = 0

        def take() -> str:
            token = next(tokens, None)
            if token is None:
                raise ValueError("unexpected end of station tree")
            return token

        def node() -> Optional[BinTree]:
            nonlocal total
            station_id = take()
            if station_id == "#":
                return None
            capacity = int(take())
            total += capacity
            stations[station_id] = Station(station_id, capacity)
            left = node()
            right = node()
            return BinTree(station_id, left, right)

        tree = node()
        return cls(tree, stations, free_total=total)

    def register(self, bike_id: str, station_id: str) -> None:
        """Register a new bicycle parked at ``station_id``."""
        self.stations[station_id].add_bike(bike_id)
        self.fleet.add(bike_id, station_id)
        self.free_total -= 1

    def has_station(self, station_id: str) -> bool:
        """Whether the tree holds a station with this identifier."""
        return self.tree is not None and station_id in self.tree

    def bike_location(self, bike_id: str) -> str:
        """Station where the bicycle is parked."""
        return self.fleet.location(bike_id)

    def move_bike(self, bike_id: str, new_station: str) -> None:
        """Ride a bicycle from where it is to ``new_station``."""
        old = self.stations[self.fleet.location(bike_id)]
        bike = old.bikes[bike_id]
        bike.travel(new_station)
        self.stations[new_station].receive(bike)
        old.remove_bike(bike_id)
        self.fleet.travel(bike_id, new_station)

    def has_bike(self, bike_id: str) -> bool:
        """Whether the bicycle is registered."""
        return bike_id in self.fleet

    def remove_bike(self, bike_id: str) -> None:
        """Unregister a bicycle and take it out of its station."""
        self.fleet.remove(bike_id)
        for station_id in sorted(self.stations):
            station = self.stations[station_id]
            if bike_id in station:
                station.remove_bike(bike_id)
                break

    def has_room(self) -> bool:
        """Whether any station has a free slot."""
        return any(station.free_slots() > 0 for station in self.stations.values())

    def push_bikes_up(self) -> None:
        """Fill each station with bicycles from its children, top down."""
        self._push(self.tree)

    def _take_from(self, child: Station, parent: Station) -> bool:
        ids = child.bike_ids()
        if not ids:
            return False
        bike_id = ids[0]
        self.fleet.relocate(bike_id, parent.station_id)
        parent.receive(child.bikes[bike_id])
        child.remove_bike(bike_id)
        return True

    def _push(self, node: Optional[BinTree]) -> None:
        if node is None or node.left is None or node.right is None:
            return
        parent = self.stations[node.value]
        left = self.stations[node.left.value]
        right = self.stations[node.right.value]
        while parent.free_slots() > 0:
            lo, ro = left.occupancy(), right.occupancy()
            if lo > ro or (lo == ro and left.station_id < right.station_id):
                if not self._take_from(left, parent):
                    break
            elif lo < ro or (lo == ro and left.station_id > right.station_id):
                if not self._take_from(right, parent):
                    break
            if not (
                parent.free_slots() > 0
                and (left.occupancy() > 0 or right.occupancy() > 0)
            ):
                break
        self._push(node.left)
        self._push(node.right)

    def best_station(self) -> str:
        """Station whose subtree has the most free slots per station.

        Ties go to the smaller identifier; subtrees are visited left, right, root.
        """
        best_id = ""
        best_ratio = 0.0

        def visit(node: Optional[BinTree]) -> tuple[int, int]:
            nonlocal best_id, best_ratio
            if node is None:
                return 0, 0
            station = self.stations[node.value]
            if node.left is None:
                slots, count = station.free_slots(), 1
            else:
                left_slots, left_count = visit(node.left)
                right_slots, right_count = visit(node.right)
                slots = left_slots + right_slots + station.free_slots()
                count = left_count + right_count + 1
            ratio = slots / count
            if ratio > best_ratio:
                best_ratio = ratio
                best_id = node.value
            elif ratio == best_ratio and node.value < best_id:
                best_id = node.value
            return slots, count

        visit(self.tree)
        return best_id