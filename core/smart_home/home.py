"""
Smart Home

Root of the object graph: a named collection of keyed rooms. Rooms take
over the home's lookup policy when they are inserted.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Optional

from .devices import Device
from .exceptions import RoomNotFoundError
from .lookup import handle_missing
from .reporting import Reportable
from .room import Room
from .settings import HomeSettings, LookupPolicy

logger = logging.getLogger(__name__)

ROOM_SEPARATOR = "====================================="

RoomEntries = Mapping[str, Room] | Iterable[tuple[str, Room] | Room]


class Home(Reportable):
    """Smart home holding keyed rooms."""

    def __init__(
        self,
        name: str = "Smart Home",
        rooms: Optional[RoomEntries] = None,
        lookup_policy: LookupPolicy = LookupPolicy.ERROR_ON_MISSING_KEY,
    ):
        """Initialize home.

        Args:
            name: Home name, shown in reports and error messages
            rooms: Initial rooms as a mapping, (key, room) pairs or rooms keyed by name
            lookup_policy: Behaviour of every lookup in the home on a miss
        """
        self.name = name
        self.lookup_policy = lookup_policy
        self._rooms: dict[str, Room] = {}

        if isinstance(rooms, Mapping):
            rooms = rooms.items()
        for entry in rooms or ():
            if isinstance(entry, Room):
                self.add_room(entry)
            else:
                self.insert_room(*entry)

    @classmethod
    def from_settings(cls, settings: HomeSettings) -> "Home":
        """Build a home from loaded settings."""
        home = cls(settings.name, lookup_policy=settings.lookup_policy)
        for room_settings in settings.rooms:
            home.add_room(Room.from_settings(room_settings))
        logger.info(f"Home '{home.name}' built with {len(home)} room(s)")
        return home

    def __repr__(self) -> str:
        return f"Home(name={self.name!r}, rooms={self.room_keys()!r})"

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, key) -> bool:
        return key in self._rooms

    def __iter__(self) -> Iterator[tuple[str, Room]]:
        return iter(list(self._rooms.items()))

    def room_keys(self) -> list[str]:
        """Room keys in insertion order."""
        return list(self._rooms)

    def insert_room(self, key: str, room: Room) -> None:
        """Store a room, replacing any room already under ``key``."""
        if key in self._rooms:
            logger.debug(f"Home '{self.name}': replacing room '{key}'")
        else:
            logger.debug(f"Home '{self.name}': adding room '{key}'")
        room.lookup_policy = self.lookup_policy
        self._rooms[key] = room

    def add_room(self, room: Room) -> None:
        """Store a room under its own name."""
        self.insert_room(room.name, room)

    def remove_room(self, key: str) -> Optional[Room]:
        """Remove and return the room under ``key``, or None if absent."""
        if key not in self._rooms:
            return None
        logger.debug(f"Home '{self.name}': removed room '{key}'")
        return self._rooms.pop(key)

    def find_room(self, key: str) -> Optional[Room]:
        """Room under ``key`` or None. Never fails."""
        return self._rooms.get(key)

    def get_room(self, key: str) -> Room:
        """Room under ``key`` (the stored object, safe to mutate).

        Raises:
            RoomNotFoundError: If the key is absent (ERROR_ON_MISSING_KEY)
        """
        if key not in self._rooms:
            handle_missing(RoomNotFoundError(key, self.name), self.lookup_policy)
        return self._rooms[key]

    def room_at(self, index: int) -> Room:
        """Room at ``index`` in insertion order.

        Raises:
            RoomNotFoundError: If the index is out of range (ERROR_ON_MISSING_KEY)
        """
        keys = self.room_keys()
        if not 0 <= index < len(keys):
            handle_missing(RoomNotFoundError(index, self.name), self.lookup_policy)
        return self._rooms[keys[index]]

    def get_device(self, room_key: str, device_key: str) -> Device:
        """Device ``device_key`` inside room ``room_key``.

        Raises:
            RoomNotFoundError: If the room is absent
            DeviceNotFoundError: If the room exists but the device does not
        """
        return self.get_room(room_key).get_device(device_key)

    def report(self) -> str:
        room_reports = [
            f"Room[{i}] {self._rooms[key].report()}"
            for i, key in enumerate(sorted(self._rooms))
        ]
        header = f"Smart Home: {self.name}:\n Total Rooms: {len(room_reports)}"
        if not room_reports:
            return header
        return header + "\n\n" + f"\n{ROOM_SEPARATOR}\n".join(room_reports)


def create_home(
    name: str,
    *rooms: tuple[str, Room] | Room,
    lookup_policy: LookupPolicy = LookupPolicy.ERROR_ON_MISSING_KEY,
) -> Home:
    """Build a home from (key, room) pairs or rooms keyed by their name."""
    return Home(name, rooms, lookup_policy=lookup_policy)
