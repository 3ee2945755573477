"""
Smart Room

A named collection of devices stored under unique string keys.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Optional

from .devices import Device
from .exceptions import DeviceNotFoundError
from .lookup import handle_missing
from .reporting import Reportable
from .settings import LookupPolicy, RoomSettings

logger = logging.getLogger(__name__)

DeviceEntries = Mapping[str, Device] | Iterable[tuple[str, Device] | Device]


def _normalize_devices(devices: Optional[DeviceEntries]) -> dict[str, Device]:
    """Turn a mapping, (key, device) pairs or bare devices into a dict.

    Bare devices are keyed by their name. Later duplicates win.
    """
    if devices is None:
        return {}
    if isinstance(devices, Mapping):
        return dict(devices)

    result: dict[str, Device] = {}
    for entry in devices:
        if isinstance(entry, Device):
            result[entry.name] = entry
        else:
            key, device = entry
            result[key] = device
    return result


class Room(Reportable):
    """Smart room holding keyed devices."""

    def __init__(
        self,
        name: str,
        devices: Optional[DeviceEntries] = None,
        lookup_policy: LookupPolicy = LookupPolicy.ERROR_ON_MISSING_KEY,
    ):
        """Initialize room.

        Args:
            name: Room name, also its default key inside a home
            devices: Initial devices as a mapping, (key, device) pairs or devices
            lookup_policy: Behaviour of get_device/device_at on a miss
        """
        self.name = name
        self.lookup_policy = lookup_policy
        self._devices = _normalize_devices(devices)

    @classmethod
    def from_settings(
        cls, settings: RoomSettings, lookup_policy: LookupPolicy = LookupPolicy.ERROR_ON_MISSING_KEY
    ) -> "Room":
        return cls(
            settings.name,
            [(d.storage_key, d.build()) for d in settings.devices],
            lookup_policy=lookup_policy,
        )

    def __repr__(self) -> str:
        return f"Room(name={self.name!r}, devices={self._devices!r})"

    def __eq__(self, other) -> bool:
        if not isinstance(other, Room):
            return NotImplemented
        return self.name == other.name and self._devices == other._devices

    def __len__(self) -> int:
        return len(self._devices)

    def __contains__(self, key) -> bool:
        return key in self._devices

    def __iter__(self) -> Iterator[tuple[str, Device]]:
        return iter(list(self._devices.items()))

    def device_keys(self) -> list[str]:
        """Device keys in insertion order."""
        return list(self._devices)

    def insert_device(self, key: str, device: Device) -> None:
        """Store a device, replacing any device already under ``key``."""
        if key in self._devices:
            logger.debug(f"Room '{self.name}': replacing device '{key}'")
        else:
            logger.debug(f"Room '{self.name}': adding device '{key}'")
        self._devices[key] = device

    def remove_device(self, key: str) -> Optional[Device]:
        """Remove and return the device under ``key``, or None if absent."""
        if key not in self._devices:
            return None
        logger.debug(f"Room '{self.name}': removed device '{key}'")
        return self._devices.pop(key)

    def find_device(self, key: str) -> Optional[Device]:
        """Device under ``key`` or None. Never fails."""
        return self._devices.get(key)

    def get_device(self, key: str) -> Device:
        """Device under ``key``.

        The returned object is the stored one, so changes made through it
        (e.g. ``turn_off()``) are visible in the room.

        Raises:
            DeviceNotFoundError: If the key is absent (ERROR_ON_MISSING_KEY)
        """
        if key not in self._devices:
            handle_missing(DeviceNotFoundError(key, self.name), self.lookup_policy)
        return self._devices[key]

    def device_at(self, index: int) -> Device:
        """Device at ``index`` in insertion order.

        Raises:
            DeviceNotFoundError: If the index is out of range (ERROR_ON_MISSING_KEY)
        """
        keys = self.device_keys()
        if not 0 <= index < len(keys):
            handle_missing(DeviceNotFoundError(index, self.name), self.lookup_policy)
        return self._devices[keys[index]]

    def report(self) -> str:
        entries = [
            f"[{i}] {key}: {self._devices[key].report()}"
            for i, key in enumerate(sorted(self._devices))
        ]
        lines = [f"Smart Room: {self.name}:", f" Total devices: {len(entries)}"]
        lines.extend(f"  {line}" for entry in entries for line in entry.splitlines())
        return "\n".join(lines)


def create_room(
    name: str,
    *entries: tuple[str, Device] | Device,
    lookup_policy: LookupPolicy = LookupPolicy.ERROR_ON_MISSING_KEY,
) -> Room:
    """Build a room from (key, device) pairs or devices keyed by their name."""
    return Room(name, entries, lookup_policy=lookup_policy)
