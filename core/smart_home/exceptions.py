"""
Smart Home Custom Exceptions

Simple exception hierarchy for error handling.
"""


class SmartHomeError(Exception):
    """Base exception for the smart home package."""

    pass


class ConfigurationError(SmartHomeError):
    """Configuration is invalid."""

    pass


class UnsupportedOperationError(SmartHomeError, TypeError):
    """Capability requested from a device variant that does not have it."""

    pass


class NotFoundError(SmartHomeError, LookupError):
    """A keyed lookup missed."""

    kind = "Entry"
    place = "container"

    def __init__(self, key, container: str):
        self.key = key
        self.container = container
        super().__init__(
            f"{self.kind} with the name '{key}' not found in the {self.place} '{container}'"
        )


class RoomNotFoundError(NotFoundError):
    """Room key is not present in the home."""

    kind = "Room"
    place = "house"


class DeviceNotFoundError(NotFoundError):
    """Device key is not present in the room."""

    kind = "Device"
    place = "room"
