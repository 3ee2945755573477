"""Smart home device/room/home model package."""

# Define public API
__all__ = [
    "Device",
    "Outlet",
    "OutletState",
    "Thermometer",
    "Room",
    "create_room",
    "Home",
    "create_home",
    "Reportable",
    "print_report",
    "LookupPolicy",
    "HomeSettings",
    "load_settings",
    "SmartHomeError",
    "NotFoundError",
    "RoomNotFoundError",
    "DeviceNotFoundError",
    "UnsupportedOperationError",
    "ConfigurationError",
]

# Import devices
from .devices import Device, Outlet, OutletState, Thermometer

# Import containers
from .room import Room, create_room
from .home import Home, create_home

# Import reporting
from .reporting import Reportable, print_report

# Import settings
from .settings import HomeSettings, LookupPolicy, load_settings

# Import exceptions
from .exceptions import (
    ConfigurationError,
    DeviceNotFoundError,
    NotFoundError,
    RoomNotFoundError,
    SmartHomeError,
    UnsupportedOperationError,
)
