"""
Smart Home Example Application

Builds the sample home, prints its report, flips two outlets and prints
the report again. Takes no arguments.
"""

import os
import sys

import log_config  # noqa: F401
from loguru import logger

# Add core to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from core.smart_home import (
    ConfigurationError,
    Device,
    Home,
    LookupPolicy,
    NotFoundError,
    Outlet,
    OutletState,
    UnsupportedOperationError,
    create_home,
    create_room,
    load_settings,
    print_report,
)

CONFIG_PATH = os.path.join(os.path.dirname(__file__), "..", "config.yaml")


def sample_home() -> Home:
    """Hardcoded sample home, used when no config.yaml is available."""
    return create_home(
        "My Smart Home",
        create_room(
            "Bedroom",
            Device.new_outlet("Attached Outlet", OutletState.ON, 250),
            Device.new_outlet("Light Outlet", OutletState.OFF, 150),
            Device.new_thermometer("Electron thermometer", 22.5),
        ),
        create_room(
            "Living Room",
            Device.new_outlet("Lighter", OutletState.ON, 100),
            Device.new_outlet("PC", OutletState.ON, 250),
            Device.new_thermometer("Electronic thermometer", 22.5),
        ),
        create_room(
            "Kitchen Room",
            Device.new_outlet("Refrigerator Outlet", OutletState.ON, 100),
            Device.new_outlet("Teapot Outlet", OutletState.OFF, 150),
            Device.new_thermometer("Kitchen thermometer", 20.0),
        ),
    )


def load_home(config_path: str = CONFIG_PATH) -> Home:
    """Load the home layout from config.yaml, falling back to the sample home."""
    if os.path.exists(config_path):
        try:
            home = Home.from_settings(load_settings(config_path))
            logger.info(f"Loaded home '{home.name}' from {config_path}")
            return home
        except ConfigurationError as e:
            logger.warning(f"Invalid config {config_path}: {e}")

    logger.info("Using built-in sample home")
    return sample_home()


def find_outlet(home: Home, room_key: str, device_key: str) -> Outlet | None:
    """Outlet at room/device key, or None (logged) when the layout lacks it."""
    room = home.find_room(room_key)
    device = room.find_device(device_key) if room is not None else None
    if device is None:
        logger.warning(f"No device '{device_key}' in room '{room_key}', skipping")
        return None
    try:
        return device.as_outlet()
    except UnsupportedOperationError as e:
        logger.warning(f"Skipping: {e}")
        return None


def main(config_path: str = CONFIG_PATH) -> int:
    home = load_home(config_path)

    print("Home information before switching the kitchen Teapot Outlet:")
    print_report(home)
    print("\n")

    teapot = find_outlet(home, "Kitchen Room", "Teapot Outlet")
    if teapot is not None:
        teapot.switch()
        logger.info(f"Teapot Outlet is now {teapot.state}")

    lighter = find_outlet(home, "Living Room", "Lighter")
    if lighter is not None:
        lighter.turn_off()
        logger.info(f"Lighter now draws {lighter.power_usage():g} W")

    print("Home information after switching the kitchen Teapot Outlet:")
    print_report(home)

    # Recoverable lookup error
    if home.lookup_policy is LookupPolicy.ERROR_ON_MISSING_KEY:
        try:
            home.get_device("Kitchen Room", "PC")
        except NotFoundError as e:
            logger.error(f"Error: {e}")

    # Remove and re-add a room
    bedroom = home.remove_room("Bedroom")
    if bedroom is not None:
        logger.info(f"Removed room '{bedroom.name}', {len(home)} room(s) left")
    home.add_room(create_room("New Room", Device.new_outlet("New Outlet", OutletState.ON, 200)))
    home.remove_room("New Room")
    if bedroom is not None:
        home.add_room(bedroom)
    logger.info(f"Rooms: {', '.join(home.room_keys())}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
