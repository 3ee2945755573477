"""
Smart Home Configuration Settings

Home layout and lookup policy. User-facing settings are loaded from
config.yaml (``options.home`` section).
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
import re

import yaml

from .devices import Device, OutletState
from .exceptions import ConfigurationError


def _camel_to_snake(name: str) -> str:
    """Convert camelCase to snake_case."""
    s1 = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", s1).lower()


def _convert_keys(data: dict) -> dict:
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping, got {type(data).__name__}")
    return {_camel_to_snake(k): v for k, v in data.items()}


def _to_float(value, field_name: str, device_name: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"Device '{device_name}' has invalid {field_name} '{value}'")


class LookupPolicy(Enum):
    """What happens when a lookup misses.

    ERROR_ON_MISSING_KEY raises a recoverable NotFoundError.
    PANIC_ON_OOB terminates the process on the spot.
    """

    ERROR_ON_MISSING_KEY = "error_on_missing_key"
    PANIC_ON_OOB = "panic_on_oob"

    @classmethod
    def parse(cls, value) -> "LookupPolicy":
        if isinstance(value, cls):
            return value
        try:
            return cls(_camel_to_snake(str(value)).strip().lower())
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise ConfigurationError(f"Unknown lookup policy '{value}' (allowed: {allowed})")


@dataclass
class DeviceSettings:
    """Configuration for a single device."""

    name: str
    type: str  # "thermometer" or "outlet"
    temperature: float | None = None  # thermometer only (°C)
    state: str = "off"  # outlet only
    power_usage: float = 0.0  # outlet only, rated draw when on (W)
    key: str | None = None  # storage key in the room, defaults to name

    @classmethod
    def from_dict(cls, data: dict) -> "DeviceSettings":
        """Create from dictionary."""
        converted = _convert_keys(data)

        # Accept a plain on/off flag for outlets
        if "is_on" in converted:
            converted["state"] = "on" if converted.pop("is_on") else "off"

        try:
            return cls(**converted)
        except TypeError as e:
            raise ConfigurationError(f"Invalid device settings {data}: {e}")

    @property
    def storage_key(self) -> str:
        return self.key or self.name

    def build(self) -> Device:
        """Create the configured Device."""
        device_type = self.type.strip().lower()
        if device_type == "thermometer":
            if self.temperature is None:
                raise ConfigurationError(f"Thermometer '{self.name}' has no temperature")
            return Device.new_thermometer(self.name, _to_float(self.temperature, "temperature", self.name))
        if device_type == "outlet":
            try:
                state = OutletState.parse(self.state)
            except ValueError:
                raise ConfigurationError(f"Outlet '{self.name}' has invalid state '{self.state}'")
            return Device.new_outlet(self.name, state, _to_float(self.power_usage, "power_usage", self.name))
        raise ConfigurationError(f"Unknown device type '{self.type}' for '{self.name}'")


@dataclass
class RoomSettings:
    """Configuration for a single room."""

    name: str
    devices: list[DeviceSettings] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "RoomSettings":
        """Create from dictionary."""
        converted = _convert_keys(data)
        if "name" not in converted:
            raise ConfigurationError(f"Room settings without a name: {data}")
        devices = [DeviceSettings.from_dict(d) for d in converted.get("devices") or []]
        return cls(name=converted["name"], devices=devices)


@dataclass
class HomeSettings:
    """Configuration for a whole home."""

    name: str = "Smart Home"
    rooms: list[RoomSettings] = field(default_factory=list)
    lookup_policy: LookupPolicy = LookupPolicy.ERROR_ON_MISSING_KEY

    @classmethod
    def from_dict(cls, data: dict) -> "HomeSettings":
        """Create from dictionary."""
        converted = _convert_keys(data)
        rooms = [RoomSettings.from_dict(r) for r in converted.get("rooms") or []]
        policy = LookupPolicy.parse(
            converted.get("lookup_policy", LookupPolicy.ERROR_ON_MISSING_KEY)
        )
        return cls(name=converted.get("name", "Smart Home"), rooms=rooms, lookup_policy=policy)


def load_settings(path: str | Path) -> HomeSettings:
    """Load home settings from the ``options.home`` section of a YAML file."""
    path = Path(path)
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    with open(path) as f:
        try:
            config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Cannot parse {path}: {e}")

    if not isinstance(config, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    options = config.get("options") or {}
    if not isinstance(options, dict):
        raise ConfigurationError(f"options in {path} must be a mapping")

    home_config = options.get("home")
    if not home_config:
        raise ConfigurationError(f"No options.home section in {path}")
    return HomeSettings.from_dict(home_config)
