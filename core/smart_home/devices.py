"""
Smart Home Devices

Two device variants (thermometer, outlet) and the Device wrapper that
holds exactly one of them. Rooms store Device objects only.
"""

from dataclasses import dataclass
from enum import Enum

from .exceptions import UnsupportedOperationError
from .reporting import Reportable


class OutletState(Enum):
    """Power state of an outlet."""

    ON = "on"
    OFF = "off"

    def __str__(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value) -> "OutletState":
        """Accept an OutletState, a bool or an "on"/"off" string."""
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            return cls.ON if value else cls.OFF
        return cls(str(value).strip().lower())


@dataclass
class Thermometer(Reportable):
    """Temperature sensor with a fixed reading."""

    name: str
    temperature: float  # °C

    def current_temperature(self) -> float:
        return self.temperature

    @property
    def fahrenheit(self) -> float:
        return self.temperature * 9.0 / 5.0 + 32.0

    @property
    def kelvin(self) -> float:
        return self.temperature + 273.15

    def report(self) -> str:
        return f"Thermometer: {self.name} - Current Temperature: {self.temperature:.2f}°C"


@dataclass
class Outlet(Reportable):
    """Switchable power outlet.

    ``rated_power`` is the draw while switched on. ``power_usage()`` is
    always 0 while the outlet is off.
    """

    name: str
    state: OutletState = OutletState.OFF
    rated_power: float = 0.0  # W

    def __post_init__(self):
        self.state = OutletState.parse(self.state)

    def is_on(self) -> bool:
        return self.state is OutletState.ON

    def power_usage(self) -> float:
        return self.rated_power if self.is_on() else 0

    def turn_on(self) -> None:
        self.state = OutletState.ON

    def turn_off(self) -> None:
        self.state = OutletState.OFF

    def switch(self) -> None:
        self.state = OutletState.OFF if self.is_on() else OutletState.ON

    def report(self) -> str:
        return (
            f"Smart Outlet: {self.name} - Current State: {self.state}, "
            f"Power Usage: {self.power_usage():g} Watt"
        )


DEVICE_VARIANTS = (Thermometer, Outlet)


@dataclass
class Device(Reportable):
    """A smart device: wraps exactly one variant.

    Variant-specific operations are reached through ``as_thermometer()``
    and ``as_outlet()``, which raise UnsupportedOperationError for the
    wrong variant. The convenience methods below go through the same
    handles. ``match device.variant`` works as well.
    """

    variant: Thermometer | Outlet

    def __post_init__(self):
        if not isinstance(self.variant, DEVICE_VARIANTS):
            raise TypeError(
                f"Device variant must be Thermometer or Outlet, got {type(self.variant).__name__}"
            )

    @classmethod
    def new_thermometer(cls, name: str, temperature: float) -> "Device":
        return cls(Thermometer(name, temperature))

    @classmethod
    def new_outlet(
        cls, name: str, state: OutletState | bool | str = OutletState.OFF, power_usage: float = 0.0
    ) -> "Device":
        return cls(Outlet(name, OutletState.parse(state), power_usage))

    @property
    def name(self) -> str:
        return self.variant.name

    @property
    def kind(self) -> str:
        """Variant name in lower case ("thermometer" or "outlet")."""
        return type(self.variant).__name__.lower()

    def as_thermometer(self) -> Thermometer:
        if not isinstance(self.variant, Thermometer):
            raise UnsupportedOperationError(
                f"Device '{self.name}' is a {self.kind}, not a thermometer"
            )
        return self.variant

    def as_outlet(self) -> Outlet:
        if not isinstance(self.variant, Outlet):
            raise UnsupportedOperationError(
                f"Device '{self.name}' is a {self.kind}, not an outlet"
            )
        return self.variant

    # Thermometer capability
    def current_temperature(self) -> float:
        return self.as_thermometer().current_temperature()

    # Outlet capabilities
    def power_usage(self) -> float:
        return self.as_outlet().power_usage()

    def is_on(self) -> bool:
        return self.as_outlet().is_on()

    def turn_on(self) -> None:
        self.as_outlet().turn_on()

    def turn_off(self) -> None:
        self.as_outlet().turn_off()

    def switch(self) -> None:
        self.as_outlet().switch()

    def report(self) -> str:
        label = "Outlet" if isinstance(self.variant, Outlet) else "Thermometer"
        return f"{label}: {self.name}\n{self.variant.report()}"
