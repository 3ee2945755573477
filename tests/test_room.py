"""Unit tests for Room: keyed storage, lookups and reports."""

import pytest

from core.smart_home.devices import Device, OutletState
from core.smart_home.exceptions import DeviceNotFoundError, NotFoundError
from core.smart_home.room import Room, create_room


def _living_room() -> Room:
    return create_room(
        "Living Room",
        ("Lighter", Device.new_outlet("Lighter", OutletState.ON, 100)),
        ("PC", Device.new_outlet("PC", OutletState.ON, 250)),
        ("Electronic thermometer", Device.new_thermometer("Electronic thermometer", 22.5)),
    )


# ===================================================================
# Construction
# ===================================================================
class TestRoomConstruction:
    def test_empty(self):
        room = Room("Living Room")
        assert room.name == "Living Room"
        assert len(room) == 0

    def test_builder(self):
        room = _living_room()
        assert len(room) == 3
        assert room.device_keys() == ["Lighter", "PC", "Electronic thermometer"]

    def test_builder_without_devices(self):
        room = create_room("Kitchen")
        assert room.name == "Kitchen"
        assert len(room) == 0

    def test_from_mapping(self):
        lamp = Device.new_outlet("lamp", OutletState.OFF, 40)
        room = Room("Hall", {"lamp1": lamp})
        assert room.get_device("lamp1") is lamp

    def test_bare_devices_keyed_by_name(self):
        room = Room("Hall", [Device.new_thermometer("temp1", 21)])
        assert "temp1" in room

    def test_constructor_does_not_share_mapping(self):
        devices = {"lamp1": Device.new_outlet("lamp", OutletState.OFF, 40)}
        room = Room("Hall", devices)
        devices.clear()
        assert len(room) == 1


# ===================================================================
# Keyed storage
# ===================================================================
class TestRoomStorage:
    def test_get_returns_inserted(self):
        room = Room("Hall")
        device = Device.new_thermometer("temp1", 21)
        room.insert_device("temp1", device)
        assert room.get_device("temp1") is device

    def test_insert_overwrites(self):
        room = _living_room()
        replacement = Device.new_outlet("Desk lamp", OutletState.OFF, 40)
        room.insert_device("PC", replacement)
        assert len(room) == 3
        assert room.get_device("PC") == replacement

    def test_remove_returns_device(self):
        room = _living_room()
        removed = room.remove_device("PC")
        assert removed.name == "PC"
        assert "PC" not in room
        assert len(room) == 2

    def test_remove_is_idempotent(self):
        room = _living_room()
        room.remove_device("PC")
        assert room.remove_device("PC") is None
        assert room.device_keys() == ["Lighter", "Electronic thermometer"]

    def test_remove_missing_leaves_room_unchanged(self):
        room = _living_room()
        assert room.remove_device("Toaster") is None
        assert room == _living_room()

    def test_mutation_through_lookup_is_visible(self):
        room = _living_room()
        room.get_device("Lighter").turn_off()
        assert room.get_device("Lighter").power_usage() == 0

    def test_iteration_yields_pairs(self):
        room = _living_room()
        assert [key for key, _ in room] == room.device_keys()


# ===================================================================
# Lookups
# ===================================================================
class TestRoomLookup:
    def test_key_holding_none_is_present(self):
        room = Room("Hall")
        room.insert_device("ghost", None)
        assert room.get_device("ghost") is None
        assert room.remove_device("ghost") is None
        assert "ghost" not in room

    def test_missing_key_raises(self):
        room = _living_room()
        with pytest.raises(DeviceNotFoundError) as exc_info:
            room.get_device("Some device")
        err = exc_info.value
        assert err.key == "Some device"
        assert err.container == "Living Room"
        assert str(err) == "Device with the name 'Some device' not found in the room 'Living Room'"

    def test_not_found_is_lookup_error(self):
        with pytest.raises(LookupError):
            Room("Empty").get_device("x")
        with pytest.raises(NotFoundError):
            Room("Empty").get_device("x")

    def test_find_device_never_fails(self):
        room = _living_room()
        assert room.find_device("Some device") is None
        assert room.find_device("PC").name == "PC"

    def test_device_at(self):
        room = _living_room()
        assert room.device_at(0).name == "Lighter"
        assert room.device_at(2).name == "Electronic thermometer"

    @pytest.mark.parametrize("index", [3, -1])
    def test_device_at_out_of_range(self, index):
        room = _living_room()
        with pytest.raises(DeviceNotFoundError) as exc_info:
            room.device_at(index)
        assert exc_info.value.key == index


# ===================================================================
# Report
# ===================================================================
class TestRoomReport:
    def test_contains_every_device(self):
        report = _living_room().report()
        assert "Smart Room: Living Room:" in report
        assert "Total devices: 3" in report
        assert "Smart Outlet: Lighter - Current State: On, Power Usage: 100 Watt" in report
        assert "Smart Outlet: PC - Current State: On, Power Usage: 250 Watt" in report
        assert "Thermometer: Electronic thermometer - Current Temperature: 22.50°C" in report

    def test_sorted_by_key(self):
        report = _living_room().report()
        assert report.index("Electronic thermometer") < report.index("Lighter") < report.index("PC:")

    def test_deterministic(self):
        assert _living_room().report() == _living_room().report()

    def test_empty_room(self):
        assert Room("Attic").report() == "Smart Room: Attic:\n Total devices: 0"

    def test_reflects_state_change(self):
        room = _living_room()
        room.get_device("PC").turn_off()
        assert "PC - Current State: Off, Power Usage: 0 Watt" in room.report()
