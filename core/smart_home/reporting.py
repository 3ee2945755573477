"""Shared reporting interface for devices, rooms and homes."""

from abc import ABC, abstractmethod


class Reportable(ABC):
    @abstractmethod
    def report(self) -> str:
        "Human-readable status of the entity"
        pass


def print_report(item: Reportable) -> None:
    """Print the status report of any reportable entity."""
    print(item.report())
