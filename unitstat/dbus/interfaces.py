from abc import ABC, abstractmethod
from typing import Any

from unitstat.models.unit_record import UnitRecord


class ServicePropertySource(ABC):
    """Abstract interface for reading properties of one unit object.
    """

    @abstractmethod
    async def get_property(self, interface: str, property_name: str) -> Any:
        """Read a single property of the unit.
        """

    @abstractmethod
    async def get_processes(self) -> list[Any]:
        """Return the processes of the unit's cgroup.
        """


class UnitListSource(ABC):
    """Abstract interface for the systemd manager as seen by the collector.
    """

    @abstractmethod
    async def list_units(self) -> list[list[Any]]:
        """Return the raw ListUnits entries.
        """

    @abstractmethod
    async def get_unit(self, object_path: str) -> ServicePropertySource:
        """Return a property source for the unit at object_path.
        """


class SystemdUnitParser(ABC):
    """Abstract interface for parsing systemd unit data.
    """

    @abstractmethod
    def parse_unit_list_entry(self, unit_data: list) -> UnitRecord:
        """Parse a single unit entry from D-Bus list_units response.
        """
