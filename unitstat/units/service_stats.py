import logging
from typing import Any, Final

from dbus_next.errors import DBusError
from pydantic import ValidationError

from unitstat.dbus.constants import (
    ServicePropertyNames,
    SystemdDBusConstants,
    UnitPropertyNames,
)
from unitstat.dbus.interfaces import ServicePropertySource, UnitListSource
from unitstat.models.results import ServiceStatsResult
from unitstat.models.stats import U32_MAX, ServiceStats


# ServiceStats field -> (D-Bus interface, property name)
SERVICE_STATS_PROPERTIES: Final[dict[str, tuple[str, str]]] = {
    'active_enter_timestamp': (
        SystemdDBusConstants.UNIT_INTERFACE,
        UnitPropertyNames.ACTIVE_ENTER_TIMESTAMP,
    ),
    'active_exit_timestamp': (
        SystemdDBusConstants.UNIT_INTERFACE,
        UnitPropertyNames.ACTIVE_EXIT_TIMESTAMP,
    ),
    'cpuusage_nsec': (
        SystemdDBusConstants.SERVICE_INTERFACE,
        ServicePropertyNames.CPU_USAGE_NSEC,
    ),
    'inactive_exit_timestamp': (
        SystemdDBusConstants.UNIT_INTERFACE,
        UnitPropertyNames.INACTIVE_EXIT_TIMESTAMP,
    ),
    'ioread_bytes': (
        SystemdDBusConstants.SERVICE_INTERFACE,
        ServicePropertyNames.IO_READ_BYTES,
    ),
    'ioread_operations': (
        SystemdDBusConstants.SERVICE_INTERFACE,
        ServicePropertyNames.IO_READ_OPERATIONS,
    ),
    'memory_current': (
        SystemdDBusConstants.SERVICE_INTERFACE,
        ServicePropertyNames.MEMORY_CURRENT,
    ),
    'memory_available': (
        SystemdDBusConstants.SERVICE_INTERFACE,
        ServicePropertyNames.MEMORY_AVAILABLE,
    ),
    'nrestarts': (
        SystemdDBusConstants.SERVICE_INTERFACE,
        ServicePropertyNames.NRESTARTS,
    ),
    'restart_usec': (
        SystemdDBusConstants.SERVICE_INTERFACE,
        ServicePropertyNames.RESTART_USEC,
    ),
    'state_change_timestamp': (
        SystemdDBusConstants.UNIT_INTERFACE,
        UnitPropertyNames.STATE_CHANGE_TIMESTAMP,
    ),
    'status_errno': (
        SystemdDBusConstants.SERVICE_INTERFACE,
        ServicePropertyNames.STATUS_ERRNO,
    ),
    'tasks_current': (
        SystemdDBusConstants.SERVICE_INTERFACE,
        ServicePropertyNames.TASKS_CURRENT,
    ),
    'timeout_clean_usec': (
        SystemdDBusConstants.SERVICE_INTERFACE,
        ServicePropertyNames.TIMEOUT_CLEAN_USEC,
    ),
    'watchdog_usec': (
        SystemdDBusConstants.SERVICE_INTERFACE,
        ServicePropertyNames.WATCHDOG_USEC,
    ),
}


class ServiceStatsExtractor:
    """Collects ServiceStats for single service units.
    """

    def __init__(self, unit_source: UnitListSource) -> None:
        """Initialize the extractor.

        Args:
            unit_source: Source of per unit property readers
        """
        self._logger = logging.getLogger(__name__)
        self._unit_source = unit_source

    async def extract(
        self,
        unit_name: str,
        object_path: str,
    ) -> ServiceStatsResult:
        """Read the metrics of one service unit.

        Never raises; a failed read is reported through the result.

        Args:
            unit_name: Name of the service unit
            object_path: D-Bus object path of the service unit

        Returns:
            ServiceStatsResult with the stats or the failure reason
        """
        self._logger.debug('Parsing service %s stats', unit_name)

        try:
            unit = await self._unit_source.get_unit(object_path)
            stats = await self._read_service_stats(unit_name, unit)
        except (DBusError, TimeoutError, ValidationError) as e:
            return self._failure(unit_name, object_path, e)
        except Exception as e:
            self._logger.error(
                'Unexpected error while reading service %s: %s',
                unit_name,
                e,
                exc_info=True,
            )
            return self._failure(unit_name, object_path, e)

        return ServiceStatsResult(
            success=True,
            unit_name=unit_name,
            object_path=object_path,
            stats=stats,
        )

    async def _read_service_stats(
        self,
        unit_name: str,
        unit: ServicePropertySource,
    ) -> ServiceStats:
        """Read every ServiceStats property one after the other.
        """
        values: dict[str, Any] = {}
        for field_name, (interface, property_name) in \
                SERVICE_STATS_PROPERTIES.items():
            values[field_name] = await unit.get_property(
                interface,
                property_name,
            )

        processes = await unit.get_processes()
        values['processes'] = self._count_processes(unit_name, processes)

        return ServiceStats(**values)

    def _count_processes(self, unit_name: str, processes: list[Any]) -> int:
        """Narrow the process count to an unsigned 32 bit integer.

        Falls back to 0 instead of failing the whole service.
        """
        count = len(processes)
        if count > U32_MAX:
            self._logger.error(
                'Unable to get process count for %s into u32: %d',
                unit_name,
                count,
            )
            return 0
        return count

    @staticmethod
    def _failure(
        unit_name: str,
        object_path: str,
        error: Exception,
    ) -> ServiceStatsResult:
        return ServiceStatsResult(
            success=False,
            unit_name=unit_name,
            object_path=object_path,
            error_message=(
                f'Unable to get service stats for {unit_name} '
                f'{object_path}: {error}'
            ),
        )
