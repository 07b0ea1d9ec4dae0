import asyncio
import logging
from typing import Any

from dbus_next.errors import DBusError

from unitstat.dbus.connection import DBusConnectionManager
from unitstat.dbus.constants import ConnectionConfig, SystemdDBusConstants
from unitstat.dbus.interfaces import UnitListSource
from unitstat.dbus.unit import SystemdUnit


class SystemdManager(UnitListSource):
    """Read-only access to the systemd manager.

    Serves as a factory for SystemdUnit instances
    """

    def __init__(
        self,
        dbus_manager: DBusConnectionManager,
        call_timeout: float = ConnectionConfig.MANAGER_CALL_TIMEOUT,
    ):
        """Initialize the SystemdManager.

        Args:
            dbus_manager: The D-Bus connection manager.
            call_timeout: Deadline in seconds for manager calls.
        """
        self._logger = logging.getLogger(__name__)

        self._dbus_manager = dbus_manager
        self._call_timeout = call_timeout
        self._manager_proxy = None

    async def _ensure_manager_proxy(self) -> None:
        """Ensure the systemd manager D-Bus proxy is initialized.
        """
        if self._manager_proxy is not None:
            return

        try:
            bus = await self._dbus_manager.get_bus()
            introspection = await asyncio.wait_for(
                bus.introspect(
                    SystemdDBusConstants.SERVICE_NAME,
                    SystemdDBusConstants.OBJECT_PATH,
                ),
                self._call_timeout,
            )
            proxy_object = bus.get_proxy_object(
                SystemdDBusConstants.SERVICE_NAME,
                SystemdDBusConstants.OBJECT_PATH,
                introspection,
            )
            self._manager_proxy = proxy_object.get_interface(
                SystemdDBusConstants.MANAGER_INTERFACE
            )
        except (DBusError, TimeoutError) as e:
            self._logger.error(
                'Failed to create systemd manager proxy: %s',
                e,
            )
            raise

    async def list_units(self) -> list[list[Any]]:
        """List all systemd units.

        Returns:
            List of unit data arrays as returned by systemd

        Raises:
            DBusError: If the D-Bus call fails
            TimeoutError: If the call does not finish within the deadline
        """
        await self._ensure_manager_proxy()

        try:
            return await asyncio.wait_for(
                self._manager_proxy.call_list_units(),  # type: ignore
                self._call_timeout,
            )
        except (DBusError, TimeoutError) as e:
            self._logger.error(
                'Failed to list systemd units: %s',
                e,
            )
            raise

    async def get_unit(self, object_path: str) -> SystemdUnit:
        """Get a SystemdUnit for an object path taken from list_units.

        Args:
            object_path: The D-Bus object path of the unit

        Returns:
            SystemdUnit instance bound to the same connection
        """
        return SystemdUnit(self._dbus_manager, object_path)
