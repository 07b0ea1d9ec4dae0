import asyncio
import logging
from typing import Any

from dbus_next.errors import DBusError

from unitstat.dbus.connection import DBusConnectionManager
from unitstat.dbus.constants import (
    ConnectionConfig,
    DBusConstants,
    SystemdDBusConstants,
)
from unitstat.dbus.interfaces import ServicePropertySource
from unitstat.dbus.types import DBusVariantValue


class SystemdUnit(ServicePropertySource):
    """Represents a systemd unit.

    Provides read-only access to its properties via D-Bus.
    """

    def __init__(
        self,
        dbus_manager: DBusConnectionManager,
        object_path: str,
        call_timeout: float = ConnectionConfig.UNIT_CALL_TIMEOUT,
    ):
        """Initialize a SystemdUnit instance.

        Args:
            dbus_manager: The D-Bus connection manager
            object_path: The D-Bus object path for this unit
            call_timeout: Deadline in seconds for each D-Bus call
        """
        self._logger = logging.getLogger(__name__)

        self._dbus_manager = dbus_manager
        self._object_path = object_path
        self._call_timeout = call_timeout
        self._proxy_object = None

    @property
    def object_path(self) -> str:
        """Get the D-Bus object path for this unit.
        """
        return self._object_path

    async def _ensure_proxy(self) -> None:
        """Ensure the D-Bus proxy object is initialized.
        """
        if self._proxy_object is not None:
            return

        try:
            bus = await self._dbus_manager.get_bus()
            introspection = await asyncio.wait_for(
                bus.introspect(
                    SystemdDBusConstants.SERVICE_NAME,
                    self._object_path,
                ),
                self._call_timeout,
            )
            self._proxy_object = bus.get_proxy_object(
                SystemdDBusConstants.SERVICE_NAME,
                self._object_path,
                introspection,
            )
        except (DBusError, TimeoutError) as e:
            self._logger.error(
                'Failed to create proxy for unit %s: %s',
                self._object_path,
                e,
            )
            raise

    async def get_property(self, interface: str, property_name: str) -> Any:
        """Get a single property from the unit.

        Args:
            interface: The D-Bus interface name
            property_name: The property name to retrieve

        Returns:
            The property value

        Raises:
            DBusError: If the D-Bus call fails
            TimeoutError: If the call does not finish within the deadline
        """
        await self._ensure_proxy()

        try:
            properties_interface = self._proxy_object.get_interface( # type: ignore
                DBusConstants.PROPERTIES_INTERFACE
            )
            variant = await asyncio.wait_for(
                properties_interface.call_get( # type: ignore
                    interface,
                    property_name,
                ),
                self._call_timeout,
            )
            return DBusVariantValue.from_dbus_variant(variant).value
        except (DBusError, TimeoutError) as e:
            self._logger.warning(
                'Failed to get property %s.%s for unit %s: %s',
                interface,
                property_name,
                self._object_path,
                e,
            )
            raise

    async def get_processes(self) -> list[Any]:
        """Get the processes of the unit's cgroup.

        Returns:
            List of (cgroup path, pid, command line) entries

        Raises:
            DBusError: If the D-Bus call fails
            TimeoutError: If the call does not finish within the deadline
        """
        await self._ensure_proxy()

        try:
            service_interface = self._proxy_object.get_interface( # type: ignore
                SystemdDBusConstants.SERVICE_INTERFACE
            )
            return await asyncio.wait_for(
                service_interface.call_get_processes(), # type: ignore
                self._call_timeout,
            )
        except (DBusError, TimeoutError) as e:
            self._logger.warning(
                'Failed to get processes for unit %s: %s',
                self._object_path,
                e,
            )
            raise
