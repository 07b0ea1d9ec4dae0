from enum import StrEnum
from typing import Final


class DBusConstants(StrEnum):
    """Standard D-Bus service and interface constants.
    """

    PROPERTIES_INTERFACE = 'org.freedesktop.DBus.Properties'


class SystemdDBusConstants(StrEnum):
    """Systemd D-Bus service and interface constants.
    """

    # Service identification
    SERVICE_NAME = 'org.freedesktop.systemd1'
    OBJECT_PATH = '/org/freedesktop/systemd1'

    # Core systemd interfaces
    MANAGER_INTERFACE = 'org.freedesktop.systemd1.Manager'
    UNIT_INTERFACE = 'org.freedesktop.systemd1.Unit'
    SERVICE_INTERFACE = 'org.freedesktop.systemd1.Service'


class UnitPropertyNames(StrEnum):
    """Properties of the org.freedesktop.systemd1.Unit interface.
    """

    ACTIVE_ENTER_TIMESTAMP = 'ActiveEnterTimestamp'
    ACTIVE_EXIT_TIMESTAMP = 'ActiveExitTimestamp'
    INACTIVE_EXIT_TIMESTAMP = 'InactiveExitTimestamp'
    STATE_CHANGE_TIMESTAMP = 'StateChangeTimestamp'


class ServicePropertyNames(StrEnum):
    """Properties of the org.freedesktop.systemd1.Service interface.
    """

    # Resource accounting
    CPU_USAGE_NSEC = 'CPUUsageNSec'
    IO_READ_BYTES = 'IOReadBytes'
    IO_READ_OPERATIONS = 'IOReadOperations'
    MEMORY_CURRENT = 'MemoryCurrent'
    MEMORY_AVAILABLE = 'MemoryAvailable'
    TASKS_CURRENT = 'TasksCurrent'

    # Restart and timeout settings
    NRESTARTS = 'NRestarts'
    RESTART_USEC = 'RestartUSec'
    TIMEOUT_CLEAN_USEC = 'TimeoutCleanUSec'
    WATCHDOG_USEC = 'WatchdogUSec'

    # Exit status
    STATUS_ERRNO = 'StatusErrno'


class ConnectionConfig:
    """Configuration constants for D-Bus connection.
    """

    DEFAULT_MAX_RETRIES: Final[int] = 5
    DEFAULT_INITIAL_BACKOFF: Final[float] = 1.0
    BACKOFF_MULTIPLIER: Final[float] = 2.0

    # Per call deadlines in seconds
    MANAGER_CALL_TIMEOUT: Final[float] = 5.0
    UNIT_CALL_TIMEOUT: Final[float] = 2.0
