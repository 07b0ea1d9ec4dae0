from unitstat.dbus.adapters import DBusSystemdUnitParser
from unitstat.dbus.connection import DBusConnectionManager
from unitstat.dbus.interfaces import (
    ServicePropertySource,
    SystemdUnitParser,
    UnitListSource,
)
from unitstat.dbus.manager import SystemdManager
from unitstat.dbus.types import DBusVariantValue
from unitstat.dbus.unit import SystemdUnit

__all__ = [
    'DBusConnectionManager',
    'DBusSystemdUnitParser',
    'DBusVariantValue',
    'ServicePropertySource',
    'SystemdManager',
    'SystemdUnit',
    'SystemdUnitParser',
    'UnitListSource',
]
