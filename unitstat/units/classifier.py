"""Folding of single ListUnits records into the unit statistics.
"""
import logging
from collections.abc import Sequence
from typing import Final

from unitstat.models.states import SystemdUnitActiveState, SystemdUnitLoadState
from unitstat.models.stats import SystemdUnitStats, UnitStates
from unitstat.models.unit_record import UnitRecord


logger = logging.getLogger(__name__)

UNIT_TYPE_COUNTERS: Final[dict[str, str]] = {
    'automount': 'automount_units',
    'device': 'device_units',
    'mount': 'mount_units',
    'path': 'path_units',
    'scope': 'scope_units',
    'service': 'service_units',
    'slice': 'slice_units',
    'socket': 'socket_units',
    'target': 'target_units',
    'timer': 'timer_units',
}

# Keys are raw D-Bus tokens, hence 'not-found'
LOAD_STATE_COUNTERS: Final[dict[str, str]] = {
    'loaded': 'loaded_units',
    'masked': 'masked_units',
    'not-found': 'not_found_units',
}

ACTIVE_STATE_COUNTERS: Final[dict[str, str]] = {
    'active': 'active_units',
    'failed': 'failed_units',
    'inactive': 'inactive_units',
}


def count_unit(stats: SystemdUnitStats, unit: UnitRecord) -> None:
    """Add a unit to the type, load state, active state and job counts.

    Each of the four counts is independent of the others. Tokens without
    a counter are logged and skipped.
    """
    type_counter = UNIT_TYPE_COUNTERS.get(unit.unit_type)
    if type_counter:
        stats.increment(type_counter)
    else:
        logger.debug("Found unhandled '%s' unit type", unit.unit_type)

    load_counter = LOAD_STATE_COUNTERS.get(unit.load_state)
    if load_counter:
        stats.increment(load_counter)
    else:
        logger.debug('%s is not loaded. It is %s', unit.name, unit.load_state)

    active_counter = ACTIVE_STATE_COUNTERS.get(unit.active_state)
    if active_counter:
        stats.increment(active_counter)
    else:
        logger.debug("Found unhandled '%s' unit state", unit.active_state)

    if unit.has_queued_job:
        stats.increment('jobs_queued')


def record_unit_state(
    stats: SystemdUnitStats,
    unit: UnitRecord,
    allowlist: Sequence[str],
    blocklist: Sequence[str],
) -> None:
    """Store the parsed active/load state and health of a unit.

    The blocklist always wins over the allowlist. An empty allowlist
    allows every unit that is not blocked.
    """
    if unit.name in blocklist:
        logger.debug('Skipping state stats for %s due to blocklist', unit.name)
        return
    if allowlist and unit.name not in allowlist:
        logger.debug(
            'Skipping state stats for %s due to not being in allowlist',
            unit.name,
        )
        return

    stats.unit_states[unit.name] = UnitStates.from_states(
        SystemdUnitActiveState.from_token(unit.active_state),
        SystemdUnitLoadState.from_wire(unit.load_state),
    )
