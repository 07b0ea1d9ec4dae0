from typing import Final, Self

from pydantic import Field, model_validator

from unitstat.models.health import is_unit_unhealthy
from unitstat.models.states import SystemdUnitActiveState, SystemdUnitLoadState
from unitstat.utils import BaseModel


U32_MAX: Final[int] = 2**32 - 1
I32_MIN: Final[int] = -(2**31)
I32_MAX: Final[int] = 2**31 - 1


class UnitStates(BaseModel):
    """Active and load state of a single unit.

    Args:
        active_state: Parsed active state
        load_state: Parsed load state
        unhealthy: Derived from the two states, see is_unit_unhealthy
    """
    model_config = {'frozen': True}

    active_state: SystemdUnitActiveState
    load_state: SystemdUnitLoadState
    unhealthy: bool

    @model_validator(mode='after')
    def validate_unhealthy(self) -> Self:
        expected = is_unit_unhealthy(self.active_state, self.load_state)
        if self.unhealthy != expected:
            raise ValueError(
                f'unhealthy must be {expected} for active state '
                f'{self.active_state} and load state {self.load_state}'
            )
        return self

    @classmethod
    def from_states(
        cls,
        active_state: SystemdUnitActiveState,
        load_state: SystemdUnitLoadState,
    ) -> Self:
        return cls(
            active_state=active_state,
            load_state=load_state,
            unhealthy=is_unit_unhealthy(active_state, load_state),
        )


class ServiceStats(BaseModel):
    """Selected metrics of a systemd service unit.

    Args:
        active_enter_timestamp: Last time the unit entered the active state (usec)
        active_exit_timestamp: Last time the unit left the active state (usec)
        cpuusage_nsec: CPU time consumed (nsec)
        inactive_exit_timestamp: Last time the unit left the inactive state (usec)
        ioread_bytes: Bytes read by the unit
        ioread_operations: Read operations issued by the unit
        memory_available: Memory still available to the unit (bytes)
        memory_current: Memory currently used by the unit (bytes)
        nrestarts: Number of automatic restarts
        processes: Number of processes in the unit's cgroup
        restart_usec: Delay before an automatic restart (usec)
        state_change_timestamp: Last state change of the unit (usec)
        status_errno: Errno of the last exit
        tasks_current: Number of tasks in the unit's cgroup
        timeout_clean_usec: Timeout of the clean operation (usec)
        watchdog_usec: Watchdog timeout (usec)
    """
    model_config = {'frozen': True}

    active_enter_timestamp: int = Field(..., ge=0)
    active_exit_timestamp: int = Field(..., ge=0)
    cpuusage_nsec: int = Field(..., ge=0)
    inactive_exit_timestamp: int = Field(..., ge=0)
    ioread_bytes: int = Field(..., ge=0)
    ioread_operations: int = Field(..., ge=0)
    memory_available: int = Field(..., ge=0)
    memory_current: int = Field(..., ge=0)
    nrestarts: int = Field(..., ge=0, le=U32_MAX)
    processes: int = Field(..., ge=0, le=U32_MAX)
    restart_usec: int = Field(..., ge=0)
    state_change_timestamp: int = Field(..., ge=0)
    status_errno: int = Field(..., ge=I32_MIN, le=I32_MAX)
    tasks_current: int = Field(..., ge=0)
    timeout_clean_usec: int = Field(..., ge=0)
    watchdog_usec: int = Field(..., ge=0)


class SystemdUnitStats(BaseModel):
    """Unit counts plus per service and per unit details of one collection.

    A fresh instance has every counter at zero and empty mappings. The
    collector increments it while folding the unit list and then hands it
    over; it is never reused for another collection.

    Args:
        active_units: Units in the active state
        automount_units: Units of type automount
        device_units: Units of type device
        failed_units: Units in the failed state
        inactive_units: Units in the inactive state
        jobs_queued: Units with a queued job
        loaded_units: Units in the loaded load state
        masked_units: Units in the masked load state
        mount_units: Units of type mount
        not_found_units: Units in the not-found load state
        path_units: Units of type path
        scope_units: Units of type scope
        service_units: Units of type service
        slice_units: Units of type slice
        socket_units: Units of type socket
        target_units: Units of type target
        timer_units: Units of type timer
        total_units: All units returned by systemd
        service_stats: Service metrics keyed by unit name
        unit_states: Unit states keyed by unit name
    """

    active_units: int = 0
    automount_units: int = 0
    device_units: int = 0
    failed_units: int = 0
    inactive_units: int = 0
    jobs_queued: int = 0
    loaded_units: int = 0
    masked_units: int = 0
    mount_units: int = 0
    not_found_units: int = 0
    path_units: int = 0
    scope_units: int = 0
    service_units: int = 0
    slice_units: int = 0
    socket_units: int = 0
    target_units: int = 0
    timer_units: int = 0
    total_units: int = 0
    service_stats: dict[str, ServiceStats] = Field(default_factory=dict)
    unit_states: dict[str, UnitStates] = Field(default_factory=dict)

    def increment(self, counter: str) -> None:
        """Add one to the named counter field.
        """
        setattr(self, counter, getattr(self, counter) + 1)


SERVICE_FIELD_NAMES: Final[tuple[str, ...]] = tuple(ServiceStats.model_fields)
UNIT_FIELD_NAMES: Final[tuple[str, ...]] = tuple(SystemdUnitStats.model_fields)
UNIT_STATES_FIELD_NAMES: Final[tuple[str, ...]] = tuple(
    UnitStates.model_fields
)
