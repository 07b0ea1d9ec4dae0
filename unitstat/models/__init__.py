from unitstat.models.config import CollectorConfig, UnitsConfig
from unitstat.models.health import is_unit_unhealthy
from unitstat.models.results import ServiceStatsResult
from unitstat.models.states import (
    SystemdUnitActiveState,
    SystemdUnitLoadState,
)
from unitstat.models.stats import (
    SERVICE_FIELD_NAMES,
    UNIT_FIELD_NAMES,
    UNIT_STATES_FIELD_NAMES,
    ServiceStats,
    SystemdUnitStats,
    UnitStates,
)
from unitstat.models.unit_record import UnitRecord

__all__ = [
    'SERVICE_FIELD_NAMES',
    'UNIT_FIELD_NAMES',
    'UNIT_STATES_FIELD_NAMES',
    'CollectorConfig',
    'ServiceStats',
    'ServiceStatsResult',
    'SystemdUnitActiveState',
    'SystemdUnitLoadState',
    'SystemdUnitStats',
    'UnitRecord',
    'UnitStates',
    'UnitsConfig',
    'is_unit_unhealthy',
]
