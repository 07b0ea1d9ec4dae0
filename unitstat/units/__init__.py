from unitstat.models.health import is_unit_unhealthy
from unitstat.units.classifier import count_unit, record_unit_state
from unitstat.units.collector import UnitStatsCollector
from unitstat.units.service_stats import ServiceStatsExtractor

__all__ = [
    'ServiceStatsExtractor',
    'UnitStatsCollector',
    'count_unit',
    'is_unit_unhealthy',
    'record_unit_state',
]
