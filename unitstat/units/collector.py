import logging

from unitstat.dbus.adapters import DBusSystemdUnitParser
from unitstat.dbus.interfaces import SystemdUnitParser, UnitListSource
from unitstat.models.config import CollectorConfig
from unitstat.models.stats import SystemdUnitStats
from unitstat.models.unit_record import UnitRecord
from unitstat.units.classifier import count_unit, record_unit_state
from unitstat.units.service_stats import ServiceStatsExtractor


class UnitStatsCollector:
    """Builds a SystemdUnitStats report from one pass over all units.

    Every call to collect() starts from an empty report and runs the
    units through the classifier one at a time.
    """

    def __init__(
        self,
        unit_source: UnitListSource,
        config: CollectorConfig | None = None,
        unit_parser: SystemdUnitParser | None = None,
        service_extractor: ServiceStatsExtractor | None = None,
    ) -> None:
        """Initialize the collector with optional dependency injection.

        Args:
            unit_source: Source of the unit list and unit properties
            config: Collection settings, defaults to counts only
            unit_parser: Parser for raw ListUnits entries
            service_extractor: Extractor for detailed service metrics
        """
        self._logger = logging.getLogger(__name__)

        self._unit_source = unit_source
        self._config = config or CollectorConfig()
        self._unit_parser = unit_parser or DBusSystemdUnitParser()
        self._service_extractor = service_extractor or \
            ServiceStatsExtractor(unit_source)

    async def collect(self) -> SystemdUnitStats:
        """Pull all units and count how the system is set up and behaving.

        Returns:
            The finished SystemdUnitStats report

        Raises:
            DBusError: If the unit list cannot be fetched
            TimeoutError: If the unit list call times out
            ConnectionError: If there is no D-Bus connection
            ValueError: If a unit list entry is malformed
        """
        units_config = self._config.units
        if units_config.state_stats_allowlist:
            self._logger.debug(
                'Using unit state allowlist: %s',
                units_config.state_stats_allowlist,
            )
        if units_config.state_stats_blocklist:
            self._logger.debug(
                'Using unit state blocklist: %s',
                units_config.state_stats_blocklist,
            )

        units = await self._fetch_units()

        stats = SystemdUnitStats(total_units=len(units))
        for unit in units:
            count_unit(stats, unit)

            if units_config.state_stats:
                record_unit_state(
                    stats,
                    unit,
                    units_config.state_stats_allowlist,
                    units_config.state_stats_blocklist,
                )

            if unit.name in self._config.services:
                await self._collect_service_stats(stats, unit)

        self._logger.debug('unit stats: %s', stats)
        return stats

    async def _fetch_units(self) -> list[UnitRecord]:
        """Fetch the unit list once and parse every entry.
        """
        units_data = await self._unit_source.list_units()
        return [
            self._unit_parser.parse_unit_list_entry(unit_data)
            for unit_data in units_data
        ]

    async def _collect_service_stats(
        self,
        stats: SystemdUnitStats,
        unit: UnitRecord,
    ) -> None:
        self._logger.debug('Collecting service stats for %s', unit.name)
        result = await self._service_extractor.extract(
            unit.name,
            unit.object_path,
        )

        if result.success and result.stats is not None:
            stats.service_stats[unit.name] = result.stats
        else:
            self._logger.error('%s', result.error_message)
