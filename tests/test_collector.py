import pytest
from dbus_next.errors import DBusError

from tests.fakes import (
    CRON_PATH,
    FAILED_ERROR,
    SSH_PATH,
    FakeUnit,
    FakeUnitSource,
    make_service_properties,
)
from unitstat.models import (
    CollectorConfig,
    SystemdUnitLoadState,
    SystemdUnitStats,
    UnitsConfig,
)
from unitstat.units import UnitStatsCollector


def make_source(units_data) -> FakeUnitSource:
    return FakeUnitSource(
        units_data,
        {
            CRON_PATH: FakeUnit(make_service_properties()),
            SSH_PATH: FakeUnit(
                make_service_properties(),
                failing_property='NRestarts',
            ),
        },
    )


@pytest.mark.asyncio
async def test_collect_zero_units():
    source = FakeUnitSource([])

    stats = await UnitStatsCollector(source).collect()

    assert stats == SystemdUnitStats()
    assert stats.total_units == 0
    assert source.list_calls == 1


@pytest.mark.asyncio
async def test_collect_counts(system_units_data):
    source = make_source(system_units_data)

    stats = await UnitStatsCollector(source).collect()

    assert stats.total_units == 10
    assert stats.timer_units == 1
    assert stats.service_units == 3
    assert stats.mount_units == 1
    assert stats.device_units == 1
    assert stats.target_units == 1
    assert stats.socket_units == 1
    assert stats.scope_units == 1
    assert stats.loaded_units == 8
    assert stats.not_found_units == 1
    assert stats.masked_units == 1
    assert stats.active_units == 6
    assert stats.failed_units == 1
    assert stats.inactive_units == 3
    assert stats.jobs_queued == 1
    assert source.list_calls == 1


@pytest.mark.asyncio
async def test_state_stats_disabled_by_default(system_units_data):
    stats = await UnitStatsCollector(make_source(system_units_data)).collect()

    assert stats.unit_states == {}
    assert stats.service_stats == {}


@pytest.mark.asyncio
async def test_collect_unit_states(system_units_data):
    config = CollectorConfig(
        units=UnitsConfig(
            state_stats=True,
            state_stats_blocklist=['session-2.scope'],
        ),
    )

    stats = await UnitStatsCollector(
        make_source(system_units_data),
        config,
    ).collect()

    assert len(stats.unit_states) == 9
    assert 'session-2.scope' not in stats.unit_states
    assert stats.unit_states['cron.service'].unhealthy is False
    assert stats.unit_states['ssh.service'].unhealthy is True
    assert stats.unit_states['rescue.target'].unhealthy is False
    assert stats.unit_states['nfs.service'].load_state is \
        SystemdUnitLoadState.NOT_FOUND


@pytest.mark.asyncio
async def test_collect_unit_states_with_allowlist(system_units_data):
    config = CollectorConfig(
        units=UnitsConfig(
            state_stats=True,
            state_stats_allowlist=['cron.service', 'ssh.service'],
            state_stats_blocklist=['ssh.service'],
        ),
    )

    stats = await UnitStatsCollector(
        make_source(system_units_data),
        config,
    ).collect()

    assert list(stats.unit_states) == ['cron.service']


@pytest.mark.asyncio
async def test_collect_service_stats(system_units_data):
    source = make_source(system_units_data)
    config = CollectorConfig(services=frozenset({'cron.service'}))

    stats = await UnitStatsCollector(source, config).collect()

    assert list(stats.service_stats) == ['cron.service']
    assert stats.service_stats['cron.service'].nrestarts == 3
    assert source.requested_paths == [CRON_PATH]


@pytest.mark.asyncio
async def test_failed_service_is_skipped(system_units_data, caplog):
    source = make_source(system_units_data)
    config = CollectorConfig(
        units=UnitsConfig(state_stats=True),
        services=frozenset({'cron.service', 'ssh.service'}),
    )

    stats = await UnitStatsCollector(source, config).collect()

    assert list(stats.service_stats) == ['cron.service']
    assert 'ssh.service' in stats.unit_states
    assert stats.total_units == 10
    assert f'Unable to get service stats for ssh.service {SSH_PATH}' in \
        caplog.text


@pytest.mark.asyncio
async def test_configured_service_missing_from_system(system_units_data):
    source = make_source(system_units_data)
    config = CollectorConfig(services=frozenset({'nginx.service'}))

    stats = await UnitStatsCollector(source, config).collect()

    assert stats.service_stats == {}
    assert source.requested_paths == []


@pytest.mark.asyncio
async def test_list_units_failure_aborts_collection():
    source = FakeUnitSource(
        [],
        list_error=DBusError(FAILED_ERROR, 'Access denied'),
    )

    with pytest.raises(DBusError):
        await UnitStatsCollector(source).collect()


@pytest.mark.asyncio
async def test_malformed_entry_aborts_collection(timer_unit_data):
    source = FakeUnitSource([timer_unit_data, timer_unit_data[:9]])

    with pytest.raises(ValueError):
        await UnitStatsCollector(source).collect()


@pytest.mark.asyncio
async def test_collection_is_repeatable(system_units_data):
    config = CollectorConfig(
        units=UnitsConfig(state_stats=True),
        services=frozenset({'cron.service', 'ssh.service'}),
    )
    collector = UnitStatsCollector(make_source(system_units_data), config)

    first = await collector.collect()
    second = await collector.collect()

    assert first == second
    assert first is not second
    assert first.model_dump_json() == second.model_dump_json()
