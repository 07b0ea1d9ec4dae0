import asyncio
import logging
import sys

import click
from pydantic import ValidationError

from unitstat.dbus import DBusConnectionManager, SystemdManager
from unitstat.models import CollectorConfig, SystemdUnitStats, UnitsConfig
from unitstat.units import UnitStatsCollector


LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


async def collect_unit_stats(config: CollectorConfig) -> SystemdUnitStats:
    """Run one collection pass against the system bus.
    """
    async with DBusConnectionManager(bus_address=config.dbus_address) as dbus:
        collector = UnitStatsCollector(SystemdManager(dbus), config)
        return await collector.collect()


def build_config(
    state_stats: bool,
    allow: tuple[str, ...],
    block: tuple[str, ...],
    services: tuple[str, ...],
    dbus_address: str | None,
) -> CollectorConfig:
    """Build the collector configuration from command line options.
    """
    return CollectorConfig(
        units=UnitsConfig(
            state_stats=state_stats,
            state_stats_allowlist=list(allow),
            state_stats_blocklist=list(block),
        ),
        services=frozenset(services),
        dbus_address=dbus_address,
    )


@click.command('collect')
@click.option(
    '--state-stats/--no-state-stats',
    default=False,
    help='Record active/load state and health of each unit.',
)
@click.option(
    '--allow',
    multiple=True,
    metavar='UNIT',
    help='Only record state of this unit. Can be repeated.',
)
@click.option(
    '--block',
    multiple=True,
    metavar='UNIT',
    help='Never record state of this unit. Can be repeated.',
)
@click.option(
    '--service',
    'services',
    multiple=True,
    metavar='UNIT',
    help='Collect detailed metrics for this service. Can be repeated.',
)
@click.option(
    '--dbus-address',
    default=None,
    help='Connect to this bus address instead of the system bus.',
)
@click.option(
    '--indent',
    type=click.IntRange(min=0),
    default=None,
    help='Indent the JSON output by this many spaces.',
)
@click.option(
    '--log-level',
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default='INFO',
    show_default=True,
    help='Log level of the unitstat loggers.',
)
def collect(
    state_stats: bool,
    allow: tuple[str, ...],
    block: tuple[str, ...],
    services: tuple[str, ...],
    dbus_address: str | None,
    indent: int | None,
    log_level: str,
) -> None:
    """Collect systemd unit statistics once and print them as JSON.
    """
    logging.getLogger('unitstat').setLevel(log_level.upper())

    try:
        config = build_config(
            state_stats,
            allow,
            block,
            services,
            dbus_address,
        )
    except ValidationError as e:
        raise click.BadParameter(str(e)) from e

    try:
        stats = asyncio.run(collect_unit_stats(config))
    except Exception as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    click.echo(stats.model_dump_json(indent=indent))
