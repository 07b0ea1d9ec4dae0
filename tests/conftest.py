from typing import Any

import pytest

from tests.fakes import CRON_PATH, SSH_PATH, TIMER_PATH, make_unit_data
from unitstat.dbus.adapters import DBusSystemdUnitParser
from unitstat.models import UnitRecord


@pytest.fixture
def timer_unit_data() -> list[Any]:
    return [
        'apport-autoreport.timer',
        'Process error reports when automatic reporting is enabled '
        '(timer based)',
        'loaded',
        'inactive',
        'dead',
        '',
        TIMER_PATH,
        0,
        '',
        '/',
    ]


@pytest.fixture
def timer_unit(timer_unit_data) -> UnitRecord:
    return DBusSystemdUnitParser().parse_unit_list_entry(timer_unit_data)


@pytest.fixture
def system_units_data(timer_unit_data) -> list[list[Any]]:
    return [
        timer_unit_data,
        make_unit_data('cron.service', object_path=CRON_PATH),
        make_unit_data(
            'ssh.service',
            active_state='failed',
            object_path=SSH_PATH,
        ),
        make_unit_data('-.mount'),
        make_unit_data('dev-sda1.device'),
        make_unit_data('nfs.service', load_state='not-found',
                       active_state='inactive'),
        make_unit_data('rescue.target', load_state='masked',
                       active_state='inactive'),
        make_unit_data('dbus.socket', job_id=42),
        make_unit_data('session-2.scope'),
        make_unit_data('foo.swap'),
    ]
