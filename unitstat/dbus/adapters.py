from typing import Final

from unitstat.dbus.interfaces import SystemdUnitParser
from unitstat.models.unit_record import UnitRecord


LIST_UNITS_FIELD_COUNT: Final[int] = 10


class DBusSystemdUnitParser(SystemdUnitParser):
    """Parser for systemd unit data from D-Bus responses.
    """

    def parse_unit_list_entry(self, unit_data: list) -> UnitRecord:
        """Parse a single unit entry from D-Bus list_units response.

        Raises:
            ValueError: If the entry does not have exactly ten fields
            pydantic.ValidationError: If a field has an invalid value
        """
        if len(unit_data) != LIST_UNITS_FIELD_COUNT:
            raise ValueError(
                f'Expected {LIST_UNITS_FIELD_COUNT} fields in unit data, '
                f'got {len(unit_data)}'
            )

        return UnitRecord(
            name=unit_data[0],
            description=unit_data[1],
            load_state=unit_data[2],
            active_state=unit_data[3],
            sub_state=unit_data[4],
            following=unit_data[5],
            object_path=unit_data[6],
            job_id=unit_data[7],
            job_type=unit_data[8],
            job_object_path=unit_data[9],
        )
