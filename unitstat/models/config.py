from pydantic import Field, field_validator

from unitstat.utils import BaseModel


class UnitsConfig(BaseModel):
    """Per unit state collection settings.

    Args:
        state_stats: Record active/load state and health for each unit
        state_stats_allowlist: Only record these units; empty means all
        state_stats_blocklist: Never record these units, even if allowed
    """
    model_config = {'frozen': True}

    state_stats: bool = False
    state_stats_allowlist: list[str] = Field(default_factory=list)
    state_stats_blocklist: list[str] = Field(default_factory=list)


class CollectorConfig(BaseModel):
    """Settings of one unit statistics collection.

    Args:
        units: Per unit state collection settings
        services: Service unit names to collect detailed metrics for
        dbus_address: Bus address to connect to instead of the system bus
    """
    model_config = {'frozen': True}

    units: UnitsConfig = Field(default_factory=UnitsConfig)
    services: frozenset[str] = Field(default_factory=frozenset)
    dbus_address: str | None = None

    @field_validator('dbus_address')
    @classmethod
    def validate_dbus_address(cls, v: str | None) -> str | None:
        if v is not None and ':' not in v:
            raise ValueError(
                'D-Bus address must look like transport:key=value, '
                f'got {v!r}'
            )
        return v
