from pydantic import Field, field_validator

from unitstat.utils import BaseModel


class UnitRecord(BaseModel):
    """A single unit entry of the systemd ListUnits call.

    Args:
        name: Primary unit name, e.g. 'cron.service'
        description: Human readable description
        load_state: Raw load state token, e.g. 'loaded' or 'not-found'
        active_state: Raw active state token, e.g. 'active'
        sub_state: Unit type specific sub state
        following: Unit this one follows in state, or an empty string
        object_path: D-Bus object path of the unit
        job_id: Numeric id of the queued job, 0 when there is none
        job_type: Type of the queued job
        job_object_path: D-Bus object path of the queued job
    """
    model_config = {'frozen': True}

    name: str = Field(..., min_length=1)
    description: str
    load_state: str
    active_state: str
    sub_state: str
    following: str
    object_path: str
    job_id: int = Field(..., ge=0)
    job_type: str
    job_object_path: str

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        if '.' not in v:
            raise ValueError(f'Unit name has no type suffix: {v}')
        return v

    @property
    def unit_type(self) -> str:
        """Type token of the unit, the second dot separated name segment.
        """
        return self.name.split('.')[1]

    @property
    def has_queued_job(self) -> bool:
        return self.job_id != 0
