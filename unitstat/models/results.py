from unitstat.models.stats import ServiceStats
from unitstat.utils import BaseModel


class ServiceStatsResult(BaseModel):
    """Result of collecting metrics for one service unit.

    Args:
        success: Whether every property could be read
        unit_name: Name of the service unit
        object_path: D-Bus object path of the service unit
        stats: Collected metrics, None when the collection failed
        error_message: Error message if the collection failed
    """
    model_config = {'frozen': True}

    success: bool
    unit_name: str
    object_path: str
    stats: ServiceStats | None = None
    error_message: str | None = None
