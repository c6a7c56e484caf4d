# Schemas package
from .battery import BatteryStatus, CurveConfig, MonitorDetail, MonitorSummary, ProfileResponse
from .health import HealthResponse

__all__ = [
    "BatteryStatus",
    "CurveConfig",
    "HealthResponse",
    "MonitorDetail",
    "MonitorSummary",
    "ProfileResponse",
]
