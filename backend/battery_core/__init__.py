# Battery core: discharge curve, sampling, calibration, monitor, store
from battery_core.discharge_curve import DischargeCurve, LineSegment, SigmoidParams
from battery_core.monitor import BatteryMonitor
from battery_core.store import add, clear, get_all, get_by_id, remove, seed_default

__all__ = [
    "BatteryMonitor",
    "DischargeCurve",
    "LineSegment",
    "SigmoidParams",
    "add",
    "clear",
    "get_all",
    "get_by_id",
    "remove",
    "seed_default",
]
