"""In-memory monitor store: single source of truth for API."""
from typing import Optional

from battery_core.adc import SimulatedAdc
from battery_core.monitor import BatteryMonitor
from battery_core.profiles import get_profile
from utils.config import (
    BATTERY_CALIBRATION_FACTOR,
    BATTERY_PROFILE,
    BATTERY_SAMPLES,
    BATTERY_SIM_NOISE,
    BATTERY_SIM_VOLTAGE,
    BATTERY_VOLTAGE_ADJUST,
)

DEFAULT_MONITOR_ID = "BAT_001"

_store: dict[str, BatteryMonitor] = {}


def get_all() -> list[BatteryMonitor]:
    """List all monitors."""
    return list(_store.values())


def get_by_id(monitor_id: str) -> Optional[BatteryMonitor]:
    """Get monitor by id or None."""
    return _store.get(monitor_id)


def add(monitor: BatteryMonitor) -> None:
    """Add or replace monitor by monitor_id."""
    _store[monitor.monitor_id] = monitor


def remove(monitor_id: str) -> bool:
    """Remove monitor by id. Returns True if removed."""
    if monitor_id in _store:
        del _store[monitor_id]
        return True
    return False


def clear() -> None:
    """Clear all monitors (tests)."""
    _store.clear()


def seed_default() -> None:
    """Seed one monitor on a simulated ADC so GET /monitors returns data."""
    if _store:
        return
    add(
        BatteryMonitor(
            monitor_id=DEFAULT_MONITOR_ID,
            source=SimulatedAdc(voltage_V=BATTERY_SIM_VOLTAGE, noise_counts=BATTERY_SIM_NOISE),
            curve=get_profile(BATTERY_PROFILE),
            profile=BATTERY_PROFILE,
            voltage_adjust_V=BATTERY_VOLTAGE_ADJUST,
            samples=BATTERY_SAMPLES,
            calibration_factor=BATTERY_CALIBRATION_FACTOR,
        )
    )
