"""Battery voltage and percentage from averaged raw samples."""
from dataclasses import dataclass

from battery_core.adc import AnalogSource
from battery_core.discharge_curve import DischargeCurve
from battery_core.sampler import average_reading


@dataclass(frozen=True)
class BatteryReading:
    voltage_V: float
    percentage: float


def estimate_voltage(
    source: AnalogSource,
    calibration_factor: float,
    samples: int,
    voltage_adjust_V: float = 0.0,
) -> float:
    """
    Real battery voltage: averaged raw reading * calibration factor + fixed adjustment.

    voltage_adjust_V corrects systematic hardware offset (diode drop, divider error)
    not captured by the one-point calibration.
    """
    return average_reading(source, samples) * calibration_factor + voltage_adjust_V


def get_percentage(
    source: AnalogSource,
    curve: DischargeCurve,
    calibration_factor: float,
    samples: int,
    voltage_adjust_V: float = 0.0,
) -> float:
    """Battery percentage [0, 100] from a fresh voltage estimate."""
    return curve.apply(estimate_voltage(source, calibration_factor, samples, voltage_adjust_V))


def read_battery(
    source: AnalogSource,
    curve: DischargeCurve,
    calibration_factor: float,
    samples: int,
    voltage_adjust_V: float = 0.0,
) -> BatteryReading:
    """Voltage and percentage from a single sampling pass (both fields agree)."""
    voltage_V = estimate_voltage(source, calibration_factor, samples, voltage_adjust_V)
    return BatteryReading(voltage_V=voltage_V, percentage=curve.apply(voltage_V))
