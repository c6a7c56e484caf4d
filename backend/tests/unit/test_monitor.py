"""Unit tests: monitor (BatteryMonitor, start_monitor_loop)."""
import asyncio

import pytest

from battery_core.adc import ConstantSource, SimulatedAdc
from battery_core.monitor import BatteryMonitor, start_monitor_loop
from battery_core.profiles import LIPO_1S

pytestmark = pytest.mark.unit


def _monitor(source, **kwargs) -> BatteryMonitor:
    return BatteryMonitor(monitor_id="BAT-T", source=source, curve=LIPO_1S, **kwargs)


def test_monitor_defaults():
    """Uncalibrated monitor reports raw counts as volts (factor 1.0) and has no status yet."""
    monitor = _monitor(ConstantSource(4.0))
    assert monitor.calibration_factor == 1.0
    assert monitor.samples == 10
    assert monitor.last_status is None
    assert monitor.get_voltage_V() == pytest.approx(4.0)


def test_monitor_rejects_zero_samples():
    with pytest.raises(ValueError):
        _monitor(ConstantSource(500), samples=0)


def test_monitor_calibrate_then_measure():
    """Calibrate at 5V on a simulated ADC, then read a 3.7V battery."""
    adc = SimulatedAdc(voltage_V=5.0)
    monitor = _monitor(adc)
    factor = monitor.calibrate()
    assert factor == pytest.approx(5.0 / 1023)
    assert monitor.calibration_factor == factor
    adc.set_voltage_V(3.7)
    assert monitor.get_voltage_V() == pytest.approx(3.7, abs=0.005)
    assert monitor.get_percentage() == pytest.approx(50.0, abs=0.5)


def test_monitor_calibrate_zero_keeps_previous_factor():
    monitor = _monitor(ConstantSource(0), calibration_factor=0.004)
    with pytest.raises(ZeroDivisionError):
        monitor.calibrate(samples=3)
    assert monitor.calibration_factor == 0.004


def test_monitor_voltage_adjust():
    monitor = _monitor(ConstantSource(800), calibration_factor=0.005, voltage_adjust_V=-0.2)
    assert monitor.get_voltage_V() == pytest.approx(3.8)


def test_monitor_get_status_sets_last_status():
    monitor = _monitor(ConstantSource(740), calibration_factor=0.005)
    status = monitor.get_status()
    assert status == {"percentage": 50, "voltage": 3.7}
    assert monitor.last_status == status


def test_monitor_read_matches_curve():
    monitor = _monitor(ConstantSource(760), calibration_factor=0.005)
    reading = monitor.read(samples=3)
    assert reading.voltage_V == pytest.approx(3.8)
    assert reading.percentage == LIPO_1S.apply(reading.voltage_V)


@pytest.mark.asyncio
async def test_start_monitor_loop_sends_then_stops():
    """start_monitor_loop runs until stop_event; callback receives status payload."""
    monitor = _monitor(ConstantSource(900), calibration_factor=0.005)
    received = []

    async def send_cb(payload):
        received.append(payload)

    task, stop_event = start_monitor_loop(monitor, send_cb, interval_s=0.05)
    await asyncio.sleep(0.12)
    stop_event.set()
    await asyncio.wait_for(task, timeout=1.0)
    assert len(received) >= 2
    assert received[0] == {"percentage": 100, "voltage": 4.5}
    assert monitor.last_status == received[-1]


@pytest.mark.asyncio
async def test_start_monitor_loop_tracks_discharge():
    """Payloads follow the simulated battery voltage as it drops."""
    adc = SimulatedAdc(voltage_V=4.15)
    monitor = _monitor(adc, calibration_factor=5.0 / 1023)
    received = []

    async def send_cb(payload):
        received.append(payload)
        adc.set_voltage_V(adc.voltage_V - 0.4)

    task, stop_event = start_monitor_loop(monitor, send_cb, interval_s=0.02)
    await asyncio.sleep(0.1)
    stop_event.set()
    await asyncio.wait_for(task, timeout=1.0)
    assert len(received) >= 2
    percentages = [p["percentage"] for p in received]
    assert percentages == sorted(percentages, reverse=True)
    assert percentages[0] > percentages[-1]


def test_monitor_explicit_zero_samples_not_replaced_by_default():
    """samples=0 is passed through (ZeroDivisionError) instead of silently using the default count."""
    monitor = _monitor(ConstantSource(740), calibration_factor=0.005)
    with pytest.raises(ZeroDivisionError):
        monitor.read(samples=0)
    with pytest.raises(ZeroDivisionError):
        monitor.get_voltage_V(samples=0)
    with pytest.raises(ZeroDivisionError):
        monitor.calibrate(samples=0)
    assert monitor.calibration_factor == 0.005
