"""Battery monitor: one source + curve + calibration, with an optional asyncio polling loop."""
import asyncio
import logging
from typing import Awaitable, Callable, Optional

from battery_core.adc import AnalogSource
from battery_core.calibration import calibrate
from battery_core.discharge_curve import DischargeCurve
from battery_core.status import StatusPayload, build_status_payload
from battery_core.voltage import BatteryReading, estimate_voltage, read_battery

LOG = logging.getLogger(__name__)

DEFAULT_SAMPLES = 10


class BatteryMonitor:
    """
    Single monitored battery.
    Curve and voltage adjustment are fixed at construction; the calibration factor
    starts at 1.0 (raw counts reported as volts) until calibrate() is called.
    """

    __slots__ = (
        "monitor_id",
        "source",
        "curve",
        "profile",
        "voltage_adjust_V",
        "samples",
        "calibration_factor",
        "last_status",
    )

    def __init__(
        self,
        monitor_id: str,
        source: AnalogSource,
        curve: DischargeCurve,
        voltage_adjust_V: float = 0.0,
        samples: int = DEFAULT_SAMPLES,
        calibration_factor: float = 1.0,
        profile: Optional[str] = None,
    ) -> None:
        if samples < 1:
            raise ValueError("samples must be >= 1")
        self.monitor_id = monitor_id
        self.source = source
        self.curve = curve
        self.profile = profile  # Name of the preset the curve came from, if any
        self.voltage_adjust_V = voltage_adjust_V
        self.samples = samples
        self.calibration_factor = calibration_factor
        self.last_status: Optional[StatusPayload] = None

    def _samples(self, samples: Optional[int]) -> int:
        return self.samples if samples is None else samples

    def calibrate(self, samples: Optional[int] = None) -> float:
        """Recompute and store the calibration factor. Returns the new factor."""
        self.calibration_factor = calibrate(self.source, self._samples(samples))
        return self.calibration_factor

    def get_voltage_V(self, samples: Optional[int] = None) -> float:
        return estimate_voltage(
            self.source, self.calibration_factor, self._samples(samples), self.voltage_adjust_V
        )

    def get_percentage(self, samples: Optional[int] = None) -> float:
        return self.curve.apply(self.get_voltage_V(samples))

    def read(self, samples: Optional[int] = None) -> BatteryReading:
        return read_battery(
            self.source,
            self.curve,
            self.calibration_factor,
            self._samples(samples),
            self.voltage_adjust_V,
        )

    def get_status(self, samples: Optional[int] = None) -> StatusPayload:
        """Read once and return the rounded status payload; also kept as last_status."""
        self.last_status = build_status_payload(self.read(samples))
        return self.last_status


SendStatusCb = Callable[[StatusPayload], Awaitable[None]]


async def _monitor_loop(
    monitor: BatteryMonitor,
    send_cb: SendStatusCb,
    interval_s: float,
    stop_event: asyncio.Event,
) -> None:
    """Read status every interval_s and hand it to send_cb until stop_event is set."""
    LOG.info("Monitor loop started for %s (interval %.1fs)", monitor.monitor_id, interval_s)
    while not stop_event.is_set():
        payload = monitor.get_status()
        await send_cb(payload)
        try:
            await asyncio.wait_for(stop_event.wait(), timeout=interval_s)
        except asyncio.TimeoutError:
            continue
    LOG.info("Monitor loop stopped for %s", monitor.monitor_id)


def start_monitor_loop(
    monitor: BatteryMonitor,
    send_cb: SendStatusCb,
    interval_s: float = 10.0,
) -> tuple[asyncio.Task, asyncio.Event]:
    """
    Start one asyncio task polling the monitor. Callback receives the status payload.
    Returns (task, stop_event). Cancel by setting stop_event or cancelling the task.
    """
    stop_event = asyncio.Event()
    task = asyncio.create_task(_monitor_loop(monitor, send_cb, interval_s, stop_event))
    return task, stop_event
