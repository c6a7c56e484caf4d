"""One-point linear calibration of raw ADC counts against a reference voltage."""
import logging

from battery_core.adc import AnalogSource
from battery_core.sampler import average_reading

LOG = logging.getLogger(__name__)

# Reference voltage applied to the input while calibrating.
CALIBRATION_REFERENCE_V = 5.0


def calibrate(
    source: AnalogSource,
    samples: int,
    reference_V: float = CALIBRATION_REFERENCE_V,
) -> float:
    """
    Compute the calibration factor (volts per raw count) for a source.

    Assumes raw reading vs. voltage is linear through the origin, anchored at
    the averaged reading taken while `reference_V` is applied.
    A zero average raises ZeroDivisionError; callers must ensure the reference is connected.
    """
    avg = average_reading(source, samples)
    if avg == 0:
        LOG.warning("Calibration reading is zero over %d samples", samples)
    factor = reference_V / avg
    LOG.info("Calibrated: reference=%.3fV avg_raw=%.2f factor=%.6f", reference_V, avg, factor)
    return factor
