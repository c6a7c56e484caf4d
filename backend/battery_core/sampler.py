"""Sample averaging over an analog source."""
from battery_core.adc import AnalogSource


def average_reading(source: AnalogSource, samples: int) -> float:
    """
    Read the source `samples` times and return the arithmetic mean.

    Args:
        source: Analog source (raw ADC counts).
        samples: Number of readings, must be >= 1 (0 raises ZeroDivisionError).

    Returns:
        Mean raw reading.
    """
    total = 0.0
    for _ in range(samples):
        total += float(source.sample())
    return total / samples
