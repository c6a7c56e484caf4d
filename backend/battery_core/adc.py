"""Analog sample sources: anything with sample() -> float."""
import random
from itertools import cycle
from typing import Iterable, Optional, Protocol

# 10-bit converter
ADC_MAX_RAW = 1023


class AnalogSource(Protocol):
    def sample(self) -> float:
        ...


class ConstantSource:
    """Always returns the same raw value."""

    __slots__ = ("value",)

    def __init__(self, value: float) -> None:
        self.value = value

    def sample(self) -> float:
        return self.value


class ScriptedSource:
    """Replays a fixed sequence of raw values, wrapping around at the end."""

    __slots__ = ("_values", "reads")

    def __init__(self, values: Iterable[float]) -> None:
        values = list(values)
        if not values:
            raise ValueError("ScriptedSource needs at least one value")
        self._values = cycle(values)
        self.reads = 0

    def sample(self) -> float:
        self.reads += 1
        return next(self._values)


class SimulatedAdc:
    """
    Simulated 10-bit ADC wired to a battery through a divider.

    raw = battery voltage / volts_per_count, plus optional gaussian noise (in counts),
    rounded and clamped to [0, ADC_MAX_RAW].
    """

    __slots__ = ("voltage_V", "volts_per_count", "noise_counts", "_rng")

    def __init__(
        self,
        voltage_V: float,
        volts_per_count: float = 5.0 / ADC_MAX_RAW,
        noise_counts: float = 0.0,
        seed: Optional[int] = None,
    ) -> None:
        self.voltage_V = voltage_V
        self.volts_per_count = volts_per_count
        self.noise_counts = noise_counts
        self._rng = random.Random(seed)

    def set_voltage_V(self, voltage_V: float) -> None:
        """Change the simulated battery voltage (e.g. to emulate discharge)."""
        self.voltage_V = voltage_V

    def sample(self) -> float:
        raw = self.voltage_V / self.volts_per_count
        if self.noise_counts > 0:
            raw += self._rng.gauss(0.0, self.noise_counts)
        return float(max(0, min(ADC_MAX_RAW, int(round(raw)))))
