"""Battery discharge curve: asymmetrical sigmoid with linear low/high ends."""
import logging
import math
from dataclasses import dataclass

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class SigmoidParams:
    """Asymmetrical sigmoid y = d + (a - d) / (1 + (x / c)^b)^m."""

    a: float
    b: float
    c: float
    d: float
    m: float

    def apply(self, x: float) -> float:
        return self.d + (self.a - self.d) / math.pow(1.0 + math.pow(x / self.c, self.b), self.m)


@dataclass(frozen=True)
class LineSegment:
    """
    Straight line through (x1, y1) and (x2, y2).
    Used where the sigmoid is inaccurate (typically 0-5% and 95-100%).
    """

    # x = voltage, y = battery percentage
    x1: float
    y1: float
    x2: float
    y2: float

    def __post_init__(self) -> None:
        if not self.x1 < self.x2:
            raise ValueError(f"x1 must be < x2 (got {self.x1}, {self.x2})")
        if not self.y1 < self.y2:
            raise ValueError(f"y1 must be < y2 (got {self.y1}, {self.y2})")

    def apply(self, x: float) -> float:
        # Ratio first so x == x2 lands exactly on y2.
        return self.y1 + (self.y2 - self.y1) * ((x - self.x1) / (self.x2 - self.x1))


@dataclass(frozen=True)
class DischargeCurve:
    """
    Voltage -> battery percentage [0, 100].

    Below low.x1 and above high.x2 the result saturates to 0 and 100.
    Boundary voltages belong to the linear segments.
    Monotonicity is not checked; callers supply well-formed parameters.
    """

    sigmoid: SigmoidParams
    low: LineSegment
    high: LineSegment

    def __post_init__(self) -> None:
        if self.low.x2 > self.high.x1:
            raise ValueError(
                f"low segment must end before high segment starts (low.x2={self.low.x2}, high.x1={self.high.x1})"
            )

    def apply(self, voltage: float) -> float:
        if voltage <= self.low.x2:
            if voltage < self.low.x1:
                LOG.debug("Voltage %.3f below curve minimum %.3f", voltage, self.low.x1)
                return 0.0
            return self.low.apply(voltage)

        if voltage >= self.high.x1:
            if voltage > self.high.x2:
                LOG.debug("Voltage %.3f above curve maximum %.3f", voltage, self.high.x2)
                return 100.0
            return self.high.apply(voltage)

        return self.sigmoid.apply(voltage)
