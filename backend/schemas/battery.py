"""Pydantic schemas for battery monitor and profile API."""
from pydantic import BaseModel, Field

from battery_core.discharge_curve import DischargeCurve, LineSegment, SigmoidParams


class BatteryStatus(BaseModel):
    """Battery status record: percentage (0 dp) and voltage (2 dp)."""

    percentage: int
    voltage: float


class SigmoidParamsSchema(BaseModel):
    """Coefficients of y = d + (a - d) / (1 + (x / c)^b)^m."""

    a: float
    b: float
    c: float = Field(..., gt=0)
    d: float
    m: float


class LineSegmentSchema(BaseModel):
    """Linear segment anchors (x = voltage, y = percentage)."""

    x1: float
    y1: float
    x2: float
    y2: float


class CurveConfig(BaseModel):
    """Full discharge curve parameters."""

    sigmoid: SigmoidParamsSchema
    low: LineSegmentSchema
    high: LineSegmentSchema

    def to_curve(self) -> DischargeCurve:
        """Build the core curve. Raises ValueError if anchors are inconsistent."""
        return DischargeCurve(
            sigmoid=SigmoidParams(**self.sigmoid.model_dump()),
            low=LineSegment(**self.low.model_dump()),
            high=LineSegment(**self.high.model_dump()),
        )

    @classmethod
    def from_curve(cls, curve: DischargeCurve) -> "CurveConfig":
        """Schema view of a core curve (e.g. a built-in profile)."""
        sigmoid, low, high = curve.sigmoid, curve.low, curve.high
        return cls(
            sigmoid=SigmoidParamsSchema(a=sigmoid.a, b=sigmoid.b, c=sigmoid.c, d=sigmoid.d, m=sigmoid.m),
            low=LineSegmentSchema(x1=low.x1, y1=low.y1, x2=low.x2, y2=low.y2),
            high=LineSegmentSchema(x1=high.x1, y1=high.y1, x2=high.x2, y2=high.y2),
        )


class ProfileResponse(BaseModel):
    """Named curve preset."""

    name: str
    curve: CurveConfig


class ProfileEvaluation(BaseModel):
    """Percentage for a voltage on a profile's curve (unrounded)."""

    profile: str
    voltage: float
    percentage: float


class MonitorCreate(BaseModel):
    """Payload for creating a monitor on a simulated ADC. Give either profile or curve."""

    monitor_id: str = Field(..., min_length=1)
    profile: str | None = None
    curve: CurveConfig | None = None
    voltage_adjust_V: float = 0.0
    samples: int = Field(default=10, ge=1, le=1000)
    calibration_factor: float = Field(default=5.0 / 1023, gt=0)
    simulated_voltage_V: float = Field(default=3.9, ge=0)
    noise_counts: float = Field(default=0.0, ge=0)


class MonitorSummary(BaseModel):
    """Monitor list item."""

    id: str
    profile: str | None = None
    samples: int
    calibration_factor: float
    last_status: BatteryStatus | None = None


class MonitorDetail(BaseModel):
    """Monitor detail with curve and correction constants."""

    id: str
    profile: str | None = None
    curve: CurveConfig
    voltage_adjust_V: float
    samples: int
    calibration_factor: float
    last_status: BatteryStatus | None = None


class CalibrateRequest(BaseModel):
    """Payload for calibrating a monitor (reference voltage connected to the input)."""

    samples: int | None = Field(default=None, ge=1, le=1000)


class CalibrateResponse(BaseModel):
    """New calibration factor (volts per raw count)."""

    id: str
    calibration_factor: float
