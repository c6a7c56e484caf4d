"""Named discharge curve presets."""
from battery_core.discharge_curve import DischargeCurve, LineSegment, SigmoidParams

DEFAULT_PROFILE = "lipo_1s"

# Single-cell LiPo, 3.0-4.2V.
LIPO_1S = DischargeCurve(
    sigmoid=SigmoidParams(a=100.0, b=-25.0, c=3.7, d=0.0, m=1.0),
    low=LineSegment(x1=3.0, y1=0.0, x2=3.3, y2=5.0),
    high=LineSegment(x1=4.1, y1=95.0, x2=4.2, y2=100.0),
)

# 18650 Li-ion cell, 2.8-4.2V.
LIION_18650 = DischargeCurve(
    sigmoid=SigmoidParams(a=100.0, b=-22.0, c=3.65, d=0.0, m=1.0),
    low=LineSegment(x1=2.8, y1=0.0, x2=3.2, y2=5.0),
    high=LineSegment(x1=4.05, y1=95.0, x2=4.2, y2=100.0),
)

_PROFILES: dict[str, DischargeCurve] = {
    "lipo_1s": LIPO_1S,
    "liion_18650": LIION_18650,
}


def get_profile(name: str) -> DischargeCurve:
    """Return the curve for a profile name. Raises KeyError if unknown."""
    return _PROFILES[name]


def list_profiles() -> dict[str, DischargeCurve]:
    """All profiles by name (copy)."""
    return dict(_PROFILES)
