"""Unit tests: status payload and BatteryStatus schema."""
import json

import pytest

from battery_core.status import build_status_payload
from battery_core.voltage import BatteryReading
from schemas.battery import BatteryStatus

pytestmark = pytest.mark.unit


def test_build_status_payload_rounds_fields():
    """Percentage to 0 dp (int), voltage to 2 dp."""
    payload = build_status_payload(BatteryReading(voltage_V=3.7249, percentage=47.4))
    assert payload == {"percentage": 47, "voltage": 3.72}
    assert isinstance(payload["percentage"], int)


def test_build_status_payload_extremes():
    assert build_status_payload(BatteryReading(voltage_V=2.5, percentage=0.0)) == {"percentage": 0, "voltage": 2.5}
    assert build_status_payload(BatteryReading(voltage_V=4.456, percentage=100.0)) == {
        "percentage": 100,
        "voltage": 4.46,
    }


def test_status_round_trips_through_json():
    """voltage=3.72, percentage=47 parse back to equal values."""
    status = BatteryStatus(percentage=47, voltage=3.72)
    raw = status.model_dump_json()
    assert json.loads(raw) == {"percentage": 47, "voltage": 3.72}
    parsed = BatteryStatus.model_validate_json(raw)
    assert parsed.percentage == 47
    assert parsed.voltage == pytest.approx(3.72)


@pytest.mark.parametrize("percentage,expected", [(47.5, 48), (46.5, 47), (0.5, 1), (99.49, 99)])
def test_build_status_payload_rounds_half_up(percentage, expected):
    """Halves round up, as the firmware's status JSON does (not banker's rounding)."""
    payload = build_status_payload(BatteryReading(voltage_V=3.7, percentage=percentage))
    assert payload["percentage"] == expected
