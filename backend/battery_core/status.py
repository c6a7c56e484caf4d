"""Status payload for external consumers: {"percentage": int, "voltage": float}."""
import math

from battery_core.voltage import BatteryReading

StatusPayload = dict

VOLTAGE_DECIMALS = 2


def build_status_payload(reading: BatteryReading) -> StatusPayload:
    """
    Round a reading for presentation: percentage to 0 dp (int), voltage to 2 dp.
    Percentage halves round up (47.5 -> 48), matching the firmware status JSON; it is never negative.
    """
    return {
        "percentage": int(math.floor(reading.percentage + 0.5)),
        "voltage": round(reading.voltage_V, VOLTAGE_DECIMALS),
    }
