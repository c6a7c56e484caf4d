"""Configuration from environment."""
import os

PORT = int(os.environ.get("PORT", "8001"))

TESTING = os.environ.get("TESTING") == "true"

# Curve preset and hardware correction for the default monitor.
BATTERY_PROFILE = os.environ.get("BATTERY_PROFILE", "lipo_1s")
BATTERY_VOLTAGE_ADJUST = float(os.environ.get("BATTERY_VOLTAGE_ADJUST", "0.0"))
BATTERY_SAMPLES = int(os.environ.get("BATTERY_SAMPLES", "10"))
# Volts per raw count from a previous calibration (not persisted; supply it here).
BATTERY_CALIBRATION_FACTOR = float(os.environ.get("BATTERY_CALIBRATION_FACTOR", str(5.0 / 1023)))

# Simulated ADC input.
BATTERY_SIM_VOLTAGE = float(os.environ.get("BATTERY_SIM_VOLTAGE", "3.9"))

# When TESTING=true, no background polling and a noise-free ADC so results are deterministic.
if TESTING:
    BATTERY_SIM_NOISE = 0.0
    MONITOR_INTERVAL_S = 0.0
else:
    BATTERY_SIM_NOISE = float(os.environ.get("BATTERY_SIM_NOISE", "2.0"))
    MONITOR_INTERVAL_S = float(os.environ.get("MONITOR_INTERVAL_S", "10.0"))
