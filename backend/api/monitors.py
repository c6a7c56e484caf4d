"""Battery monitor API routes."""
import logging

from fastapi import APIRouter, HTTPException, Query, Response, status

from battery_core import loops
from battery_core.adc import SimulatedAdc
from battery_core.monitor import BatteryMonitor
from battery_core.profiles import DEFAULT_PROFILE, get_profile
from battery_core.store import add as store_add, get_all, get_by_id as store_get_by_id, remove as store_remove
from schemas.battery import (
    BatteryStatus,
    CalibrateRequest,
    CalibrateResponse,
    CurveConfig,
    MonitorCreate,
    MonitorDetail,
    MonitorSummary,
)
from utils.config import MONITOR_INTERVAL_S

LOG = logging.getLogger(__name__)

router = APIRouter(tags=["monitors"])


def _get_monitor_or_404(monitor_id: str) -> BatteryMonitor:
    monitor = store_get_by_id(monitor_id)
    if monitor is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Monitor {monitor_id} not found")
    return monitor


def _last_status(monitor: BatteryMonitor) -> BatteryStatus | None:
    return BatteryStatus(**monitor.last_status) if monitor.last_status else None


def _monitor_to_summary(monitor: BatteryMonitor) -> MonitorSummary:
    return MonitorSummary(
        id=monitor.monitor_id,
        profile=monitor.profile,
        samples=monitor.samples,
        calibration_factor=monitor.calibration_factor,
        last_status=_last_status(monitor),
    )


def _monitor_to_detail(monitor: BatteryMonitor) -> MonitorDetail:
    return MonitorDetail(
        id=monitor.monitor_id,
        profile=monitor.profile,
        curve=CurveConfig.from_curve(monitor.curve),
        voltage_adjust_V=monitor.voltage_adjust_V,
        samples=monitor.samples,
        calibration_factor=monitor.calibration_factor,
        last_status=_last_status(monitor),
    )


@router.get("/monitors", response_model=list[MonitorSummary])
def list_monitors() -> list[MonitorSummary]:
    """List all monitors in the active store."""
    return [_monitor_to_summary(m) for m in get_all()]


@router.post("/monitors", response_model=MonitorDetail, status_code=status.HTTP_201_CREATED)
async def create_monitor(body: MonitorCreate) -> MonitorDetail:
    """Create a monitor on a simulated ADC from a profile name or explicit curve parameters."""
    if store_get_by_id(body.monitor_id) is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=f"Monitor {body.monitor_id} already exists")
    if body.curve is not None and body.profile is not None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="Give either profile or curve, not both"
        )
    profile = None
    if body.curve is not None:
        try:
            curve = body.curve.to_curve()
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    else:
        profile = body.profile or DEFAULT_PROFILE
        try:
            curve = get_profile(profile)
        except KeyError:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Profile {profile} not found")
    monitor = BatteryMonitor(
        monitor_id=body.monitor_id,
        source=SimulatedAdc(voltage_V=body.simulated_voltage_V, noise_counts=body.noise_counts),
        curve=curve,
        profile=profile,
        voltage_adjust_V=body.voltage_adjust_V,
        samples=body.samples,
        calibration_factor=body.calibration_factor,
    )
    store_add(monitor)
    if MONITOR_INTERVAL_S > 0:
        loops.start(monitor, MONITOR_INTERVAL_S)
    LOG.info("Created monitor %s (profile=%s)", monitor.monitor_id, profile or "custom")
    return _monitor_to_detail(monitor)


@router.get("/monitors/{monitor_id}", response_model=MonitorDetail)
def get_monitor(monitor_id: str) -> MonitorDetail:
    return _monitor_to_detail(_get_monitor_or_404(monitor_id))


@router.delete("/monitors/{monitor_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_monitor(monitor_id: str) -> Response:
    """Remove a monitor from the store and stop its polling loop."""
    if not store_remove(monitor_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Monitor {monitor_id} not found")
    loops.stop(monitor_id)
    LOG.info("Deleted monitor %s", monitor_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/monitors/{monitor_id}/status", response_model=BatteryStatus)
def get_monitor_status(
    monitor_id: str,
    samples: int | None = Query(default=None, ge=1, le=1000),
) -> BatteryStatus:
    """Take a fresh reading: percentage (0 dp) and voltage (2 dp)."""
    monitor = _get_monitor_or_404(monitor_id)
    return BatteryStatus(**monitor.get_status(samples))


@router.post("/monitors/{monitor_id}/calibrate", response_model=CalibrateResponse)
def calibrate_monitor(monitor_id: str, body: CalibrateRequest | None = None) -> CalibrateResponse:
    """
    Recompute the calibration factor while the reference voltage is applied to the input.
    A zero average reading cannot be calibrated against (422); the previous factor is kept.
    """
    monitor = _get_monitor_or_404(monitor_id)
    samples = body.samples if body is not None else None
    try:
        factor = monitor.calibrate(samples)
    except ZeroDivisionError:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Calibration reading is zero; is the reference voltage connected?",
        )
    return CalibrateResponse(id=monitor.monitor_id, calibration_factor=factor)
