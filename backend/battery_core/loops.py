"""Registry of running monitor polling loops, keyed by monitor_id."""
import asyncio
import logging
from typing import Optional

from battery_core.monitor import BatteryMonitor, SendStatusCb, start_monitor_loop
from battery_core.status import StatusPayload

LOG = logging.getLogger(__name__)

_loops: dict[str, tuple[asyncio.Task, asyncio.Event]] = {}


def make_status_logger(monitor_id: str) -> SendStatusCb:
    """Return a status callback that logs each payload for the given monitor."""
    async def log_status(payload: StatusPayload) -> None:
        LOG.info("Battery %s: %s%% %.2fV", monitor_id, payload["percentage"], payload["voltage"])
    return log_status


def start(monitor: BatteryMonitor, interval_s: float, send_cb: Optional[SendStatusCb] = None) -> asyncio.Task:
    """Start polling a monitor (must be called from a running event loop). Replaces any existing loop."""
    stop(monitor.monitor_id)
    task, stop_event = start_monitor_loop(
        monitor, send_cb or make_status_logger(monitor.monitor_id), interval_s=interval_s
    )
    _loops[monitor.monitor_id] = (task, stop_event)
    return task


def stop(monitor_id: str) -> Optional[asyncio.Task]:
    """Signal the loop to stop and forget it. Returns the task (to await) or None if none was running."""
    entry = _loops.pop(monitor_id, None)
    if entry is None:
        return None
    task, stop_event = entry
    stop_event.set()
    return task


def is_running(monitor_id: str) -> bool:
    return monitor_id in _loops


async def stop_all(timeout_s: float = 2.0) -> None:
    """Stop every loop; tasks that do not finish within timeout_s are cancelled."""
    for monitor_id in list(_loops):
        task = stop(monitor_id)
        try:
            await asyncio.wait_for(task, timeout=timeout_s)
        except asyncio.TimeoutError:
            task.cancel()
