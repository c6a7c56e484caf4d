"""Battery Monitor: FastAPI backend."""
import logging

from fastapi import FastAPI

# Show calibration results, monitor loop lifecycle and status updates (INFO level)
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logging.getLogger("battery_core").setLevel(logging.INFO)

from api.monitors import router as monitors_router
from api.profiles import router as profiles_router
from api.routes import router
from battery_core import loops
from battery_core.store import get_all, seed_default
from schemas.health import HealthResponse
from utils.config import MONITOR_INTERVAL_S

app = FastAPI(
    title="Battery Monitor",
    description="Battery state-of-charge estimation from averaged ADC readings",
    version="0.1.0",
)

app.include_router(router, prefix="/api")
app.include_router(profiles_router, prefix="/api")
app.include_router(monitors_router, prefix="/api")


@app.get("/api/health", response_model=HealthResponse)
def api_health() -> HealthResponse:
    """Explicit health route so /api/health is always available."""
    return HealthResponse()


@app.on_event("startup")
async def startup() -> None:
    """Seed default monitor and start polling loops when enabled."""
    seed_default()
    if MONITOR_INTERVAL_S <= 0:
        return
    for monitor in get_all():
        loops.start(monitor, MONITOR_INTERVAL_S)


@app.on_event("shutdown")
async def shutdown() -> None:
    """Stop all polling loops."""
    await loops.stop_all()


@app.get("/")
def root() -> dict:
    """Root redirect/info."""
    return {"service": "battery-monitor", "docs": "/docs", "health": "/api/health"}


if __name__ == "__main__":
    import uvicorn

    from utils.config import PORT

    uvicorn.run(app, host="0.0.0.0", port=PORT)
