"""Health Probes — liveness for the process, readiness for the schedule store.

Invariants:
    - GET /api/health/ never touches the database
    - GET /api/health/ready is 503 until db_manager exists and answers SELECT 1
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from sports_schedule.infrastructure import database

router = APIRouter(prefix="/api/health", tags=["health"])

SERVICE_NAME = "sports-schedule-api"
SERVICE_VERSION = "1.0.0"


@router.get("/")
async def liveness():
    return {"status": "healthy", "service": SERVICE_NAME, "version": SERVICE_VERSION}


@router.get("/ready")
async def readiness():
    # read through the module: init_db() rebinds db_manager after import
    manager = database.db_manager
    if manager is None or not await manager.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
