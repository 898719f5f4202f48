"""
Liveness and readiness endpoints.

``GET /`` answers as long as the process is up.  ``GET /health``
additionally pings MongoDB and returns 503 when it cannot be reached,
so a load balancer can hold traffic back during an outage.
"""

from fastapi import APIRouter, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse, PlainTextResponse

from assignment_api.app.core.db import ping


router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "Server is running"


@router.get("/health")
async def readiness_check():
    if not await run_in_threadpool(ping):
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "database_unavailable"},
        )
    return {"status": "ready", "checks": {"database": "healthy"}}
