"""
Console Demo API - Health Check Route
======================================

What:  Liveness endpoint for Docker health checks and load balancers.
How:   The service has no external dependencies, so "healthy" means the
       process is up and serving; the registry size is reported for
       monitoring.
"""

import time

from fastapi import APIRouter

from console_demo import __version__
from console_demo.schemas.common import HealthResponse
from console_demo.services.employee_registry import employee_registry

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        employee_count=len(employee_registry),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
