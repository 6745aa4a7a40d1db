"""
Hello API — Health Check Route
===============================

What:  Liveness endpoint for Docker and load balancer health checks.
How:   The service has no dependencies to check, so being able to answer is
       the whole check; the response reports version, environment and uptime.
"""

import logging
import time

from fastapi import APIRouter

from hello_api import __version__
from hello_api.config import settings
from hello_api.schemas.hello import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Module-level: initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description="Returns the health status, version and uptime of the service.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        environment=settings.environment,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
