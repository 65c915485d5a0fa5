"""
Notebooks API — Health Check Route
===================================

What:  GET /health for container probes and load balancers.
How:   Reports process liveness, version and uptime. Service
       implementations are external, so no dependency is probed.
"""

import time

from fastapi import APIRouter
from pydantic import BaseModel, Field

from notebooks_api import __version__

router = APIRouter(tags=["Health"])

_start_time = time.time()


class HealthResponse(BaseModel):
    status: str = Field(description="Always 'healthy' while the process serves requests")
    version: str
    uptime_seconds: float


@router.get("/health", response_model=HealthResponse, summary="Service health check")
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 1),
    )
