"""
Health check router.

Provides a simple health endpoint for liveness/readiness probes.
Returns application status, version and database reachability.
"""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.engine import Engine

from promotion_tracking.infrastructure.database import check_connection
from promotion_tracking.interfaces.dependencies import get_engine
from promotion_tracking.interfaces.promotion.schemas import HealthResponse

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status, version and database state.",
)
def health_check(request: Request, engine: Engine = Depends(get_engine)) -> HealthResponse:
    """Return current application health status."""
    database_ok = check_connection(engine)
    return HealthResponse(
        status="ok" if database_ok else "degraded",
        version=request.app.state.settings.version,
        database="ok" if database_ok else "unavailable",
    )
