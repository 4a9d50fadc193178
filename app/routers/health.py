# =============================================================================
# app/routers/health.py - Health Check Endpoints
# =============================================================================
# Provides health check endpoints for monitoring and load balancers.
# =============================================================================

from datetime import datetime, timezone

from fastapi import APIRouter
from pydantic import BaseModel

from app.dependencies import NotifierDep, StoreDep
from lib.storage import StoreError

router = APIRouter()


# =============================================================================
# Response Models
# =============================================================================

class HealthResponse(BaseModel):
    """Basic health check response."""
    status: str
    timestamp: str


class ChecksResponse(BaseModel):
    """Individual dependency checks."""
    store: str
    notifications: str


class ReadinessResponse(BaseModel):
    """Readiness check response."""
    status: str
    backend: str
    checks: ChecksResponse
    timestamp: str


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


# =============================================================================
# Endpoints
# =============================================================================

@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Health check endpoint.

    Returns basic health status for load balancers and monitoring.
    """
    return HealthResponse(
        status="ok",
        timestamp=_now_iso(),
    )


@router.get("/health/ready", response_model=ReadinessResponse)
def readiness_check(store: StoreDep, notifier: NotifierDep):
    """
    Readiness check endpoint.

    Probes the intention store and reports whether the Telegram relay is
    configured. An unconfigured relay does not make the API degraded, since
    intentions are still saved without it.
    """
    checks = ChecksResponse(store="unknown", notifications="unknown")

    try:
        store.check()
        checks.store = "healthy"
    except StoreError as e:
        checks.store = f"unhealthy: {e.message[:50]}"

    checks.notifications = "configured" if notifier.is_configured else "not configured"

    return ReadinessResponse(
        status="ready" if checks.store == "healthy" else "degraded",
        backend=store.backend_name,
        checks=checks,
        timestamp=_now_iso(),
    )
