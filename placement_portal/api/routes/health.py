"""
Health check routes.
"""
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from placement_portal.api.deps import get_store
from placement_portal.core.storage import RedisStorage
from placement_portal.core.store import COLLECTIONS, PortalStore
from placement_portal.schemas.base import BaseSchema

router = APIRouter(tags=["health"])


class HealthResponse(BaseSchema):
    """Health check response."""

    status: str
    timestamp: str
    checks: dict


@router.get("/health", response_model=HealthResponse)
async def health_check(store: PortalStore = Depends(get_store)):
    """
    Health check endpoint for monitoring.

    Reports each collection's record count, and Redis reachability
    when Redis is the storage medium.
    """
    checks = {}

    for name in COLLECTIONS:
        try:
            rows = await store.collection(name).read()
            checks[name] = f"healthy ({len(rows)} records)"
        except Exception as e:
            checks[name] = f"unhealthy: {str(e)}"

    if isinstance(store.storage, RedisStorage):
        try:
            await store.storage.ping()
            checks["redis"] = "healthy"
        except Exception as e:
            checks["redis"] = f"unhealthy: {str(e)}"

    all_healthy = all(v.startswith("healthy") for v in checks.values())

    return HealthResponse(
        status="healthy" if all_healthy else "degraded",
        timestamp=datetime.now(timezone.utc).isoformat(),
        checks=checks,
    )
