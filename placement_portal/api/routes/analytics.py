"""
Analytics dashboard route.
"""
from fastapi import APIRouter, Depends

from placement_portal.api.deps import get_store
from placement_portal.core.store import PortalStore
from placement_portal.schemas.analytics import AnalyticsResponse
from placement_portal.services.analytics_service import AnalyticsService

router = APIRouter(prefix="/analytics", tags=["analytics"])

analytics_service = AnalyticsService()


@router.get("/", response_model=AnalyticsResponse)
async def get_analytics(store: PortalStore = Depends(get_store)):
    return await analytics_service.get_analytics(store)
