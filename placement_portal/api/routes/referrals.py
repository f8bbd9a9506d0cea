"""
Alumni referral routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from placement_portal.api.deps import get_store
from placement_portal.core.exceptions import ReferralNotFoundException
from placement_portal.core.store import PortalStore
from placement_portal.models.referral import Referral, ReferralStatus
from placement_portal.schemas.referral import ReferralCreate, ReferralUpdate
from placement_portal.services.referral_service import ReferralService

router = APIRouter(prefix="/referrals", tags=["referrals"])

referral_service = ReferralService()


@router.get("/", response_model=List[Referral])
async def list_referrals(
    referred_by: Optional[int] = Query(None, alias="referredBy"),
    status: Optional[ReferralStatus] = Query(None),
    store: PortalStore = Depends(get_store),
):
    return await referral_service.list_referrals(store, referred_by=referred_by, status=status)


@router.post("/", response_model=Referral, status_code=201)
async def create_referral(
    data: ReferralCreate,
    store: PortalStore = Depends(get_store),
):
    return await referral_service.create_referral(store, data)


@router.get("/{referral_id}", response_model=Referral)
async def get_referral(
    referral_id: int,
    store: PortalStore = Depends(get_store),
):
    referral = await referral_service.get_referral(store, referral_id)
    if referral is None:
        raise ReferralNotFoundException()
    return referral


@router.patch("/{referral_id}", response_model=Referral)
async def update_referral(
    referral_id: int,
    data: ReferralUpdate,
    store: PortalStore = Depends(get_store),
):
    return await referral_service.update_referral(store, referral_id, data)


@router.post("/{referral_id}/apply", response_model=Referral)
async def apply_through_referral(
    referral_id: int,
    store: PortalStore = Depends(get_store),
):
    """Count an application made with this referral's code."""
    return await referral_service.record_application(store, referral_id)
