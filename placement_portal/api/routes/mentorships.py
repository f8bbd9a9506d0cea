"""
Mentorship routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from placement_portal.api.deps import get_store
from placement_portal.core.exceptions import MentorshipNotFoundException
from placement_portal.core.store import PortalStore
from placement_portal.models.mentorship import Mentorship, MentorshipStatus
from placement_portal.schemas.mentorship import (
    MentorMatch,
    MentorshipCreate,
    MentorshipStats,
    MentorshipUpdate,
    SessionCreate,
)
from placement_portal.services.mentorship_service import MentorshipService

router = APIRouter(prefix="/mentorships", tags=["mentorships"])

mentorship_service = MentorshipService()


@router.get("/", response_model=List[Mentorship])
async def list_mentorships(
    mentor_id: Optional[int] = Query(None, alias="mentorId"),
    mentee_id: Optional[int] = Query(None, alias="menteeId"),
    status: Optional[MentorshipStatus] = Query(None),
    store: PortalStore = Depends(get_store),
):
    return await mentorship_service.list_mentorships(
        store, mentor_id=mentor_id, mentee_id=mentee_id, status=status
    )


@router.post("/", response_model=Mentorship, status_code=201)
async def create_mentorship(
    data: MentorshipCreate,
    store: PortalStore = Depends(get_store),
):
    return await mentorship_service.create_mentorship(store, data)


@router.get("/stats", response_model=MentorshipStats)
async def get_mentorship_stats(
    mentor_id: Optional[int] = Query(None, alias="mentorId"),
    store: PortalStore = Depends(get_store),
):
    return await mentorship_service.get_stats(store, mentor_id=mentor_id)


@router.get("/matches/{mentee_id}", response_model=List[MentorMatch])
async def match_mentors(
    mentee_id: int,
    limit: int = Query(3, ge=1, le=20),
    store: PortalStore = Depends(get_store),
):
    """Suggested alumni mentors for a student, best first."""
    return await mentorship_service.match_mentors(store, mentee_id, limit=limit)


@router.get("/{mentorship_id}", response_model=Mentorship)
async def get_mentorship(
    mentorship_id: int,
    store: PortalStore = Depends(get_store),
):
    mentorship = await mentorship_service.get_mentorship(store, mentorship_id)
    if mentorship is None:
        raise MentorshipNotFoundException()
    return mentorship


@router.patch("/{mentorship_id}", response_model=Mentorship)
async def update_mentorship(
    mentorship_id: int,
    data: MentorshipUpdate,
    store: PortalStore = Depends(get_store),
):
    return await mentorship_service.update_mentorship(store, mentorship_id, data)


@router.post("/{mentorship_id}/sessions", response_model=Mentorship, status_code=201)
async def add_session(
    mentorship_id: int,
    data: SessionCreate,
    store: PortalStore = Depends(get_store),
):
    return await mentorship_service.add_session(store, mentorship_id, data)
