"""
Job routes.

Thin controllers - JobService and ApplicationService hold the logic.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from placement_portal.api.deps import get_store
from placement_portal.core.exceptions import JobNotFoundException
from placement_portal.core.store import PortalStore
from placement_portal.models.application import Application
from placement_portal.models.job import Job
from placement_portal.schemas.base import MessageResponse
from placement_portal.schemas.job import JobCreate, JobUpdate
from placement_portal.services.application_service import ApplicationService
from placement_portal.services.job_service import JobService

router = APIRouter(prefix="/jobs", tags=["jobs"])

job_service = JobService()
application_service = ApplicationService()


@router.get("/", response_model=List[Job])
async def list_jobs(
    approved: bool = Query(True, description="Approval state to list"),
    include_unapproved: bool = Query(False, alias="all", description="List every job regardless of approval"),
    posted_by: Optional[int] = Query(None, alias="postedBy"),
    limit: Optional[int] = Query(None, alias="_limit", ge=0),
    store: PortalStore = Depends(get_store),
):
    """List jobs, approved ones by default."""
    return await job_service.list_jobs(
        store,
        approved=None if include_unapproved else approved,
        posted_by=posted_by,
        limit=limit,
    )


@router.post("/", response_model=Job, status_code=201)
async def create_job(
    data: JobCreate,
    store: PortalStore = Depends(get_store),
):
    return await job_service.create_job(store, data)


@router.get("/{job_id}", response_model=Job)
async def get_job(
    job_id: int,
    store: PortalStore = Depends(get_store),
):
    job = await job_service.get_job(store, job_id)
    if job is None:
        raise JobNotFoundException()
    return job


@router.patch("/{job_id}", response_model=Job)
async def update_job(
    job_id: int,
    data: JobUpdate,
    store: PortalStore = Depends(get_store),
):
    return await job_service.update_job(store, job_id, data)


@router.post("/{job_id}/approve", response_model=Job)
async def approve_job(
    job_id: int,
    store: PortalStore = Depends(get_store),
):
    return await job_service.approve_job(store, job_id)


@router.delete("/{job_id}", response_model=MessageResponse)
async def delete_job(
    job_id: int,
    store: PortalStore = Depends(get_store),
):
    """Delete a job. Idempotent."""
    deleted = await job_service.delete_job(store, job_id)
    return MessageResponse(message="Job deleted" if deleted else "Job already absent")


@router.get("/{job_id}/applications", response_model=List[Application])
async def list_job_applications(
    job_id: int,
    store: PortalStore = Depends(get_store),
):
    """Applicants for a job, in the order they applied."""
    return await application_service.list_by_job(store, job_id)
