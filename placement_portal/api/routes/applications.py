"""
Application routes.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from placement_portal.api.deps import get_store
from placement_portal.core.exceptions import ApplicationNotFoundException
from placement_portal.core.store import PortalStore
from placement_portal.models.application import Application, ApplicationStatus
from placement_portal.schemas.application import (
    ApplicationCreate,
    ApplicationStatusUpdate,
    StudentApplication,
)
from placement_portal.services.application_service import ApplicationService

router = APIRouter(prefix="/applications", tags=["applications"])

application_service = ApplicationService()


@router.get("/", response_model=List[Application])
async def list_applications(
    user_id: Optional[int] = Query(None, alias="userId"),
    job_id: Optional[int] = Query(None, alias="jobId"),
    status: Optional[ApplicationStatus] = Query(None),
    store: PortalStore = Depends(get_store),
):
    return await application_service.list_applications(
        store, user_id=user_id, job_id=job_id, status=status
    )


@router.post("/", response_model=Application, status_code=201)
async def create_application(
    data: ApplicationCreate,
    store: PortalStore = Depends(get_store),
):
    return await application_service.create_application(store, data)


@router.get("/student/{user_id}", response_model=List[StudentApplication])
async def list_student_applications(
    user_id: int,
    store: PortalStore = Depends(get_store),
):
    """A student's applications with job title and company name."""
    return await application_service.list_for_student(store, user_id)


@router.get("/{application_id}", response_model=Application)
async def get_application(
    application_id: int,
    store: PortalStore = Depends(get_store),
):
    application = await application_service.get_application(store, application_id)
    if application is None:
        raise ApplicationNotFoundException()
    return application


@router.patch("/{application_id}/status", response_model=Application)
async def patch_application_status(
    application_id: int,
    data: ApplicationStatusUpdate,
    store: PortalStore = Depends(get_store),
):
    return await application_service.patch_status(store, application_id, data.status)
