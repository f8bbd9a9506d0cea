"""
Application service - students applying to jobs, recruiters moving
applicants through the hiring pipeline.
"""
from typing import List, Optional, Union

from placement_portal.core.exceptions import ValidationException
from placement_portal.core.latency import CREATE, READ_MANY, READ_ONE, WRITE, simulated
from placement_portal.core.logging import get_logger
from placement_portal.core.store import PortalStore
from placement_portal.models.application import Application, ApplicationStatus
from placement_portal.repositories.application_repository import ApplicationRepository
from placement_portal.repositories.company_repository import CompanyRepository
from placement_portal.repositories.job_repository import JobRepository
from placement_portal.repositories.user_repository import UserRepository
from placement_portal.schemas.application import (
    ApplicationCreate,
    ApplicationStatusUpdate,
    StudentApplication,
)

logger = get_logger(__name__)

UNKNOWN_JOB = "Unknown Job"
UNKNOWN_COMPANY = "Unknown Company"


class ApplicationService:
    """Handles job applications and their status."""

    def __init__(self):
        self.application_repo = ApplicationRepository()
        self.job_repo = JobRepository()
        self.user_repo = UserRepository()
        self.company_repo = CompanyRepository()

    @simulated(READ_MANY)
    async def list_applications(
        self,
        store: PortalStore,
        *,
        user_id: Optional[int] = None,
        job_id: Optional[int] = None,
        status: Optional[ApplicationStatus] = None,
    ) -> List[Application]:
        return await self.application_repo.find(
            store, user_id=user_id, job_id=job_id, status=status
        )

    @simulated(READ_MANY)
    async def list_by_job(self, store: PortalStore, job_id) -> List[Application]:
        """Applicants for a recruiter's job, in the order they applied."""
        return await self.application_repo.find_by_job(store, job_id)

    @simulated(READ_MANY)
    async def list_for_student(
        self,
        store: PortalStore,
        user_id,
    ) -> List[StudentApplication]:
        """
        A student's applications with job title and company name resolved.

        Jobs or companies that no longer exist show as "Unknown Job" /
        "Unknown Company" rather than failing the whole listing.
        """
        applications = await self.application_repo.find_by_user(store, user_id)
        jobs = {job.id: job for job in await self.job_repo.get_all(store)}
        companies = {c.id: c for c in await self.company_repo.get_all(store)}

        result = []
        for application in applications:
            job = jobs.get(application.job_id)
            company = companies.get(job.company_id) if job and job.company_id else None
            result.append(
                StudentApplication(
                    **application.model_dump(),
                    job_title=job.title if job else UNKNOWN_JOB,
                    company_name=company.name if company else UNKNOWN_COMPANY,
                )
            )
        return result

    @simulated(READ_ONE)
    async def get_application(self, store: PortalStore, application_id) -> Optional[Application]:
        return await self.application_repo.get_by_id(store, application_id)

    @simulated(CREATE)
    async def create_application(
        self,
        store: PortalStore,
        data: Union[ApplicationCreate, dict],
    ) -> Application:
        """
        Apply to a job.

        Raises:
            ValidationException: If the job or user doesn't exist.
            DuplicateApplicationException: If the user already applied to the job.
        """
        payload = ApplicationCreate.parse(data)

        if await self.job_repo.get_by_id(store, payload.job_id) is None:
            raise ValidationException(f"Job {payload.job_id} does not exist")
        if await self.user_repo.get_by_id(store, payload.user_id) is None:
            raise ValidationException(f"User {payload.user_id} does not exist")

        application = await self.application_repo.create(store, **payload.model_dump())
        logger.info(
            "application_created",
            application_id=application.id,
            job_id=application.job_id,
            user_id=application.user_id,
        )
        return application

    @simulated(WRITE)
    async def patch_status(
        self,
        store: PortalStore,
        application_id,
        status: Union[ApplicationStatus, str],
    ) -> Application:
        """
        Move an applicant to a new pipeline stage.

        Raises:
            ApplicationNotFoundException: If the application doesn't exist.
            ValidationException: If status isn't a known stage.
        """
        payload = ApplicationStatusUpdate.parse({"status": status})
        application = await self.application_repo.update(
            store, application_id, status=payload.status
        )
        logger.info(
            "application_status_changed",
            application_id=application.id,
            status=application.status.value,
        )
        return application
