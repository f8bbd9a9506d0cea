"""
Job service - recruiter postings, approval and the public job board.
"""
from typing import List, Optional, Union

from placement_portal.core.latency import CREATE, READ_MANY, READ_ONE, WRITE, simulated
from placement_portal.core.logging import get_logger
from placement_portal.core.store import PortalStore
from placement_portal.models.job import Job
from placement_portal.repositories.job_repository import JobRepository
from placement_portal.schemas.job import JobCreate, JobUpdate

logger = get_logger(__name__)


class JobService:
    """Handles job listing, posting, editing and removal."""

    def __init__(self):
        self.job_repo = JobRepository()

    @simulated(READ_MANY)
    async def list_jobs(
        self,
        store: PortalStore,
        *,
        approved: Optional[bool] = True,
        posted_by: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Job]:
        """
        Job board listing.

        Students see approved jobs only (the default). Recruiters pass
        posted_by with approved=None to see all of their own postings.
        """
        return await self.job_repo.find_with_filters(
            store,
            approved=approved,
            posted_by=posted_by,
            limit=limit,
        )

    @simulated(READ_ONE)
    async def get_job(self, store: PortalStore, job_id) -> Optional[Job]:
        return await self.job_repo.get_by_id(store, job_id)

    @simulated(CREATE)
    async def create_job(
        self,
        store: PortalStore,
        data: Union[JobCreate, dict],
    ) -> Job:
        """Post a new job. It stays unapproved unless the payload says otherwise."""
        payload = JobCreate.parse(data)
        job = await self.job_repo.create(store, **payload.model_dump())
        logger.info("job_created", job_id=job.id, posted_by=job.posted_by)
        return job

    @simulated(WRITE)
    async def update_job(
        self,
        store: PortalStore,
        job_id,
        data: Union[JobUpdate, dict],
    ) -> Job:
        """
        Edit a posting.

        Raises:
            JobNotFoundException: If job doesn't exist.
        """
        changes = JobUpdate.parse(data).changes()
        job = await self.job_repo.update(store, job_id, **changes)
        logger.info("job_updated", job_id=job.id, fields=sorted(changes))
        return job

    @simulated(WRITE)
    async def approve_job(self, store: PortalStore, job_id) -> Job:
        """
        Publish a job on the board.

        Raises:
            JobNotFoundException: If job doesn't exist.
        """
        job = await self.job_repo.update(store, job_id, approved=True)
        logger.info("job_approved", job_id=job.id)
        return job

    @simulated(WRITE)
    async def delete_job(self, store: PortalStore, job_id) -> bool:
        """Remove a posting. Deleting a job that doesn't exist is not an error."""
        deleted = await self.job_repo.delete(store, job_id)
        logger.info("job_deleted", job_id=job_id, deleted=deleted)
        return deleted
