"""
Job repository - data access for Job entity.
"""
from typing import List, Optional

from placement_portal.core.exceptions import JobNotFoundException
from placement_portal.core.store import PortalStore
from placement_portal.models.job import Job
from placement_portal.repositories.base import BaseRepository


class JobRepository(BaseRepository[Job]):
    def __init__(self):
        super().__init__(Job, "jobs", JobNotFoundException)

    async def find_with_filters(
        self,
        store: PortalStore,
        *,
        approved: Optional[bool] = True,
        posted_by: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> List[Job]:
        """
        Jobs matching the filters, in posting order.

        approved=None lists approved and unapproved jobs alike;
        limit truncates after filtering.
        """
        jobs = await self.find(store, approved=approved, posted_by=posted_by)
        if limit is not None:
            jobs = jobs[: max(limit, 0)]
        return jobs
