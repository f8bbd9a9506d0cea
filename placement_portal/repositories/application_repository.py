"""
Application repository - data access for Application entity.
"""
from typing import Any, Dict, List

from placement_portal.core.exceptions import (
    ApplicationNotFoundException,
    DuplicateApplicationException,
)
from placement_portal.core.store import PortalStore
from placement_portal.models.application import Application
from placement_portal.repositories.base import BaseRepository, coerce_id


class ApplicationRepository(BaseRepository[Application]):
    def __init__(self):
        super().__init__(Application, "applications", ApplicationNotFoundException)

    def _check_create(self, rows: List[Dict[str, Any]], data: Dict[str, Any]) -> None:
        # Checked under the collection lock so two concurrent applies can't both pass
        job_id, user_id = coerce_id(data.get("job_id")), coerce_id(data.get("user_id"))
        for row in rows:
            if coerce_id(row.get("jobId")) == job_id and coerce_id(row.get("userId")) == user_id:
                raise DuplicateApplicationException()

    async def find_by_job(
        self,
        store: PortalStore,
        job_id: int,
    ) -> List[Application]:
        """All applications for a job, in the order they were made."""
        return await self.find(store, job_id=job_id)

    async def find_by_user(
        self,
        store: PortalStore,
        user_id: int,
    ) -> List[Application]:
        return await self.find(store, user_id=user_id)
