"""
Company service - employer records shown alongside job postings.
"""
from typing import List, Optional, Union

from placement_portal.core.latency import CREATE, READ_MANY, READ_ONE, WRITE, simulated
from placement_portal.core.logging import get_logger
from placement_portal.core.store import PortalStore
from placement_portal.models.company import Company
from placement_portal.repositories.company_repository import CompanyRepository
from placement_portal.schemas.company import CompanyCreate, CompanyUpdate

logger = get_logger(__name__)


class CompanyService:
    """Handles company listing and management."""

    def __init__(self):
        self.company_repo = CompanyRepository()

    @simulated(READ_MANY)
    async def list_companies(self, store: PortalStore) -> List[Company]:
        """All companies, in the order they were added."""
        return await self.company_repo.get_all(store)

    @simulated(READ_ONE)
    async def get_company(self, store: PortalStore, company_id) -> Optional[Company]:
        return await self.company_repo.get_by_id(store, company_id)

    @simulated(CREATE)
    async def create_company(
        self,
        store: PortalStore,
        data: Union[CompanyCreate, dict],
    ) -> Company:
        payload = CompanyCreate.parse(data)
        company = await self.company_repo.create(store, **payload.model_dump())
        logger.info("company_created", company_id=company.id, name=company.name)
        return company

    @simulated(WRITE)
    async def update_company(
        self,
        store: PortalStore,
        company_id,
        data: Union[CompanyUpdate, dict],
    ) -> Company:
        """
        Raises:
            CompanyNotFoundException: If company doesn't exist.
        """
        changes = CompanyUpdate.parse(data).changes()
        return await self.company_repo.update(store, company_id, **changes)
