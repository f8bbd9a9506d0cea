"""
Company routes.
"""
from typing import List

from fastapi import APIRouter, Depends

from placement_portal.api.deps import get_store
from placement_portal.core.exceptions import CompanyNotFoundException
from placement_portal.core.store import PortalStore
from placement_portal.models.company import Company
from placement_portal.schemas.company import CompanyCreate, CompanyUpdate
from placement_portal.services.company_service import CompanyService

router = APIRouter(prefix="/companies", tags=["companies"])

company_service = CompanyService()


@router.get("/", response_model=List[Company])
async def list_companies(store: PortalStore = Depends(get_store)):
    return await company_service.list_companies(store)


@router.post("/", response_model=Company, status_code=201)
async def create_company(
    data: CompanyCreate,
    store: PortalStore = Depends(get_store),
):
    return await company_service.create_company(store, data)


@router.get("/{company_id}", response_model=Company)
async def get_company(
    company_id: int,
    store: PortalStore = Depends(get_store),
):
    company = await company_service.get_company(store, company_id)
    if company is None:
        raise CompanyNotFoundException()
    return company


@router.patch("/{company_id}", response_model=Company)
async def update_company(
    company_id: int,
    data: CompanyUpdate,
    store: PortalStore = Depends(get_store),
):
    return await company_service.update_company(store, company_id, data)
