"""
Company repository - data access for Company entity.
"""
from placement_portal.core.exceptions import CompanyNotFoundException
from placement_portal.models.company import Company
from placement_portal.repositories.base import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    def __init__(self):
        super().__init__(Company, "companies", CompanyNotFoundException)
