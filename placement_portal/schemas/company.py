"""
Company schemas.
"""
from typing import Optional

from pydantic import Field

from placement_portal.schemas.base import BaseSchema, UpdateSchema


class CompanyCreate(BaseSchema):
    name: str = Field(..., min_length=1)
    location: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None


class CompanyUpdate(UpdateSchema):
    name: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None
