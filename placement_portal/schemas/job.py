"""
Job schemas.
"""
from datetime import date
from typing import List, Optional

from pydantic import Field

from placement_portal.schemas.base import BaseSchema, UpdateSchema


class JobCreate(BaseSchema):
    """Job posting payload."""

    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    eligibility: Optional[str] = None
    skills: List[str] = []
    deadline: Optional[date] = None
    posted_by: int
    company_id: Optional[int] = None
    location: Optional[str] = None
    type: Optional[str] = None
    approved: bool = False


class JobUpdate(UpdateSchema):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    eligibility: Optional[str] = None
    skills: Optional[List[str]] = None
    deadline: Optional[date] = None
    company_id: Optional[int] = None
    location: Optional[str] = None
    type: Optional[str] = None
    approved: Optional[bool] = None
