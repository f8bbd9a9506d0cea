"""
Referral schemas.
"""
from datetime import date
from typing import List, Optional

from pydantic import Field

from placement_portal.models.referral import ReferralStatus
from placement_portal.schemas.base import BaseSchema, UpdateSchema


class ReferralCreate(BaseSchema):
    referred_by: int
    title: str = Field(..., min_length=1)
    company: str = Field(..., min_length=1)
    location: Optional[str] = None
    type: str = "Internship"
    description: Optional[str] = None
    skills: List[str] = []
    min_cgpa: Optional[float] = Field(default=None, ge=0, le=10)
    eligibility: Optional[str] = None
    benefits: List[str] = []
    deadline: Optional[date] = None


class ReferralUpdate(UpdateSchema):
    title: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    skills: Optional[List[str]] = None
    min_cgpa: Optional[float] = Field(default=None, ge=0, le=10)
    eligibility: Optional[str] = None
    benefits: Optional[List[str]] = None
    deadline: Optional[date] = None
    status: Optional[ReferralStatus] = None
