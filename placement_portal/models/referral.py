"""
Referral model - a job opening shared by an alumnus, outside the
recruiter posting flow.
"""
from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from placement_portal.models.base import Record, utcnow


class ReferralStatus(str, Enum):
    ACTIVE = "active"
    CLOSED = "closed"


class Referral(Record):
    referred_by: int  # alumni user id
    title: str
    company: str
    location: Optional[str] = None
    type: str = "Internship"
    description: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    min_cgpa: Optional[float] = Field(default=None, ge=0, le=10)
    eligibility: Optional[str] = None
    benefits: List[str] = Field(default_factory=list)
    deadline: Optional[date] = None
    application_count: int = Field(default=0, ge=0)
    referral_code: str
    status: ReferralStatus = ReferralStatus.ACTIVE
    created_at: datetime = Field(default_factory=utcnow)
