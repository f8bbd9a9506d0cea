"""
Application model - a student's application to a job.
"""
from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from placement_portal.models.base import Record, utcnow


class ApplicationStatus(str, Enum):
    PENDING = "Pending"
    SHORTLISTED = "Shortlisted"
    INTERVIEW = "Interview"
    HIRED = "Hired"
    REJECTED = "Rejected"


class Application(Record):
    job_id: int
    user_id: int
    status: ApplicationStatus = ApplicationStatus.PENDING
    cover_letter: Optional[str] = None
    applied_at: datetime = Field(default_factory=utcnow)
