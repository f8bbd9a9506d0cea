"""
Job model - a position posted by a recruiter.
"""
from datetime import date, datetime
from typing import List, Optional

from pydantic import Field

from placement_portal.models.base import Record, utcnow


class Job(Record):
    """
    Job posting.

    New postings start unapproved; the public listing only shows
    approved jobs unless asked otherwise.
    """

    title: str
    description: Optional[str] = None
    eligibility: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    deadline: Optional[date] = None
    posted_by: int  # recruiter user id
    company_id: Optional[int] = None
    location: Optional[str] = None
    type: Optional[str] = None  # 'Full-time', 'Internship', ...
    approved: bool = False
    created_at: datetime = Field(default_factory=utcnow)
