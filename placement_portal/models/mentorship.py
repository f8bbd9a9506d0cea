"""
Mentorship model - an alumni mentor paired with a student mentee.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from placement_portal.models.base import Record, utcnow


class MentorshipStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"


class Session(Record):
    """One mentoring session. IDs are unique within the mentorship."""

    topic: str
    date: datetime = Field(default_factory=utcnow)
    duration: Optional[int] = Field(default=None, ge=0)  # minutes
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    notes: Optional[str] = None


class Mentorship(Record):
    mentor_id: int
    mentee_id: int
    status: MentorshipStatus = MentorshipStatus.PENDING
    match_score: Optional[float] = None
    match_reasons: List[str] = Field(default_factory=list)
    goals: List[str] = Field(default_factory=list)
    sessions: List[Session] = Field(default_factory=list)
    matched_on: datetime = Field(default_factory=utcnow)
    next_session_date: Optional[datetime] = None
