"""
Mentorship schemas.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from placement_portal.models.mentorship import MentorshipStatus
from placement_portal.schemas.base import BaseSchema, UpdateSchema


class MentorshipCreate(BaseSchema):
    """New pairing. Status, sessions and matchedOn are assigned by the store."""

    mentor_id: int
    mentee_id: int
    match_score: Optional[float] = None
    match_reasons: List[str] = []
    goals: List[str] = []


class MentorshipUpdate(UpdateSchema):
    status: Optional[MentorshipStatus] = None
    match_score: Optional[float] = None
    match_reasons: Optional[List[str]] = None
    goals: Optional[List[str]] = None
    next_session_date: Optional[datetime] = None


class SessionCreate(BaseSchema):
    topic: str = Field(..., min_length=1)
    date: Optional[datetime] = None
    duration: Optional[int] = Field(default=None, ge=0)
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    notes: Optional[str] = None


class MentorMatch(BaseSchema):
    """Suggested mentor for a student."""

    mentor_id: int
    name: str
    score: int
    reasons: List[str]


class MentorshipStats(BaseSchema):
    active_mentorships: int
    pending_mentorships: int
    total_sessions: int
    avg_rating: Optional[float] = None  # None when no session is rated
