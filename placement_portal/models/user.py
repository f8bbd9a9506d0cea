"""
User model - students, recruiters and alumni share one collection.
"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from placement_portal.models.base import Record, utcnow


class UserRole(str, Enum):
    STUDENT = "student"
    RECRUITER = "recruiter"
    ALUMNI = "alumni"


class UserProfile(BaseModel):
    """Academic profile, filled in by students."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    skills: List[str] = Field(default_factory=list)
    cgpa: Optional[float] = Field(default=None, ge=0, le=10)
    resume_url: Optional[str] = None


class User(Record):
    """
    Portal user.

    company/designation/graduation_year/expertise are only
    meaningful for alumni.
    """

    name: str
    email: Optional[str] = None
    role: UserRole
    department: Optional[str] = None
    profile: UserProfile = Field(default_factory=UserProfile)

    company: Optional[str] = None
    designation: Optional[str] = None
    graduation_year: Optional[int] = None
    expertise: List[str] = Field(default_factory=list)

    created_at: datetime = Field(default_factory=utcnow)
