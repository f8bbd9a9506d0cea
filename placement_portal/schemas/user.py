"""
User schemas.
"""
from typing import List, Optional

from pydantic import Field

from placement_portal.models.user import UserProfile, UserRole
from placement_portal.schemas.base import BaseSchema, UpdateSchema


class UserCreate(BaseSchema):
    name: str = Field(..., min_length=1)
    email: Optional[str] = None
    role: UserRole
    department: Optional[str] = None
    profile: UserProfile = Field(default_factory=UserProfile)
    company: Optional[str] = None
    designation: Optional[str] = None
    graduation_year: Optional[int] = None
    expertise: List[str] = []


class UserUpdate(UpdateSchema):
    """
    Profile edit. `profile` replaces the whole sub-object, matching the
    shallow merge every update uses.
    """

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[str] = None
    department: Optional[str] = None
    profile: Optional[UserProfile] = None
    company: Optional[str] = None
    designation: Optional[str] = None
    graduation_year: Optional[int] = None
    expertise: Optional[List[str]] = None
