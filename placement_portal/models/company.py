"""
Company model - an employer visiting campus.
"""
from datetime import datetime
from typing import Optional

from pydantic import Field

from placement_portal.models.base import Record, utcnow


class Company(Record):
    name: str
    location: Optional[str] = None
    description: Optional[str] = None
    website: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
