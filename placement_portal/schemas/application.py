"""
Application schemas.
"""
from typing import Optional

from placement_portal.models.application import Application, ApplicationStatus
from placement_portal.schemas.base import BaseSchema


class ApplicationCreate(BaseSchema):
    job_id: int
    user_id: int
    cover_letter: Optional[str] = None


class ApplicationStatusUpdate(BaseSchema):
    status: ApplicationStatus


class StudentApplication(Application):
    """Application with the job title and company name resolved."""

    job_title: str
    company_name: str
