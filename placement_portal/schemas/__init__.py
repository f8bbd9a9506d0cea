"""
Pydantic schemas for payload validation and composite responses.
"""
from placement_portal.schemas.base import (
    BaseSchema,
    UpdateSchema,
    MessageResponse,
    ErrorResponse,
)
from placement_portal.schemas.job import JobCreate, JobUpdate
from placement_portal.schemas.application import (
    ApplicationCreate,
    ApplicationStatusUpdate,
    StudentApplication,
)
from placement_portal.schemas.company import CompanyCreate, CompanyUpdate
from placement_portal.schemas.user import UserCreate, UserUpdate
from placement_portal.schemas.mentorship import (
    MentorshipCreate,
    MentorshipUpdate,
    SessionCreate,
    MentorMatch,
    MentorshipStats,
)
from placement_portal.schemas.referral import ReferralCreate, ReferralUpdate
from placement_portal.schemas.analytics import (
    AnalyticsResponse,
    Kpis,
    FunnelStage,
    TypeCount,
    SkillCount,
)

__all__ = [
    # Base
    "BaseSchema",
    "UpdateSchema",
    "MessageResponse",
    "ErrorResponse",
    # Job
    "JobCreate",
    "JobUpdate",
    # Application
    "ApplicationCreate",
    "ApplicationStatusUpdate",
    "StudentApplication",
    # Company
    "CompanyCreate",
    "CompanyUpdate",
    # User
    "UserCreate",
    "UserUpdate",
    # Mentorship
    "MentorshipCreate",
    "MentorshipUpdate",
    "SessionCreate",
    "MentorMatch",
    "MentorshipStats",
    # Referral
    "ReferralCreate",
    "ReferralUpdate",
    # Analytics
    "AnalyticsResponse",
    "Kpis",
    "FunnelStage",
    "TypeCount",
    "SkillCount",
]
