"""
Record models for the portal.

All records use integer IDs and serialize with camelCase aliases.
"""
from placement_portal.models.base import Record, utcnow
from placement_portal.models.job import Job
from placement_portal.models.application import Application, ApplicationStatus
from placement_portal.models.company import Company
from placement_portal.models.user import User, UserProfile, UserRole
from placement_portal.models.mentorship import Mentorship, MentorshipStatus, Session
from placement_portal.models.referral import Referral, ReferralStatus

__all__ = [
    "Record",
    "utcnow",
    "Job",
    "Application",
    "ApplicationStatus",
    "Company",
    "User",
    "UserProfile",
    "UserRole",
    "Mentorship",
    "MentorshipStatus",
    "Session",
    "Referral",
    "ReferralStatus",
]
