"""
Repository layer - data access abstraction.

Repositories handle all collection reads and writes, keeping storage
logic out of the service and route layers.
"""
from placement_portal.repositories.base import BaseRepository, coerce_id
from placement_portal.repositories.job_repository import JobRepository
from placement_portal.repositories.application_repository import ApplicationRepository
from placement_portal.repositories.company_repository import CompanyRepository
from placement_portal.repositories.user_repository import UserRepository
from placement_portal.repositories.mentorship_repository import MentorshipRepository
from placement_portal.repositories.referral_repository import ReferralRepository

__all__ = [
    "BaseRepository",
    "coerce_id",
    "JobRepository",
    "ApplicationRepository",
    "CompanyRepository",
    "UserRepository",
    "MentorshipRepository",
    "ReferralRepository",
]
