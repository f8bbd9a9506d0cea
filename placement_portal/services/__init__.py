"""
Service layer - business logic and orchestration.

Services contain the portal's business logic, coordinate between
repositories, and simulate backend latency.

RULE: Routes call services. Services call repositories. Never the reverse.
"""
from placement_portal.services.job_service import JobService
from placement_portal.services.application_service import ApplicationService
from placement_portal.services.company_service import CompanyService
from placement_portal.services.user_service import UserService
from placement_portal.services.mentorship_service import MentorshipService
from placement_portal.services.referral_service import ReferralService
from placement_portal.services.analytics_service import AnalyticsService

__all__ = [
    "JobService",
    "ApplicationService",
    "CompanyService",
    "UserService",
    "MentorshipService",
    "ReferralService",
    "AnalyticsService",
]
