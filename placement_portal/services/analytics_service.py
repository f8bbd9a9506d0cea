"""
Analytics service - aggregates for the placement dashboard.
"""
from collections import Counter
from typing import Iterable, List

from placement_portal.core.latency import ANALYTICS, simulated
from placement_portal.core.store import PortalStore
from placement_portal.models.application import ApplicationStatus
from placement_portal.models.user import UserRole
from placement_portal.repositories.application_repository import ApplicationRepository
from placement_portal.repositories.company_repository import CompanyRepository
from placement_portal.repositories.job_repository import JobRepository
from placement_portal.repositories.user_repository import UserRepository
from placement_portal.schemas.analytics import (
    AnalyticsResponse,
    FunnelStage,
    Kpis,
    SkillCount,
    TypeCount,
)

TOP_SKILLS = 15
NO_LOCATION = "Not Specified"
NO_DEPARTMENT = "Other"

# Each funnel stage counts applications that reached it or went further
FUNNEL = [
    ("Applied", None),
    ("Shortlisted", {ApplicationStatus.SHORTLISTED, ApplicationStatus.INTERVIEW, ApplicationStatus.HIRED}),
    ("Interview", {ApplicationStatus.INTERVIEW, ApplicationStatus.HIRED}),
    ("Hired", {ApplicationStatus.HIRED}),
]


def _type_counts(values: Iterable[str]) -> List[TypeCount]:
    """Counts per category, categories in first-seen order."""
    return [TypeCount(type=k, value=v) for k, v in Counter(values).items()]


class AnalyticsService:
    """Computes the dashboard in one pass over the collections."""

    def __init__(self):
        self.job_repo = JobRepository()
        self.application_repo = ApplicationRepository()
        self.user_repo = UserRepository()
        self.company_repo = CompanyRepository()

    @simulated(ANALYTICS)
    async def get_analytics(self, store: PortalStore) -> AnalyticsResponse:
        jobs = await self.job_repo.get_all(store)
        applications = await self.application_repo.get_all(store)
        users = await self.user_repo.get_all(store)
        companies = await self.company_repo.get_all(store)

        kpis = Kpis(
            total_jobs=len(jobs),
            total_applications=len(applications),
            total_students=sum(1 for u in users if u.role == UserRole.STUDENT),
            total_companies=len(companies),
        )

        funnel = [
            FunnelStage(
                stage=stage,
                count=len(applications) if statuses is None
                else sum(1 for a in applications if a.status in statuses),
            )
            for stage, statuses in FUNNEL
        ]

        jobs_by_location = _type_counts(job.location or NO_LOCATION for job in jobs)

        departments = {u.id: u.department for u in users}
        placements_by_dept = _type_counts(
            departments.get(a.user_id) or NO_DEPARTMENT
            for a in applications
            if a.status == ApplicationStatus.HIRED
        )

        # most_common keeps first-seen order among equal counts
        skill_counts = Counter(skill for job in jobs for skill in job.skills)
        top_skills = [
            SkillCount(name=name, value=value)
            for name, value in skill_counts.most_common(TOP_SKILLS)
        ]

        return AnalyticsResponse(
            kpis=kpis,
            funnel=funnel,
            jobs_by_location=jobs_by_location,
            placements_by_dept=placements_by_dept,
            top_skills=top_skills,
        )
