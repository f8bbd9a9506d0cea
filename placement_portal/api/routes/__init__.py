"""
API Routes package.
"""
from fastapi import APIRouter

from placement_portal.api.routes.health import router as health_router
from placement_portal.api.routes.jobs import router as jobs_router
from placement_portal.api.routes.applications import router as applications_router
from placement_portal.api.routes.companies import router as companies_router
from placement_portal.api.routes.users import router as users_router
from placement_portal.api.routes.mentorships import router as mentorships_router
from placement_portal.api.routes.referrals import router as referrals_router
from placement_portal.api.routes.analytics import router as analytics_router

# Main API router
api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(jobs_router)
api_router.include_router(applications_router)
api_router.include_router(companies_router)
api_router.include_router(users_router)
api_router.include_router(mentorships_router)
api_router.include_router(referrals_router)
api_router.include_router(analytics_router)

__all__ = [
    "api_router",
    "health_router",
    "jobs_router",
    "applications_router",
    "companies_router",
    "users_router",
    "mentorships_router",
    "referrals_router",
    "analytics_router",
]
