"""
Analytics dashboard schemas.
"""
from typing import List

from placement_portal.schemas.base import BaseSchema


class Kpis(BaseSchema):
    total_jobs: int
    total_applications: int
    total_students: int
    total_companies: int


class FunnelStage(BaseSchema):
    stage: str
    count: int


class TypeCount(BaseSchema):
    """Chart slice: a category and how many records fall in it."""

    type: str
    value: int


class SkillCount(BaseSchema):
    name: str
    value: int


class AnalyticsResponse(BaseSchema):
    kpis: Kpis
    funnel: List[FunnelStage]
    jobs_by_location: List[TypeCount]
    placements_by_dept: List[TypeCount]
    top_skills: List[SkillCount]
