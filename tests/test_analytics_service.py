from placement_portal.services.analytics_service import AnalyticsService
from placement_portal.services.application_service import ApplicationService


async def test_dashboard_over_fixture_data(store):
    analytics = await AnalyticsService().get_analytics(store)

    assert analytics.kpis.model_dump() == {
        "total_jobs": 8,
        "total_applications": 5,
        "total_students": 5,
        "total_companies": 5,
    }
    assert [(f.stage, f.count) for f in analytics.funnel] == [
        ("Applied", 5),
        ("Shortlisted", 4),
        ("Interview", 3),
        ("Hired", 2),
    ]
    assert [(t.type, t.value) for t in analytics.jobs_by_location] == [
        ("Bengaluru", 2),
        ("Hyderabad", 2),
        ("Remote", 1),
        ("Pune", 2),
        ("Not Specified", 1),
    ]
    assert [(t.type, t.value) for t in analytics.placements_by_dept] == [("ECE", 1), ("IT", 1)]
    assert (analytics.top_skills[0].name, analytics.top_skills[0].value) == ("SQL", 4)
    assert len(analytics.top_skills) <= 15


async def test_funnel_never_increases(store):
    await ApplicationService().patch_status(store, 1, "Hired")

    funnel = (await AnalyticsService().get_analytics(store)).funnel

    counts = [stage.count for stage in funnel]
    assert counts == sorted(counts, reverse=True)
    assert counts[-1] == 3


async def test_dashboard_serializes_camel_case(store):
    analytics = await AnalyticsService().get_analytics(store)
    data = analytics.model_dump(by_alias=True)

    assert set(data) == {"kpis", "funnel", "jobsByLocation", "placementsByDept", "topSkills"}
    assert "totalJobs" in data["kpis"]
