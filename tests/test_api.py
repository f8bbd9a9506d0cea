import pytest
from fastapi.testclient import TestClient

from placement_portal.core.latency import Latency
from placement_portal.core.storage import MemoryStorage
from placement_portal.core.store import PortalStore
from placement_portal.main import create_app

API = "/api/v1"


@pytest.fixture
def client():
    store = PortalStore(MemoryStorage(), latency=Latency(0))
    with TestClient(create_app(store)) as test_client:
        yield test_client


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Campus Placement Portal"


def test_health_reports_collections(client):
    body = client.get(f"{API}/health").json()
    assert body["status"] == "healthy"
    assert body["checks"]["jobs"] == "healthy (8 records)"


def test_job_board_uses_camel_case(client):
    jobs = client.get(f"{API}/jobs/").json()

    assert [j["id"] for j in jobs] == [1, 2, 3, 5, 7, 8]
    assert {"postedBy", "companyId", "createdAt"} <= set(jobs[0])


def test_job_board_query_parameters(client):
    jobs = client.get(f"{API}/jobs/", params={"all": "true", "postedBy": 202, "_limit": 3}).json()
    assert [j["id"] for j in jobs] == [2, 4, 6]


def test_post_job(client):
    response = client.post(
        f"{API}/jobs/",
        json={"title": "Backend Intern", "postedBy": 201, "skills": ["Go", "SQL"], "deadline": "2025-12-01"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == 9
    assert body["approved"] is False
    assert body["deadline"] == "2025-12-01"

    approved = client.post(f"{API}/jobs/9/approve").json()
    assert approved["approved"] is True


def test_missing_job_error_shape(client):
    response = client.get(f"{API}/jobs/404")

    assert response.status_code == 404
    assert response.json() == {
        "error": "JOB_NOT_FOUND",
        "message": "Job not found",
        "details": None,
    }


def test_invalid_body_error_shape(client):
    response = client.post(f"{API}/jobs/", json={"title": "No poster"})

    assert response.status_code == 422
    body = response.json()
    assert body["error"] == "VALIDATION_ERROR"
    assert body["details"]


def test_delete_job_is_idempotent(client):
    assert client.delete(f"{API}/jobs/8").status_code == 200
    assert client.delete(f"{API}/jobs/8").status_code == 200
    assert client.get(f"{API}/jobs/8").status_code == 404


def test_job_applicants(client):
    applications = client.get(f"{API}/jobs/7/applications").json()
    assert [a["id"] for a in applications] == [1, 3, 5]


def test_apply_then_duplicate(client):
    first = client.post(f"{API}/applications/", json={"jobId": 1, "userId": 105})
    again = client.post(f"{API}/applications/", json={"jobId": 1, "userId": 105})

    assert first.status_code == 201
    assert first.json()["status"] == "Pending"
    assert again.status_code == 409
    assert again.json()["error"] == "DUPLICATE_APPLICATION"


def test_patch_application_status(client):
    response = client.patch(f"{API}/applications/3/status", json={"status": "Interview"})
    assert response.status_code == 200
    assert response.json()["status"] == "Interview"

    bad = client.patch(f"{API}/applications/3/status", json={"status": "Ghosted"})
    assert bad.status_code == 422


def test_student_applications(client):
    body = client.get(f"{API}/applications/student/101").json()
    assert [(a["jobTitle"], a["companyName"]) for a in body] == [
        ("Backend Developer", "Quantiva Analytics"),
        ("Cloud Support Associate", "Stratus Cloud"),
    ]


def test_mentorship_flow(client):
    created = client.post(f"{API}/mentorships/", json={"mentorId": 302, "menteeId": 104})
    assert created.status_code == 201
    mentorship_id = created.json()["id"]

    accepted = client.patch(f"{API}/mentorships/{mentorship_id}", json={"status": "active"})
    assert accepted.json()["status"] == "active"

    with_session = client.post(
        f"{API}/mentorships/{mentorship_id}/sessions", json={"topic": "AWS basics", "rating": 4}
    )
    assert with_session.status_code == 201
    assert with_session.json()["sessions"][0]["id"] == 1


def test_mentor_matches_and_stats(client):
    matches = client.get(f"{API}/mentorships/matches/101").json()
    assert [m["mentorId"] for m in matches] == [304, 303, 302]

    stats = client.get(f"{API}/mentorships/stats").json()
    assert stats == {
        "activeMentorships": 1,
        "pendingMentorships": 1,
        "totalSessions": 3,
        "avgRating": 4.3,
    }


def test_referral_apply(client):
    assert client.post(f"{API}/referrals/1/apply").json()["applicationCount"] == 13

    closed = client.post(f"{API}/referrals/3/apply")
    assert closed.status_code == 409
    assert closed.json()["error"] == "REFERRAL_CLOSED"


def test_alumni_directory(client):
    alumni = client.get(f"{API}/users/alumni").json()
    assert [u["id"] for u in alumni] == [301, 302, 303, 304]
    assert alumni[0]["graduationYear"] == 2018


def test_analytics(client):
    body = client.get(f"{API}/analytics/").json()
    assert body["kpis"]["totalJobs"] == 8
    assert body["topSkills"][0] == {"name": "SQL", "value": 4}
