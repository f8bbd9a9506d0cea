import pytest

from placement_portal.core.exceptions import (
    MentorshipNotFoundException,
    UserNotFoundException,
    ValidationException,
)
from placement_portal.models.mentorship import MentorshipStatus
from placement_portal.services.mentorship_service import MentorshipService


@pytest.fixture
def service():
    return MentorshipService()


async def test_request_mentorship_starts_pending(store, service):
    mentorship = await service.create_mentorship(
        store, {"mentorId": 302, "menteeId": 104, "goals": ["Cloud certification"]}
    )
    assert mentorship.id == 4
    assert mentorship.status == MentorshipStatus.PENDING
    assert mentorship.sessions == []
    assert mentorship.matched_on is not None


@pytest.mark.parametrize(
    "payload",
    [
        {"mentorId": 101, "menteeId": 104},  # a student can't mentor
        {"mentorId": 999, "menteeId": 104},
        {"mentorId": 302, "menteeId": 999},
    ],
)
async def test_request_mentorship_validates_people(store, service, payload):
    with pytest.raises(ValidationException):
        await service.create_mentorship(store, payload)


async def test_accept_mentorship(store, service):
    mentorship = await service.update_mentorship(store, 2, {"status": "active"})
    assert mentorship.status == MentorshipStatus.ACTIVE
    assert mentorship.mentor_id == 304


async def test_update_missing_mentorship(store, service):
    with pytest.raises(MentorshipNotFoundException):
        await service.update_mentorship(store, 404, {"status": "active"})


async def test_add_session_numbers_within_mentorship(store, service):
    mentorship = await service.add_session(
        store, 1, {"topic": "Mock interview", "duration": 45, "rating": 5}
    )

    session = mentorship.sessions[-1]
    assert [s.id for s in mentorship.sessions] == [1, 2, 3]
    assert session.topic == "Mock interview"
    assert session.date is not None

    other = await service.add_session(store, 2, {"topic": "Kickoff"})
    assert [s.id for s in other.sessions] == [1]


async def test_add_session_rejects_bad_rating(store, service):
    with pytest.raises(ValidationException):
        await service.add_session(store, 1, {"topic": "Review", "rating": 9})


async def test_add_session_missing_mentorship(store, service):
    with pytest.raises(MentorshipNotFoundException):
        await service.add_session(store, 404, {"topic": "Review"})


async def test_match_skips_current_mentor(store, service):
    matches = await service.match_mentors(store, 101)

    assert [(m.mentor_id, m.score) for m in matches] == [(304, 57), (303, 50), (302, 40)]
    assert matches[0].reasons == ["Both interested in Python", "Works at Amazon"]
    assert matches[1].reasons == ["Same department", "Works at Flipkart"]


async def test_match_includes_completed_mentor(store, service):
    matches = await service.match_mentors(store, 103, limit=2)

    assert [(m.mentor_id, m.score) for m in matches] == [(303, 75), (301, 50)]
    assert matches[0].reasons[:2] == ["Both interested in SQL", "Same department"]


async def test_match_unknown_student(store, service):
    with pytest.raises(UserNotFoundException):
        await service.match_mentors(store, 999)


async def test_stats_across_all_mentorships(store, service):
    stats = await service.get_stats(store)

    assert stats.active_mentorships == 1
    assert stats.pending_mentorships == 1
    assert stats.total_sessions == 3
    assert stats.avg_rating == 4.3


async def test_stats_for_mentor_without_ratings(store, service):
    stats = await service.get_stats(store, mentor_id=304)

    assert stats.pending_mentorships == 1
    assert stats.total_sessions == 0
    assert stats.avg_rating is None


async def test_stats_average_rounds_half_up(store, service):
    # ratings 5, 4, 4, 4 average exactly 4.25
    await service.add_session(store, 2, {"topic": "Kickoff", "rating": 4})

    stats = await service.get_stats(store)

    assert stats.total_sessions == 4
    assert stats.avg_rating == 4.3
