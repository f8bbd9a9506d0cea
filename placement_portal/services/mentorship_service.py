"""
Mentorship service - pairing students with alumni mentors and tracking
their sessions.
"""
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Union

from placement_portal.core.exceptions import UserNotFoundException, ValidationException
from placement_portal.core.latency import CREATE, MATCH, READ_MANY, READ_ONE, STATS, WRITE, simulated
from placement_portal.core.logging import get_logger
from placement_portal.core.store import PortalStore
from placement_portal.models.mentorship import Mentorship, MentorshipStatus
from placement_portal.models.user import User, UserRole
from placement_portal.repositories.mentorship_repository import MentorshipRepository
from placement_portal.repositories.user_repository import UserRepository
from placement_portal.schemas.mentorship import (
    MentorMatch,
    MentorshipCreate,
    MentorshipStats,
    MentorshipUpdate,
    SessionCreate,
)

logger = get_logger(__name__)

# Score = BASE + up to SKILL_WEIGHT for skill overlap + DEPARTMENT_BONUS, capped at 100
BASE_SCORE = 40
SKILL_WEIGHT = 50
DEPARTMENT_BONUS = 10


def _one_decimal(value: float) -> float:
    """Round half up to one decimal place (4.25 -> 4.3)."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class MentorshipService:
    """Handles mentorship requests, acceptance, sessions and matching."""

    def __init__(self):
        self.mentorship_repo = MentorshipRepository()
        self.user_repo = UserRepository()

    @simulated(READ_MANY)
    async def list_mentorships(
        self,
        store: PortalStore,
        *,
        mentor_id: Optional[int] = None,
        mentee_id: Optional[int] = None,
        status: Optional[MentorshipStatus] = None,
    ) -> List[Mentorship]:
        return await self.mentorship_repo.find(
            store, mentor_id=mentor_id, mentee_id=mentee_id, status=status
        )

    @simulated(READ_ONE)
    async def get_mentorship(self, store: PortalStore, mentorship_id) -> Optional[Mentorship]:
        return await self.mentorship_repo.get_by_id(store, mentorship_id)

    @simulated(CREATE)
    async def create_mentorship(
        self,
        store: PortalStore,
        data: Union[MentorshipCreate, dict],
    ) -> Mentorship:
        """
        Request a mentorship. It starts pending with no sessions.

        Raises:
            ValidationException: If the mentor isn't an alumnus or the mentee doesn't exist.
        """
        payload = MentorshipCreate.parse(data)

        mentor = await self.user_repo.get_by_id(store, payload.mentor_id)
        if mentor is None or mentor.role != UserRole.ALUMNI:
            raise ValidationException(f"Mentor {payload.mentor_id} is not an alumni user")
        if await self.user_repo.get_by_id(store, payload.mentee_id) is None:
            raise ValidationException(f"Mentee {payload.mentee_id} does not exist")

        mentorship = await self.mentorship_repo.create(
            store,
            **payload.model_dump(),
            status=MentorshipStatus.PENDING,
            sessions=[],
        )
        logger.info(
            "mentorship_created",
            mentorship_id=mentorship.id,
            mentor_id=mentorship.mentor_id,
            mentee_id=mentorship.mentee_id,
        )
        return mentorship

    @simulated(WRITE)
    async def update_mentorship(
        self,
        store: PortalStore,
        mentorship_id,
        data: Union[MentorshipUpdate, dict],
    ) -> Mentorship:
        """
        Accept, complete or edit a mentorship.

        Raises:
            MentorshipNotFoundException: If the mentorship doesn't exist.
        """
        changes = MentorshipUpdate.parse(data).changes()
        mentorship = await self.mentorship_repo.update(store, mentorship_id, **changes)
        logger.info("mentorship_updated", mentorship_id=mentorship.id, status=mentorship.status.value)
        return mentorship

    @simulated(WRITE)
    async def add_session(
        self,
        store: PortalStore,
        mentorship_id,
        data: Union[SessionCreate, dict],
    ) -> Mentorship:
        """
        Log a session; date defaults to now. Returns the whole mentorship.

        Raises:
            MentorshipNotFoundException: If the mentorship doesn't exist.
        """
        payload = SessionCreate.parse(data)
        mentorship = await self.mentorship_repo.add_session(
            store, mentorship_id, payload.model_dump()
        )
        logger.info(
            "mentorship_session_added",
            mentorship_id=mentorship.id,
            session_id=mentorship.sessions[-1].id,
        )
        return mentorship

    @simulated(MATCH)
    async def match_mentors(
        self,
        store: PortalStore,
        mentee_id,
        *,
        limit: int = 3,
    ) -> List[MentorMatch]:
        """
        Suggest alumni mentors for a student, best match first.

        Alumni already paired with the student (pending or active) are
        skipped. Ties keep alumni directory order.

        Raises:
            UserNotFoundException: If the student doesn't exist.
        """
        mentee = await self.user_repo.get_by_id(store, mentee_id)
        if mentee is None:
            raise UserNotFoundException()

        paired = {
            m.mentor_id
            for m in await self.mentorship_repo.find(store, mentee_id=mentee.id)
            if m.status != MentorshipStatus.COMPLETED
        }
        alumni = [
            a for a in await self.user_repo.find_by_role(store, UserRole.ALUMNI)
            if a.id not in paired and a.id != mentee.id
        ]

        matches = [self._score(mentee, mentor) for mentor in alumni]
        matches.sort(key=lambda m: m.score, reverse=True)
        return matches[: max(limit, 0)]

    @simulated(STATS)
    async def get_stats(
        self,
        store: PortalStore,
        *,
        mentor_id: Optional[int] = None,
    ) -> MentorshipStats:
        """Counts for the alumni dashboard, optionally for one mentor."""
        mentorships = await self.mentorship_repo.find(store, mentor_id=mentor_id)
        sessions = [s for m in mentorships for s in m.sessions]
        ratings = [s.rating for s in sessions if s.rating]

        return MentorshipStats(
            active_mentorships=sum(1 for m in mentorships if m.status == MentorshipStatus.ACTIVE),
            pending_mentorships=sum(1 for m in mentorships if m.status == MentorshipStatus.PENDING),
            total_sessions=len(sessions),
            avg_rating=_one_decimal(sum(ratings) / len(ratings)) if ratings else None,
        )

    def _score(self, mentee: User, mentor: User) -> MentorMatch:
        """Skill overlap (case-insensitive) plus a same-department bonus."""
        mentee_skills = {s.lower(): s for s in mentee.profile.skills}
        mentor_skills = {s.lower() for s in [*mentor.expertise, *mentor.profile.skills]}

        shared = [mentee_skills[s] for s in mentee_skills if s in mentor_skills]
        overlap = len(shared) / len(mentee_skills) if mentee_skills else 0.0

        score = BASE_SCORE + round(SKILL_WEIGHT * overlap)
        reasons = [f"Both interested in {skill}" for skill in shared[:3]]

        if mentee.department and mentee.department == mentor.department:
            score += DEPARTMENT_BONUS
            reasons.append("Same department")
        if mentor.company:
            reasons.append(f"Works at {mentor.company}")

        return MentorMatch(
            mentor_id=mentor.id,
            name=mentor.name,
            score=min(score, 100),
            reasons=reasons,
        )
