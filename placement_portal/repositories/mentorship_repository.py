"""
Mentorship repository - data access for Mentorship entity and its sessions.
"""
from typing import Any, Dict

from placement_portal.core.exceptions import MentorshipNotFoundException
from placement_portal.core.store import PortalStore
from placement_portal.models.mentorship import Mentorship, Session
from placement_portal.repositories.base import BaseRepository


class MentorshipRepository(BaseRepository[Mentorship]):
    def __init__(self):
        super().__init__(Mentorship, "mentorships", MentorshipNotFoundException)

    async def add_session(
        self,
        store: PortalStore,
        mentorship_id: Any,
        session_data: Dict[str, Any],
    ) -> Mentorship:
        """
        Append a session with id = max(session ids in this mentorship) + 1.

        Raises:
            MentorshipNotFoundException: If the mentorship doesn't exist.
        """

        def append(mentorship: Mentorship) -> Mentorship:
            next_id = max((s.id for s in mentorship.sessions), default=0) + 1
            data = {k: v for k, v in session_data.items() if v is not None}
            session = Session.model_validate(dict(data, id=next_id))
            return mentorship.model_copy(
                update={"sessions": [*mentorship.sessions, session]}
            )

        return await self.apply(store, mentorship_id, append)
