"""
User repository - data access for User entity.
"""
from typing import Any, Dict, List, Optional

from placement_portal.core.exceptions import EmailAlreadyExistsException, UserNotFoundException
from placement_portal.core.store import PortalStore
from placement_portal.models.user import User, UserRole
from placement_portal.repositories.base import BaseRepository, coerce_id


def _email_taken(
    rows: List[Dict[str, Any]],
    email: Optional[str],
    skip_id: Optional[int] = None,
) -> bool:
    """Case-insensitive match against every stored email except skip_id's."""
    if not email:
        return False
    wanted = email.strip().lower()
    return any(
        (row.get("email") or "").strip().lower() == wanted
        for row in rows
        if skip_id is None or coerce_id(row.get("id")) != skip_id
    )


class UserRepository(BaseRepository[User]):
    def __init__(self):
        super().__init__(User, "users", UserNotFoundException)

    def _check_create(self, rows: List[Dict[str, Any]], data: Dict[str, Any]) -> None:
        # Under the collection lock so two registrations can't claim one email
        if _email_taken(rows, data.get("email")):
            raise EmailAlreadyExistsException()

    def _check_update(
        self, rows: List[Dict[str, Any]], index: int, changes: Dict[str, Any]
    ) -> None:
        own_id = coerce_id(rows[index].get("id"))
        if _email_taken(rows, changes.get("email"), skip_id=own_id):
            raise EmailAlreadyExistsException()

    async def find_by_role(
        self,
        store: PortalStore,
        role: UserRole,
        *,
        department: Optional[str] = None,
    ) -> List[User]:
        return await self.find(store, role=role, department=department)
