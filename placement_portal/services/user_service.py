"""
User service - student, recruiter and alumni profiles.
"""
from typing import List, Optional, Union

from placement_portal.core.latency import CREATE, READ_MANY, READ_ONE, WRITE, simulated
from placement_portal.core.logging import get_logger
from placement_portal.core.store import PortalStore
from placement_portal.models.user import User, UserRole
from placement_portal.repositories.user_repository import UserRepository
from placement_portal.schemas.user import UserCreate, UserUpdate

logger = get_logger(__name__)


class UserService:
    """Handles user profile operations."""

    def __init__(self):
        self.user_repo = UserRepository()

    @simulated(READ_MANY)
    async def list_users(
        self,
        store: PortalStore,
        *,
        role: Optional[UserRole] = None,
        department: Optional[str] = None,
    ) -> List[User]:
        return await self.user_repo.find(store, role=role, department=department)

    @simulated(READ_MANY)
    async def list_alumni(
        self,
        store: PortalStore,
        *,
        department: Optional[str] = None,
    ) -> List[User]:
        """Alumni directory for the mentorship hub."""
        return await self.user_repo.find_by_role(store, UserRole.ALUMNI, department=department)

    @simulated(READ_ONE)
    async def get_user(self, store: PortalStore, user_id) -> Optional[User]:
        return await self.user_repo.get_by_id(store, user_id)

    @simulated(CREATE)
    async def create_user(
        self,
        store: PortalStore,
        data: Union[UserCreate, dict],
    ) -> User:
        """
        Raises:
            EmailAlreadyExistsException: If the email is already registered.
        """
        payload = UserCreate.parse(data)
        user = await self.user_repo.create(store, **payload.model_dump())
        logger.info("user_created", user_id=user.id, role=user.role.value)
        return user

    @simulated(WRITE)
    async def update_user(
        self,
        store: PortalStore,
        user_id,
        data: Union[UserUpdate, dict],
    ) -> User:
        """
        Update profile fields.

        Raises:
            UserNotFoundException: If user doesn't exist.
            EmailAlreadyExistsException: If the new email belongs to another user.
        """
        changes = UserUpdate.parse(data).changes()
        user = await self.user_repo.update(store, user_id, **changes)
        logger.info("user_updated", user_id=user.id, fields=sorted(changes))
        return user
