"""
Referral service - openings posted by alumni with a referral code students
can apply through.
"""
from typing import List, Optional, Union

from placement_portal.core.exceptions import ValidationException
from placement_portal.core.latency import CREATE, READ_MANY, READ_ONE, WRITE, simulated
from placement_portal.core.logging import get_logger
from placement_portal.core.store import PortalStore
from placement_portal.models.referral import Referral, ReferralStatus
from placement_portal.models.user import UserRole
from placement_portal.repositories.referral_repository import ReferralRepository
from placement_portal.repositories.user_repository import UserRepository
from placement_portal.schemas.referral import ReferralCreate, ReferralUpdate

logger = get_logger(__name__)


class ReferralService:
    """Handles alumni referrals."""

    def __init__(self):
        self.referral_repo = ReferralRepository()
        self.user_repo = UserRepository()

    @simulated(READ_MANY)
    async def list_referrals(
        self,
        store: PortalStore,
        *,
        referred_by: Optional[int] = None,
        status: Optional[ReferralStatus] = None,
    ) -> List[Referral]:
        return await self.referral_repo.find(store, referred_by=referred_by, status=status)

    @simulated(READ_ONE)
    async def get_referral(self, store: PortalStore, referral_id) -> Optional[Referral]:
        return await self.referral_repo.get_by_id(store, referral_id)

    @simulated(CREATE)
    async def create_referral(
        self,
        store: PortalStore,
        data: Union[ReferralCreate, dict],
    ) -> Referral:
        """
        Post a referral. It opens as active with a generated referral code.

        Raises:
            ValidationException: If the poster isn't an alumni user.
        """
        payload = ReferralCreate.parse(data)
        alumnus = await self.user_repo.get_by_id(store, payload.referred_by)
        if alumnus is None or alumnus.role != UserRole.ALUMNI:
            raise ValidationException(f"User {payload.referred_by} is not an alumni user")

        referral = await self.referral_repo.create(
            store,
            **payload.model_dump(),
            application_count=0,
            status=ReferralStatus.ACTIVE,
        )
        logger.info(
            "referral_created",
            referral_id=referral.id,
            referred_by=referral.referred_by,
            code=referral.referral_code,
        )
        return referral

    @simulated(WRITE)
    async def update_referral(
        self,
        store: PortalStore,
        referral_id,
        data: Union[ReferralUpdate, dict],
    ) -> Referral:
        """
        Raises:
            ReferralNotFoundException: If the referral doesn't exist.
        """
        changes = ReferralUpdate.parse(data).changes()
        return await self.referral_repo.update(store, referral_id, **changes)

    @simulated(WRITE)
    async def record_application(self, store: PortalStore, referral_id) -> Referral:
        """
        A student applied through this referral.

        Raises:
            ReferralNotFoundException: If the referral doesn't exist.
            ReferralClosedException: If the referral is closed.
        """
        referral = await self.referral_repo.increment_applications(store, referral_id)
        logger.info(
            "referral_application_recorded",
            referral_id=referral.id,
            application_count=referral.application_count,
        )
        return referral
