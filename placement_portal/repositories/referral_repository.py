"""
Referral repository - data access for alumni Referral entity.
"""
import re
from typing import Any, Dict

from placement_portal.core.exceptions import ReferralClosedException, ReferralNotFoundException
from placement_portal.core.store import PortalStore
from placement_portal.models.referral import Referral, ReferralStatus
from placement_portal.repositories.base import BaseRepository


def build_referral_code(company: str, referral_id: int) -> str:
    """REF-<first 4 letters of company>-<zero-padded id>, e.g. REF-GOOG-0007."""
    prefix = re.sub(r"[^A-Za-z0-9]", "", company or "").upper()[:4] or "ALUM"
    return f"REF-{prefix}-{referral_id:04d}"


class ReferralRepository(BaseRepository[Referral]):
    def __init__(self):
        super().__init__(Referral, "referrals", ReferralNotFoundException)

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        if not data.get("referral_code"):
            data["referral_code"] = build_referral_code(data.get("company", ""), data["id"])
        return data

    async def increment_applications(
        self,
        store: PortalStore,
        referral_id: Any,
    ) -> Referral:
        """
        Count one more application made through this referral.

        Raises:
            ReferralNotFoundException: If the referral doesn't exist.
            ReferralClosedException: If the referral is closed.
        """

        def bump(referral: Referral) -> Referral:
            if referral.status != ReferralStatus.ACTIVE:
                raise ReferralClosedException()
            return referral.model_copy(
                update={"application_count": referral.application_count + 1}
            )

        return await self.apply(store, referral_id, bump)
