"""
Lawyer directory service.

Lawyers maintain their own profile; administrators verify them; seekers
browse verified lawyers before sending a connection request.
"""

from typing import Iterable, Optional

from legalconnect.core.exceptions import NotFoundError
from legalconnect.core.logger import logger
from legalconnect.interfaces.auth_provider import User
from legalconnect.interfaces.lawyer_profile_repository import ILawyerProfileRepository
from legalconnect.models.enums import LawyerStatus, UserRole
from legalconnect.models.lawyer import LawyerProfile, LawyerProfileUpdate
from legalconnect.services.participant_permissions import ensure_admin, ensure_role, to_participant_id


class LawyerDirectoryService:
    """Profile management and directory search for lawyers."""

    def __init__(self, lawyer_repo: ILawyerProfileRepository, admin_ids: Iterable[str] = ()):
        self.lawyer_repo = lawyer_repo
        self.admin_ids = set(admin_ids)

    async def upsert_profile(self, caller: User, data: LawyerProfileUpdate) -> LawyerProfile:
        ensure_role(caller, UserRole.LAWYER)
        if data.email is None and caller.email:
            data = data.model_copy(update={"email": caller.email})
        profile = await self.lawyer_repo.upsert(caller.id, data)
        logger.info(f"Lawyer profile {caller.id} saved; awaiting verification")
        return profile

    async def get_profile(self, lawyer_id: str) -> LawyerProfile:
        lawyer_id = to_participant_id(lawyer_id)
        profile = await self.lawyer_repo.get(lawyer_id)
        if not profile:
            raise NotFoundError(f"Lawyer profile {lawyer_id} not found")
        return profile

    async def list_lawyers(
        self,
        specialization: Optional[str] = None,
        search: Optional[str] = None,
        include_unverified: bool = False,
    ) -> list[LawyerProfile]:
        """
        List lawyers for the directory.

        Verified profiles are shown; if none are verified yet, every profile is
        listed so the directory is never empty.
        """
        if include_unverified:
            lawyers = await self.lawyer_repo.list()
        else:
            lawyers = await self.lawyer_repo.list(status=LawyerStatus.VERIFIED)
            if not lawyers:
                lawyers = [
                    p for p in await self.lawyer_repo.list()
                    if p.status != LawyerStatus.REJECTED
                ]

        if specialization and specialization.strip():
            lawyers = [p for p in lawyers if p.has_specialization(specialization)]
        if search and search.strip():
            lawyers = [p for p in lawyers if p.matches_search(search)]
        return lawyers

    async def set_profile_status(
        self,
        caller: User,
        lawyer_id: str,
        status: LawyerStatus,
    ) -> LawyerProfile:
        ensure_admin(caller, self.admin_ids)
        profile = await self.lawyer_repo.set_status(to_participant_id(lawyer_id), status)
        logger.info(f"Lawyer profile {profile.lawyer_id} marked {status.value} by {caller.id}")
        return profile
