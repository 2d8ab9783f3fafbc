"""
Lawyer directory API endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Query

from legalconnect.api.deps import CurrentUser, DirectoryService
from legalconnect.api.errors import to_http_exception
from legalconnect.core.exceptions import LegalConnectError
from legalconnect.models.enums import LawyerStatus
from legalconnect.models.lawyer import LawyerProfile, LawyerProfileUpdate

router = APIRouter()


@router.get("", response_model=list[LawyerProfile])
async def list_lawyers(
    user: CurrentUser,
    service: DirectoryService,
    specialization: Optional[str] = Query(None, description="Filter by specialization"),
    search: Optional[str] = Query(None, description="Match name, city or state"),
):
    return await service.list_lawyers(specialization=specialization, search=search)


@router.put("/me", response_model=LawyerProfile)
async def update_my_profile(
    profile: LawyerProfileUpdate,
    user: CurrentUser,
    service: DirectoryService,
):
    """Create or update the caller's profile. Changes reset verification."""
    try:
        return await service.upsert_profile(user, profile)
    except LegalConnectError as e:
        raise to_http_exception(e)


@router.get("/{lawyer_id}", response_model=LawyerProfile)
async def get_lawyer(
    lawyer_id: str,
    user: CurrentUser,
    service: DirectoryService,
):
    try:
        return await service.get_profile(lawyer_id)
    except LegalConnectError as e:
        raise to_http_exception(e)


@router.post("/{lawyer_id}/verify", response_model=LawyerProfile)
async def verify_lawyer(
    lawyer_id: str,
    user: CurrentUser,
    service: DirectoryService,
):
    try:
        return await service.set_profile_status(user, lawyer_id, LawyerStatus.VERIFIED)
    except LegalConnectError as e:
        raise to_http_exception(e)


@router.post("/{lawyer_id}/reject", response_model=LawyerProfile)
async def reject_lawyer(
    lawyer_id: str,
    user: CurrentUser,
    service: DirectoryService,
):
    try:
        return await service.set_profile_status(user, lawyer_id, LawyerStatus.REJECTED)
    except LegalConnectError as e:
        raise to_http_exception(e)
