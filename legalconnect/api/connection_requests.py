"""
Connection request API endpoints.

A seeker sends a request to a lawyer; the lawyer accepts (creating the chat
room) or rejects it.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from legalconnect.api.deps import CurrentUser, RequestService, RoomService
from legalconnect.api.errors import to_http_exception
from legalconnect.core.exceptions import LegalConnectError
from legalconnect.models.connection_request import (
    ConnectionRequest,
    ConnectionRequestCreate,
    ConnectionRequestCreated,
    RoomCreated,
)

router = APIRouter()


@router.post("", response_model=ConnectionRequestCreated, status_code=status.HTTP_201_CREATED)
async def create_request(
    request: ConnectionRequestCreate,
    user: CurrentUser,
    service: RequestService,
):
    """Send a connection request to a lawyer."""
    try:
        request_id = await service.create_request(
            user,
            seeker_id=request.seeker_id or user.id,
            lawyer_id=request.lawyer_id,
            subject=request.subject,
        )
    except LegalConnectError as e:
        raise to_http_exception(e)
    return ConnectionRequestCreated(request_id=request_id)


@router.get("", response_model=list[ConnectionRequest])
async def list_requests(
    user: CurrentUser,
    service: RequestService,
    seeker_id: Optional[str] = Query(None, description="Requests sent by this seeker"),
    lawyer_id: Optional[str] = Query(None, description="Requests addressed to this lawyer"),
):
    """
    List requests for one participant.

    Without a filter, the caller's own requests are listed according to role.
    """
    if seeker_id and lawyer_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filter by seeker_id or lawyer_id, not both",
        )
    try:
        if lawyer_id or (not seeker_id and user.is_lawyer):
            return await service.list_requests_for_lawyer(user, lawyer_id or user.id)
        return await service.list_requests_for_seeker(user, seeker_id or user.id)
    except LegalConnectError as e:
        raise to_http_exception(e)


@router.get("/{request_id}", response_model=ConnectionRequest)
async def get_request(
    request_id: UUID,
    user: CurrentUser,
    service: RequestService,
):
    try:
        return await service.get_request(user, request_id)
    except LegalConnectError as e:
        raise to_http_exception(e)


@router.post("/{request_id}/accept", response_model=RoomCreated)
async def accept_request(
    request_id: UUID,
    user: CurrentUser,
    service: RoomService,
):
    """
    Accept a pending request and open its chat room.

    Accepting an already accepted request returns the existing room.
    """
    try:
        room_id = await service.accept_and_create_room(user, request_id)
    except LegalConnectError as e:
        raise to_http_exception(e)
    return RoomCreated(room_id=room_id)


@router.post("/{request_id}/reject", response_model=ConnectionRequest)
async def reject_request(
    request_id: UUID,
    user: CurrentUser,
    service: RequestService,
):
    try:
        return await service.reject(user, request_id)
    except LegalConnectError as e:
        raise to_http_exception(e)
