"""
Chat room API endpoints.

Rooms exist once a lawyer accepts a connection request. Messages carry text,
an attachment, or both.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, File, HTTPException, Query, UploadFile, status

from legalconnect.api.deps import CurrentUser, RoomService
from legalconnect.api.errors import to_http_exception
from legalconnect.core.exceptions import LegalConnectError
from legalconnect.models.chat_room import (
    Attachment,
    ChatMessageCreate,
    ChatRoom,
    ChatRoomSummary,
    SendMessageResult,
)

router = APIRouter()


@router.get("", response_model=list[ChatRoomSummary])
async def list_rooms(
    user: CurrentUser,
    service: RoomService,
    seeker_id: Optional[str] = Query(None),
    lawyer_id: Optional[str] = Query(None),
):
    """List rooms for one participant, most recently active first."""
    if seeker_id and lawyer_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filter by seeker_id or lawyer_id, not both",
        )
    try:
        if lawyer_id or (not seeker_id and user.is_lawyer):
            return await service.list_rooms_for_lawyer(user, lawyer_id or user.id)
        return await service.list_rooms_for_seeker(user, seeker_id or user.id)
    except LegalConnectError as e:
        raise to_http_exception(e)


@router.get("/{room_id}", response_model=ChatRoom)
async def get_room(
    room_id: UUID,
    user: CurrentUser,
    service: RoomService,
):
    """Get a room with its full message history in send order."""
    try:
        return await service.get_room(user, room_id)
    except LegalConnectError as e:
        raise to_http_exception(e)


@router.post("/{room_id}/messages", response_model=SendMessageResult)
async def send_message(
    room_id: UUID,
    message: ChatMessageCreate,
    user: CurrentUser,
    service: RoomService,
):
    try:
        await service.send_message(
            user,
            room_id,
            sender_id=message.sender_id or user.id,
            text=message.text,
            attachment=message.attachment,
        )
    except LegalConnectError as e:
        raise to_http_exception(e)
    return SendMessageResult(success=True)


@router.post(
    "/{room_id}/attachments",
    response_model=Attachment,
    status_code=status.HTTP_201_CREATED,
)
async def upload_attachment(
    room_id: UUID,
    user: CurrentUser,
    service: RoomService,
    file: UploadFile = File(...),
):
    """
    Upload a file for a room.

    The returned attachment is then sent as part of a message.
    """
    data = await file.read()
    try:
        return await service.upload_attachment(
            user,
            room_id,
            filename=file.filename or "file",
            content_type=file.content_type,
            data=data,
        )
    except LegalConnectError as e:
        raise to_http_exception(e)
