"""
Chat room service.

Owns the accept transition and all message traffic for an accepted pairing.
"""

import asyncio
from typing import Optional
from uuid import UUID

from legalconnect.core.exceptions import (
    EmptyMessageError,
    InfrastructureError,
    NotFoundError,
    UpstreamUnavailableError,
    ValidationError,
)
from legalconnect.core.logger import logger
from legalconnect.interfaces.auth_provider import User
from legalconnect.interfaces.chat_room_repository import IChatRoomRepository
from legalconnect.interfaces.connection_request_repository import IConnectionRequestRepository
from legalconnect.interfaces.storage_provider import IStorageProvider
from legalconnect.models.chat_room import Attachment, ChatRoom, ChatRoomBase, ChatRoomSummary
from legalconnect.services.participant_permissions import (
    ensure_addressed_lawyer,
    ensure_room_participant,
    ensure_self,
    to_participant_id,
)
from legalconnect.utils.attachments import generate_attachment_path

DEFAULT_MAX_ATTACHMENT_BYTES = 5 * 1024 * 1024


class ChatRoomService:
    """
    Service for chat rooms.

    Handles:
    - Accepting a request and creating its room atomically
    - Room lookup and listing per participant
    - Message sending (text and/or attachment)
    - Attachment upload to storage
    """

    def __init__(
        self,
        request_repo: IConnectionRequestRepository,
        room_repo: IChatRoomRepository,
        storage: Optional[IStorageProvider] = None,
        max_attachment_bytes: int = DEFAULT_MAX_ATTACHMENT_BYTES,
        upstream_timeout: float = 15.0,
    ):
        self.request_repo = request_repo
        self.room_repo = room_repo
        self.storage = storage
        self.max_attachment_bytes = max_attachment_bytes
        self.upstream_timeout = upstream_timeout

    async def accept_and_create_room(self, caller: User, request_id: UUID) -> UUID:
        """
        Accept a pending request and create its chat room.

        Calling this again for an accepted request returns the same room ID.

        Raises:
            NotFoundError: Request does not exist
            InvalidTransitionError: Request was rejected
            ForbiddenError: Caller is not the addressed lawyer
        """
        request = await self.request_repo.get(request_id)
        if not request:
            raise NotFoundError(f"Connection request {request_id} not found")
        ensure_addressed_lawyer(caller, request)
        return await self.room_repo.create_from_request(request_id)

    async def get_room(self, caller: User, room_id: UUID) -> ChatRoom:
        room = await self.room_repo.get(room_id)
        if not room:
            raise NotFoundError(f"Chat room {room_id} not found")
        ensure_room_participant(caller, room)
        return room

    async def _authorize_room(self, caller: User, room_id: UUID) -> ChatRoomBase:
        room = await self.room_repo.get_info(room_id)
        if not room:
            raise NotFoundError(f"Chat room {room_id} not found")
        ensure_room_participant(caller, room)
        return room

    async def list_rooms_for_seeker(self, caller: User, seeker_id: str) -> list[ChatRoomSummary]:
        seeker_id = to_participant_id(seeker_id)
        ensure_self(caller, seeker_id)
        return await self.room_repo.list_for_seeker(seeker_id)

    async def list_rooms_for_lawyer(self, caller: User, lawyer_id: str) -> list[ChatRoomSummary]:
        lawyer_id = to_participant_id(lawyer_id)
        ensure_self(caller, lawyer_id)
        return await self.room_repo.list_for_lawyer(lawyer_id)

    async def send_message(
        self,
        caller: User,
        room_id: UUID,
        sender_id: str,
        text: str,
        attachment: Optional[Attachment] = None,
    ) -> bool:
        """
        Append a message to a room.

        Args:
            caller: Authenticated user
            room_id: Target room
            sender_id: Must be the caller and a participant of the room
            text: Message body, may be blank when an attachment is present
            attachment: Optional file reference

        Returns:
            True once the message is persisted

        Raises:
            NotFoundError: Room does not exist
            EmptyMessageError: Blank text and no attachment
            ForbiddenError: Sender is not the caller or not a participant
        """
        sender_id = to_participant_id(sender_id)
        room = await self._authorize_room(caller, room_id)
        ensure_self(caller, sender_id)
        text = text or ""
        if not text.strip() and attachment is None:
            raise EmptyMessageError("Message must contain text or an attachment")

        await self.room_repo.append_message(room.id, sender_id, text, attachment)
        logger.info(
            f"Message appended to room {room.id} by {sender_id}"
            f"{' with ' + attachment.kind.value if attachment else ''}"
        )
        return True

    async def upload_attachment(
        self,
        caller: User,
        room_id: UUID,
        filename: str,
        content_type: Optional[str],
        data: bytes,
    ) -> Attachment:
        """
        Store a file for a room and return the attachment to send with a message.

        Raises:
            ValidationError: Empty or oversize file
            UpstreamUnavailableError: Storage failed or timed out
        """
        if self.storage is None:
            raise UpstreamUnavailableError("Attachment storage is not configured")
        room = await self._authorize_room(caller, room_id)
        if not data:
            raise ValidationError("Attachment is empty")
        if len(data) > self.max_attachment_bytes:
            limit_mb = self.max_attachment_bytes / (1024 * 1024)
            raise ValidationError(
                f"Attachment exceeds the {limit_mb:g}MB limit",
                details={"size": len(data), "limit": self.max_attachment_bytes},
            )

        path = generate_attachment_path(caller.id, filename or "file")
        try:
            await asyncio.wait_for(
                self.storage.upload(path, data, content_type),
                timeout=self.upstream_timeout,
            )
        except asyncio.TimeoutError as e:
            logger.error(f"Attachment upload timed out for room {room.id}")
            raise UpstreamUnavailableError("Attachment upload timed out") from e
        except InfrastructureError as e:
            logger.error(f"Attachment upload failed for room {room.id}: {e}")
            raise UpstreamUnavailableError(f"Attachment upload failed: {e.message}") from e

        return Attachment(
            content_type=content_type or "application/octet-stream",
            name=filename or "file",
            size=len(data),
            url=self.storage.get_public_url(path),
        )
