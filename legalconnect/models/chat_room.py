"""
Chat room and message models.

A room is created once per accepted connection request and holds an
append-only, insertion-ordered log of messages.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field, computed_field, model_validator

from legalconnect.models.enums import AttachmentKind
from legalconnect.models.identifiers import ParticipantId


class Attachment(BaseModel):
    """File reference embedded in a message."""

    content_type: str = Field("application/octet-stream", max_length=255, description="MIME type")
    name: str = Field(..., min_length=1, max_length=255)
    size: int = Field(0, ge=0, description="Size in bytes")
    url: str = Field(..., min_length=1, max_length=2000)
    kind: AttachmentKind = AttachmentKind.FILE

    @model_validator(mode="after")
    def derive_kind(self) -> "Attachment":
        from legalconnect.utils.attachments import classify_attachment

        # kind always follows the MIME type, whatever the client sent
        self.kind = classify_attachment(self.content_type)
        return self


class ChatMessageCreate(BaseModel):
    """Schema for sending a message."""

    sender_id: Optional[ParticipantId] = Field(
        None, description="Defaults to the authenticated caller"
    )
    text: str = Field("", max_length=10000)
    attachment: Optional[Attachment] = None


class ChatMessage(BaseModel):
    """Persisted chat message."""

    id: UUID
    room_id: UUID
    sender_id: ParticipantId
    text: str = ""
    attachment: Optional[Attachment] = None
    created_at: datetime

    @computed_field
    @property
    def has_attachment(self) -> bool:
        return self.attachment is not None

    class Config:
        from_attributes = True


class ChatRoomBase(BaseModel):
    """Fields shared by room views."""

    id: UUID
    connection_request_id: UUID
    seeker_id: ParticipantId
    lawyer_id: ParticipantId
    subject: str
    created_at: datetime
    last_message_at: datetime

    def is_participant(self, user_id: str) -> bool:
        return user_id in (self.seeker_id, self.lawyer_id)


class ChatRoom(ChatRoomBase):
    """Room with its full message log."""

    messages: list[ChatMessage] = Field(default_factory=list)

    class Config:
        from_attributes = True


class ChatRoomSummary(ChatRoomBase):
    """Room listing entry (messages not loaded)."""

    message_count: int = 0
    last_message_preview: Optional[str] = None

    class Config:
        from_attributes = True


class SendMessageResult(BaseModel):
    """Outcome of a send."""

    success: bool = True
