"""
Connection request models.

A seeker asks a lawyer to start a conversation; the lawyer accepts or rejects.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from legalconnect.models.enums import RequestStatus
from legalconnect.models.identifiers import ParticipantId


class ConnectionRequestCreate(BaseModel):
    """Schema for creating a connection request."""

    lawyer_id: ParticipantId
    subject: str = Field(..., min_length=1, max_length=500, description="What the seeker needs help with")
    seeker_id: Optional[ParticipantId] = Field(
        None, description="Defaults to the authenticated caller"
    )


class ConnectionRequest(BaseModel):
    """Complete connection request model."""

    id: UUID
    seeker_id: ParticipantId
    lawyer_id: ParticipantId
    subject: str
    status: RequestStatus = RequestStatus.PENDING
    chat_room_id: Optional[UUID] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ConnectionRequestCreated(BaseModel):
    """Response for a newly created request."""

    request_id: UUID


class RoomCreated(BaseModel):
    """Response for an accepted request."""

    room_id: UUID
