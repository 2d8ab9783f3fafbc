"""
Chat room repository interface.

Defines the contract for chat rooms and their append-only message logs.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from legalconnect.models.chat_room import (
    Attachment,
    ChatMessage,
    ChatRoom,
    ChatRoomBase,
    ChatRoomSummary,
)


class IChatRoomRepository(ABC):
    """Abstract interface for chat room persistence."""

    @abstractmethod
    async def create_from_request(self, request_id: UUID) -> UUID:
        """
        Accept a pending request and materialize its chat room.

        Room creation and the request update commit in one transaction.
        Calling this on an already accepted request returns the existing room ID.

        Args:
            request_id: Connection request ID

        Returns:
            Chat room ID

        Raises:
            NotFoundError: If the request does not exist
            InvalidTransitionError: If the request was rejected
        """
        pass

    @abstractmethod
    async def get(self, room_id: UUID) -> Optional[ChatRoom]:
        """Get a room with its messages in insertion order."""
        pass

    @abstractmethod
    async def get_info(self, room_id: UUID) -> Optional[ChatRoomBase]:
        """Get a room's participants and metadata without loading messages."""
        pass

    @abstractmethod
    async def list_for_seeker(self, seeker_id: str) -> list[ChatRoomSummary]:
        """List a seeker's rooms, most recent activity first."""
        pass

    @abstractmethod
    async def list_for_lawyer(self, lawyer_id: str) -> list[ChatRoomSummary]:
        """List a lawyer's rooms, most recent activity first."""
        pass

    @abstractmethod
    async def append_message(
        self,
        room_id: UUID,
        sender_id: str,
        text: str,
        attachment: Optional[Attachment] = None,
    ) -> ChatMessage:
        """
        Append a message and bump the room's last-message time.

        Appends to the same room are serialized; none is ever lost.

        Raises:
            NotFoundError: If the room does not exist
        """
        pass
