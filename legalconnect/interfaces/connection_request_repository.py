"""
Connection request repository interface.

Defines the contract for connection request persistence.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from legalconnect.models.connection_request import ConnectionRequest
from legalconnect.models.enums import RequestStatus


class IConnectionRequestRepository(ABC):
    """Abstract interface for connection request persistence."""

    @abstractmethod
    async def create(self, seeker_id: str, lawyer_id: str, subject: str) -> ConnectionRequest:
        """
        Create a pending request.

        The active-pair uniqueness check and the insert happen atomically.

        Raises:
            DuplicateRequestError: If a pending or accepted request exists for the pair
        """
        pass

    @abstractmethod
    async def get(self, request_id: UUID) -> ConnectionRequest | None:
        """Get a request by ID."""
        pass

    @abstractmethod
    async def find_active(self, seeker_id: str, lawyer_id: str) -> ConnectionRequest | None:
        """Get the pending or accepted request for a pair, if any."""
        pass

    @abstractmethod
    async def list_for_seeker(self, seeker_id: str) -> list[ConnectionRequest]:
        """List all requests sent by a seeker, newest first."""
        pass

    @abstractmethod
    async def list_for_lawyer(self, lawyer_id: str) -> list[ConnectionRequest]:
        """List all requests addressed to a lawyer, newest first."""
        pass

    @abstractmethod
    async def set_status(self, request_id: UUID, status: RequestStatus) -> ConnectionRequest:
        """
        Move a pending request to a terminal status other than accepted.

        Raises:
            NotFoundError: If the request does not exist
            InvalidTransitionError: If the request is not pending or the status is not allowed
        """
        pass
