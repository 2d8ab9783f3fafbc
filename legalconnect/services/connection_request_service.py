"""
Connection request service.

Mediates the request/response handshake that has to happen before a seeker
and a lawyer can talk. Acceptance lives in ChatRoomService because it creates
the room.
"""

from uuid import UUID

from legalconnect.core.exceptions import InvalidTransitionError, NotFoundError, ValidationError
from legalconnect.core.logger import logger
from legalconnect.interfaces.auth_provider import User
from legalconnect.interfaces.connection_request_repository import IConnectionRequestRepository
from legalconnect.models.connection_request import ConnectionRequest
from legalconnect.models.enums import RequestStatus, UserRole
from legalconnect.services.participant_permissions import (
    ensure_addressed_lawyer,
    ensure_request_party,
    ensure_role,
    ensure_self,
    to_participant_id,
)


class ConnectionRequestService:
    """Create, list and reject connection requests."""

    def __init__(self, request_repo: IConnectionRequestRepository):
        self.request_repo = request_repo

    async def create_request(
        self,
        caller: User,
        seeker_id: str,
        lawyer_id: str,
        subject: str,
    ) -> UUID:
        """
        Create a pending request from a seeker to a lawyer.

        Args:
            caller: Authenticated user (must be the seeker)
            seeker_id: Seeker identity
            lawyer_id: Lawyer identity
            subject: What the seeker needs help with

        Returns:
            New request ID

        Raises:
            DuplicateRequestError: An active request already exists for the pair
            ForbiddenError: Caller is not the seeker or not a user
        """
        seeker_id = to_participant_id(seeker_id)
        lawyer_id = to_participant_id(lawyer_id)
        ensure_role(caller, UserRole.USER)
        ensure_self(caller, seeker_id)
        if seeker_id == lawyer_id:
            raise ValidationError("Cannot send a connection request to yourself")
        subject = subject.strip()
        if not subject:
            raise ValidationError("Subject must not be empty")

        request = await self.request_repo.create(seeker_id, lawyer_id, subject)
        logger.info(
            f"Connection request {request.id} created: seeker={seeker_id} lawyer={lawyer_id}"
        )
        return request.id

    async def get_request(self, caller: User, request_id: UUID) -> ConnectionRequest:
        request = await self.request_repo.get(request_id)
        if not request:
            raise NotFoundError(f"Connection request {request_id} not found")
        ensure_request_party(caller, request)
        return request

    async def list_requests_for_seeker(self, caller: User, seeker_id: str) -> list[ConnectionRequest]:
        """All requests sent by the seeker, newest first."""
        seeker_id = to_participant_id(seeker_id)
        ensure_self(caller, seeker_id)
        return await self.request_repo.list_for_seeker(seeker_id)

    async def list_requests_for_lawyer(self, caller: User, lawyer_id: str) -> list[ConnectionRequest]:
        """All requests addressed to the lawyer, newest first."""
        lawyer_id = to_participant_id(lawyer_id)
        ensure_self(caller, lawyer_id)
        return await self.request_repo.list_for_lawyer(lawyer_id)

    async def set_status(
        self,
        caller: User,
        request_id: UUID,
        status: RequestStatus,
    ) -> ConnectionRequest:
        """
        Apply a bare status change. Only rejection is allowed here.

        Raises:
            NotFoundError: Request does not exist
            InvalidTransitionError: Status is not rejected, or request is not pending
            ForbiddenError: Caller is not the addressed lawyer
        """
        if status != RequestStatus.REJECTED:
            raise InvalidTransitionError(
                f"Status {status.value} cannot be set directly; accept the request instead"
            )
        request = await self.request_repo.get(request_id)
        if not request:
            raise NotFoundError(f"Connection request {request_id} not found")
        ensure_addressed_lawyer(caller, request)
        return await self.request_repo.set_status(request_id, status)

    async def reject(self, caller: User, request_id: UUID) -> ConnectionRequest:
        return await self.set_status(caller, request_id, RequestStatus.REJECTED)
