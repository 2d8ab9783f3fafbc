from __future__ import annotations

from typing import Iterable

from legalconnect.core.exceptions import ForbiddenError, ValidationError
from legalconnect.interfaces.auth_provider import User
from legalconnect.models.chat_room import ChatRoomBase
from legalconnect.models.connection_request import ConnectionRequest
from legalconnect.models.enums import UserRole
from legalconnect.models.identifiers import normalize_participant_id, same_participant


def ensure_role(user: User, role: UserRole) -> User:
    if user.role != role:
        raise ForbiddenError(f"Only a {role.value} can perform this action")
    return user


def ensure_self(user: User, participant_id: str) -> User:
    if not same_participant(user.id, participant_id):
        raise ForbiddenError("You can only act on your own behalf")
    return user


def ensure_addressed_lawyer(user: User, request: ConnectionRequest) -> User:
    if not same_participant(user.id, request.lawyer_id):
        raise ForbiddenError("Only the addressed lawyer can respond to this request")
    return user


def ensure_request_party(user: User, request: ConnectionRequest) -> User:
    if not (same_participant(user.id, request.seeker_id) or same_participant(user.id, request.lawyer_id)):
        raise ForbiddenError("Not a party to this connection request")
    return user


def ensure_room_participant(user: User, room: ChatRoomBase) -> User:
    if not room.is_participant(user.id):
        raise ForbiddenError("Not a participant of this chat room")
    return user


def ensure_admin(user: User, admin_ids: Iterable[str]) -> User:
    if user.id not in set(admin_ids):
        raise ForbiddenError("Administrator access required")
    return user


def to_participant_id(value: object) -> str:
    """Normalize an incoming identifier or fail with a validation error."""
    try:
        return normalize_participant_id(value)
    except ValueError as e:
        raise ValidationError(str(e)) from e
