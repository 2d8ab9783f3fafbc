"""Pydantic models (schemas) for the application."""

from legalconnect.models.enums import (
    AttachmentKind,
    LawyerStatus,
    RequestStatus,
    UserRole,
)
from legalconnect.models.identifiers import ParticipantId, normalize_participant_id
from legalconnect.models.connection_request import (
    ConnectionRequest,
    ConnectionRequestCreate,
    ConnectionRequestCreated,
    RoomCreated,
)
from legalconnect.models.chat_room import (
    Attachment,
    ChatMessage,
    ChatMessageCreate,
    ChatRoom,
    ChatRoomSummary,
    SendMessageResult,
)
from legalconnect.models.lawyer import LawyerProfile, LawyerProfileUpdate
from legalconnect.models.assistant import (
    AskRequest,
    DocumentSummary,
    KnowYourRightsRequest,
    LegalAnswer,
)

__all__ = [
    # Enums
    "AttachmentKind",
    "LawyerStatus",
    "RequestStatus",
    "UserRole",
    # Identifiers
    "ParticipantId",
    "normalize_participant_id",
    # Connection requests
    "ConnectionRequest",
    "ConnectionRequestCreate",
    "ConnectionRequestCreated",
    "RoomCreated",
    # Chat rooms
    "Attachment",
    "ChatMessage",
    "ChatMessageCreate",
    "ChatRoom",
    "ChatRoomSummary",
    "SendMessageResult",
    # Lawyers
    "LawyerProfile",
    "LawyerProfileUpdate",
    # Assistant
    "AskRequest",
    "DocumentSummary",
    "KnowYourRightsRequest",
    "LegalAnswer",
]
