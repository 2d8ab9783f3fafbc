"""Abstract interfaces for infrastructure abstraction."""

from legalconnect.interfaces.auth_provider import IAuthProvider
from legalconnect.interfaces.chat_room_repository import IChatRoomRepository
from legalconnect.interfaces.connection_request_repository import IConnectionRequestRepository
from legalconnect.interfaces.lawyer_profile_repository import ILawyerProfileRepository
from legalconnect.interfaces.legal_assistant_provider import ILegalAssistantProvider
from legalconnect.interfaces.storage_provider import IStorageProvider

__all__ = [
    "IAuthProvider",
    "IChatRoomRepository",
    "IConnectionRequestRepository",
    "ILawyerProfileRepository",
    "ILegalAssistantProvider",
    "IStorageProvider",
]
