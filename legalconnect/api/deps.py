"""
Dependency injection for API endpoints.

Repositories and providers are built once per process from settings;
services are assembled per request on top of them.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status

from legalconnect.core.config import get_settings
from legalconnect.core.exceptions import AuthenticationError
from legalconnect.interfaces.auth_provider import IAuthProvider, User
from legalconnect.interfaces.chat_room_repository import IChatRoomRepository
from legalconnect.interfaces.connection_request_repository import IConnectionRequestRepository
from legalconnect.interfaces.lawyer_profile_repository import ILawyerProfileRepository
from legalconnect.interfaces.legal_assistant_provider import ILegalAssistantProvider
from legalconnect.interfaces.storage_provider import IStorageProvider
from legalconnect.services.chat_room_service import ChatRoomService
from legalconnect.services.connection_request_service import ConnectionRequestService
from legalconnect.services.lawyer_directory_service import LawyerDirectoryService


# ===========================================
# Repository Dependencies
# ===========================================


@lru_cache()
def get_connection_request_repository() -> IConnectionRequestRepository:
    from legalconnect.infrastructure.local.connection_request_repository import (
        SqliteConnectionRequestRepository,
    )
    return SqliteConnectionRequestRepository()


@lru_cache()
def get_chat_room_repository() -> IChatRoomRepository:
    # One instance per process: it owns the per-room append locks.
    from legalconnect.infrastructure.local.chat_room_repository import SqliteChatRoomRepository
    return SqliteChatRoomRepository()


@lru_cache()
def get_lawyer_profile_repository() -> ILawyerProfileRepository:
    from legalconnect.infrastructure.local.lawyer_profile_repository import (
        SqliteLawyerProfileRepository,
    )
    return SqliteLawyerProfileRepository()


# ===========================================
# Provider Dependencies
# ===========================================


@lru_cache()
def get_storage_provider() -> IStorageProvider:
    """Get attachment storage."""
    from legalconnect.infrastructure.local.storage_provider import LocalStorageProvider
    return LocalStorageProvider(get_settings().STORAGE_BASE_PATH)


@lru_cache()
def get_legal_assistant_provider() -> ILegalAssistantProvider:
    """Get NLP backend client."""
    settings = get_settings()
    from legalconnect.infrastructure.local.legal_assistant_provider import (
        HttpLegalAssistantProvider,
    )
    return HttpLegalAssistantProvider(settings.NLP_BASE_URL, timeout=settings.NLP_TIMEOUT_SECONDS)


@lru_cache()
def get_auth_provider() -> IAuthProvider:
    """Get auth provider instance."""
    settings = get_settings()
    if settings.AUTH_PROVIDER == "jwt":
        from legalconnect.infrastructure.auth.jwt_auth import JwtAuthProvider

        return JwtAuthProvider(settings)

    from legalconnect.infrastructure.local.mock_auth import MockAuthProvider
    return MockAuthProvider()


# ===========================================
# Service Dependencies
# ===========================================


def get_connection_request_service(
    request_repo: IConnectionRequestRepository = Depends(get_connection_request_repository),
) -> ConnectionRequestService:
    return ConnectionRequestService(request_repo)


def get_chat_room_service(
    request_repo: IConnectionRequestRepository = Depends(get_connection_request_repository),
    room_repo: IChatRoomRepository = Depends(get_chat_room_repository),
    storage: IStorageProvider = Depends(get_storage_provider),
) -> ChatRoomService:
    settings = get_settings()
    return ChatRoomService(
        request_repo,
        room_repo,
        storage,
        max_attachment_bytes=settings.MAX_ATTACHMENT_BYTES,
        upstream_timeout=settings.UPSTREAM_TIMEOUT_SECONDS,
    )


def get_lawyer_directory_service(
    lawyer_repo: ILawyerProfileRepository = Depends(get_lawyer_profile_repository),
) -> LawyerDirectoryService:
    return LawyerDirectoryService(lawyer_repo, admin_ids=get_settings().admin_user_ids)


# ===========================================
# User Authentication
# ===========================================


async def get_current_user(
    authorization: Annotated[str | None, Header()] = None,
    auth_provider: IAuthProvider = Depends(get_auth_provider),
) -> User:
    """
    Get current authenticated user.

    In mock mode the bearer token names the user; in jwt mode it is verified.
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
        )

    # Extract token from "Bearer <token>"
    try:
        scheme, token = authorization.split()
        if scheme.lower() != "bearer":
            raise ValueError("Invalid scheme")
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid authorization header format",
        )

    try:
        return await auth_provider.verify_token(token)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=e.message,
        )


# ===========================================
# Type Aliases for Dependency Injection
# ===========================================

LegalAssistant = Annotated[ILegalAssistantProvider, Depends(get_legal_assistant_provider)]
RequestService = Annotated[ConnectionRequestService, Depends(get_connection_request_service)]
RoomService = Annotated[ChatRoomService, Depends(get_chat_room_service)]
DirectoryService = Annotated[LawyerDirectoryService, Depends(get_lawyer_directory_service)]
CurrentUser = Annotated[User, Depends(get_current_user)]
