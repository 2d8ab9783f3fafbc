"""
Authentication provider interface.

Resolves bearer tokens into a caller identity and declared role.
Implementations: mock (local development), JWT.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel

from legalconnect.models.enums import UserRole
from legalconnect.models.identifiers import ParticipantId


class User(BaseModel):
    """Authenticated caller."""

    id: ParticipantId
    role: UserRole = UserRole.USER
    email: Optional[str] = None
    display_name: Optional[str] = None

    @property
    def is_lawyer(self) -> bool:
        return self.role == UserRole.LAWYER


class IAuthProvider(ABC):
    """Abstract interface for identity providers."""

    @abstractmethod
    async def verify_token(self, token: str) -> User:
        """
        Verify a bearer token.

        Args:
            token: Raw token from the Authorization header

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: If the token is invalid or expired
        """
        pass
