"""
Lawyer profile repository interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from legalconnect.models.enums import LawyerStatus
from legalconnect.models.lawyer import LawyerProfile, LawyerProfileUpdate


class ILawyerProfileRepository(ABC):
    """Abstract interface for lawyer profile persistence."""

    @abstractmethod
    async def get(self, lawyer_id: str) -> Optional[LawyerProfile]:
        """Get a profile by lawyer identity."""
        pass

    @abstractmethod
    async def upsert(self, lawyer_id: str, data: LawyerProfileUpdate) -> LawyerProfile:
        """Create or replace a profile. Status goes back to pending."""
        pass

    @abstractmethod
    async def list(self, status: Optional[LawyerStatus] = None) -> list[LawyerProfile]:
        """List profiles, optionally filtered by status, ordered by name."""
        pass

    @abstractmethod
    async def set_status(self, lawyer_id: str, status: LawyerStatus) -> LawyerProfile:
        """Update verification status. Raises NotFoundError if missing."""
        pass
