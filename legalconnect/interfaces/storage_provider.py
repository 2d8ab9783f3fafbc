"""
Object storage provider interface.

Used for chat attachments only.
Implementations: local file system
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional


class IStorageProvider(ABC):
    """Abstract interface for object storage."""

    @abstractmethod
    async def upload(
        self,
        path: str,
        data: bytes,
        content_type: Optional[str] = None,
    ) -> str:
        """
        Upload bytes to storage.

        Args:
            path: Destination path relative to the storage root
            data: File content
            content_type: Optional MIME type

        Returns:
            Storage location of the uploaded object

        Raises:
            InfrastructureError: If the upload fails
        """
        pass

    @abstractmethod
    def get_public_url(self, path: str) -> str:
        """Get a retrievable URL for an object."""
        pass
