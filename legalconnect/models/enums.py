"""
Enum definitions for the application.

These enums are used across models and provide type-safe status values.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role declared by the identity provider."""

    USER = "user"  # seeker
    LAWYER = "lawyer"


class RequestStatus(str, Enum):
    """
    Connection request status.

    PENDING -> ACCEPTED (creates a chat room)
    PENDING -> REJECTED
    ACCEPTED and REJECTED are terminal.
    """

    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    @property
    def is_active(self) -> bool:
        return self in (RequestStatus.PENDING, RequestStatus.ACCEPTED)


class AttachmentKind(str, Enum):
    """Rendering category of a chat attachment."""

    IMAGE = "image"
    PDF = "pdf"
    DOCUMENT = "document"
    FILE = "file"


class LawyerStatus(str, Enum):
    """Verification status of a lawyer profile."""

    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"
