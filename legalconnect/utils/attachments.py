"""
Chat attachment helpers.
"""

import secrets
import time
from pathlib import PurePosixPath
from typing import Optional

from legalconnect.models.enums import AttachmentKind

WORD_MIME_TYPES = frozenset(
    {
        "application/msword",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    }
)


def classify_attachment(mime_type: Optional[str]) -> AttachmentKind:
    """
    Classify a MIME type into a rendering category.

    Args:
        mime_type: MIME type such as "image/png" or "application/pdf; q=1"

    Returns:
        AttachmentKind: image / pdf / document, or file for anything else
    """
    if not mime_type:
        return AttachmentKind.FILE
    base = mime_type.split(";", 1)[0].strip().lower()
    if base.startswith("image/"):
        return AttachmentKind.IMAGE
    if base == "application/pdf":
        return AttachmentKind.PDF
    if base in WORD_MIME_TYPES:
        return AttachmentKind.DOCUMENT
    return AttachmentKind.FILE


def generate_attachment_path(user_id: str, filename: str) -> str:
    """Build a unique storage path: chat-files/<user>/<millis>-<random>.<ext>."""
    millis = int(time.time() * 1000)
    suffix = PurePosixPath(filename).suffix.lower()
    token = secrets.token_hex(3)
    safe_user = user_id.replace("/", "_")
    return f"chat-files/{safe_user}/{millis}-{token}{suffix}"
