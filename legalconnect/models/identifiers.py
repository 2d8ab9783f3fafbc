"""
Participant identifier type.

Seeker and lawyer ids historically arrived as numbers or strings. Every
boundary converts them to one normalized string form so equality checks
are never ambiguous.
"""

from typing import Annotated, Any

from pydantic import BeforeValidator


def normalize_participant_id(value: Any) -> str:
    """Convert an int/str identifier to its canonical string form."""
    if value is None or isinstance(value, bool):
        raise ValueError("participant id is required")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if not isinstance(value, (str, int, float)):
        raise ValueError(f"unsupported participant id type: {type(value).__name__}")
    normalized = str(value).strip()
    if not normalized:
        raise ValueError("participant id must not be empty")
    if len(normalized) > 255:
        raise ValueError("participant id is too long")
    return normalized


def same_participant(left: Any, right: Any) -> bool:
    """Compare two identifiers after normalization."""
    try:
        return normalize_participant_id(left) == normalize_participant_id(right)
    except ValueError:
        return False


ParticipantId = Annotated[str, BeforeValidator(normalize_participant_id)]
