"""
Request/response models for the external legal assistant (NLP) backend.
"""

from typing import Optional

from pydantic import BaseModel, Field


class AskRequest(BaseModel):
    """Free-form legal question."""

    question: str = Field(..., min_length=1, max_length=4000)
    lang: str = Field("english", max_length=50)


class KnowYourRightsRequest(BaseModel):
    """Question scoped to a rights category."""

    question: str = Field(..., min_length=1, max_length=4000)
    category: Optional[str] = Field(None, max_length=200)


class LegalAnswer(BaseModel):
    """Answer returned by the assistant."""

    answer: str
    uncertain: bool = False


class DocumentSummary(BaseModel):
    """Summary of an uploaded legal document."""

    summary: str
    lang: str
    precision: Optional[float] = None
    ratio: Optional[float] = None
