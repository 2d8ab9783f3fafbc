"""
Lawyer profile models.

Profiles back the lawyer directory that seekers browse before sending a
connection request.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from legalconnect.models.enums import LawyerStatus
from legalconnect.models.identifiers import ParticipantId


class LawyerProfileUpdate(BaseModel):
    """Fields a lawyer can set on their own profile."""

    name: str = Field(..., min_length=1, max_length=200)
    email: Optional[str] = Field(None, max_length=255)
    phone: Optional[str] = Field(None, max_length=50)
    state: Optional[str] = Field(None, max_length=100)
    city: Optional[str] = Field(None, max_length=100)
    age: Optional[int] = Field(None, ge=18, le=120)
    gender: Optional[str] = Field(None, max_length=30)
    bar_number: Optional[str] = Field(None, max_length=100, description="Bar council enrolment number")
    degree: Optional[str] = Field(None, max_length=200)
    description: Optional[str] = Field(None, max_length=4000)
    specializations: list[str] = Field(default_factory=list, max_length=20)
    experience_years: Optional[int] = Field(None, ge=0, le=80)
    fees: Optional[float] = Field(None, ge=0)


class LawyerProfile(LawyerProfileUpdate):
    """Stored lawyer profile."""

    lawyer_id: ParticipantId
    status: LawyerStatus = LawyerStatus.PENDING
    created_at: datetime
    updated_at: datetime

    def has_specialization(self, specialization: str) -> bool:
        wanted = specialization.strip().lower()
        return any(spec.strip().lower() == wanted for spec in self.specializations)

    def matches_search(self, search: str) -> bool:
        needle = search.strip().lower()
        haystack = [self.name, self.city or "", self.state or "", self.description or ""]
        return any(needle in value.lower() for value in haystack)

    class Config:
        from_attributes = True
