"""
Schémas Pydantic pour les parrainages.
"""

from datetime import datetime
from typing import Optional

from pydantic import field_validator

from app.schemas.base import CamelModel, positive


class SponsorshipCreate(CamelModel):
    sponsor_id: int
    student_id: int
    amount: int
    application_id: Optional[int] = None  # si fourni, la demande passe à "approved"
    mentorship_offered: bool = False

    @field_validator("amount")
    @classmethod
    def amount_positive(cls, v: int) -> int:
        return positive(v)


class SponsorshipResponse(CamelModel):
    id: int
    sponsor_id: int
    student_id: int
    application_id: Optional[int]
    amount: int
    status: str
    payment_id: Optional[str]
    created_at: Optional[datetime]
    mentorship_offered: bool
