"""
Schémas Pydantic pour les demandes de financement.
Les champs status et createdAt éventuellement envoyés à la création sont ignorés.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import field_validator

from app.schemas.base import CamelModel, not_blank, positive

VALID_APPLICATION_STATUSES = {"pending", "approved", "rejected"}


class FundingApplicationCreate(CamelModel):
    student_id: int
    amount: int
    purpose: str
    documents: dict[str, Any] = {}

    @field_validator("amount")
    @classmethod
    def amount_positive(cls, v: int) -> int:
        return positive(v)

    @field_validator("purpose")
    @classmethod
    def purpose_not_empty(cls, v: str) -> str:
        return not_blank(v)


class ApplicationStatusUpdate(CamelModel):
    status: str

    @field_validator("status")
    @classmethod
    def valid_status(cls, v: str) -> str:
        if v not in VALID_APPLICATION_STATUSES:
            raise ValueError(f"Statut invalide. Valeurs acceptées : {VALID_APPLICATION_STATUSES}")
        return v


class FundingApplicationResponse(CamelModel):
    id: int
    student_id: int
    amount: int
    purpose: str
    status: str
    created_at: Optional[datetime]
    documents: Optional[dict[str, Any]]
