"""
Schémas Pydantic pour les micro-jobs.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import field_validator

from app.schemas.base import CamelModel, not_blank

VALID_JOB_STATUSES = {"open", "assigned", "completed"}


class MicroJobCreate(CamelModel):
    title: str
    description: str
    posted_by: int
    skills_required: List[str] = []
    compensation: int

    @field_validator("title", "description")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return not_blank(v)

    @field_validator("compensation")
    @classmethod
    def compensation_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("La rémunération doit être strictement positive.")
        return v


class JobStatusUpdate(CamelModel):
    status: str

    @field_validator("status")
    @classmethod
    def valid_status(cls, v: str) -> str:
        if v not in VALID_JOB_STATUSES:
            raise ValueError(f"Statut invalide. Valeurs acceptées : {VALID_JOB_STATUSES}")
        return v


class MicroJobResponse(CamelModel):
    id: int
    title: str
    description: str
    posted_by: int
    skills_required: Optional[List[str]]
    compensation: int
    status: str
    created_at: Optional[datetime]
