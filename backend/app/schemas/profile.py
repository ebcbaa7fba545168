"""
Schémas Pydantic pour les profils étudiants et sponsors.
"""

from typing import Any, List, Optional

from pydantic import field_validator

from app.schemas.base import CamelModel

VALID_SPONSOR_TYPES = {"individual", "corporate", "ngo"}


def _non_negative(v: Optional[int]) -> Optional[int]:
    if v is not None and v < 0:
        raise ValueError("Le besoin financier ne peut pas être négatif.")
    return v


def _valid_sponsor_type(v: Optional[str]) -> Optional[str]:
    if v is not None and v not in VALID_SPONSOR_TYPES:
        raise ValueError(f"Type de sponsor invalide. Valeurs acceptées : {VALID_SPONSOR_TYPES}")
    return v


# ============================================================
# Profils étudiants
# ============================================================

class StudentProfileCreate(CamelModel):
    user_id: int
    age: Optional[int] = None
    education_level: Optional[str] = None
    course: Optional[str] = None
    institution_name: Optional[str] = None
    financial_need: Optional[int] = None
    skills: Optional[List[str]] = None
    bio: Optional[str] = None
    documents: dict[str, Any] = {}

    @field_validator("financial_need")
    @classmethod
    def need_not_negative(cls, v: Optional[int]) -> Optional[int]:
        return _non_negative(v)


class StudentProfileUpdate(CamelModel):
    """Mise à jour partielle : seuls les champs fournis sont remplacés."""
    age: Optional[int] = None
    education_level: Optional[str] = None
    course: Optional[str] = None
    institution_name: Optional[str] = None
    financial_need: Optional[int] = None
    skills: Optional[List[str]] = None
    bio: Optional[str] = None
    documents: Optional[dict[str, Any]] = None

    @field_validator("financial_need")
    @classmethod
    def need_not_negative(cls, v: Optional[int]) -> Optional[int]:
        return _non_negative(v)


class StudentProfileResponse(CamelModel):
    id: int
    user_id: int
    age: Optional[int]
    education_level: Optional[str]
    course: Optional[str]
    institution_name: Optional[str]
    financial_need: Optional[int]
    skills: Optional[List[str]]
    bio: Optional[str]
    documents: Optional[dict[str, Any]]


# ============================================================
# Profils sponsors
# ============================================================

class SponsorProfileCreate(CamelModel):
    user_id: int
    type: Optional[str] = None
    organization: Optional[str] = None
    website: Optional[str] = None
    focus_areas: Optional[List[str]] = None
    bio: Optional[str] = None

    @field_validator("type")
    @classmethod
    def valid_type(cls, v: Optional[str]) -> Optional[str]:
        return _valid_sponsor_type(v)


class SponsorProfileUpdate(CamelModel):
    type: Optional[str] = None
    organization: Optional[str] = None
    website: Optional[str] = None
    focus_areas: Optional[List[str]] = None
    bio: Optional[str] = None

    @field_validator("type")
    @classmethod
    def valid_type(cls, v: Optional[str]) -> Optional[str]:
        return _valid_sponsor_type(v)


class SponsorProfileResponse(CamelModel):
    id: int
    user_id: int
    type: Optional[str]
    organization: Optional[str]
    website: Optional[str]
    focus_areas: Optional[List[str]]
    bio: Optional[str]
