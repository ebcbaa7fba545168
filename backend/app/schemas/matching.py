"""
Schémas de sortie du classement étudiants ↔ sponsors.
Seuls id et displayName de l'utilisateur sont exposés (jamais le mot de passe).
"""

from typing import Optional

from app.schemas.base import CamelModel
from app.schemas.funding_application import FundingApplicationResponse
from app.schemas.profile import StudentProfileResponse


class StudentMatch(CamelModel):
    id: int  # id de l'utilisateur
    display_name: str
    profile: StudentProfileResponse
    match_score: float  # valeur d'affichage, n'intervient pas dans le tri


class SponsorStudentMatch(StudentMatch):
    application: Optional[FundingApplicationResponse] = None
    has_pending_application: bool = False
