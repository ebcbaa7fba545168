"""
Dépôt d'enregistrements : création, lecture et mise à jour des six types d'entités.

Pas de suppression. Les identifiants sont des entiers croissants par type,
jamais réutilisés. Une mise à jour est une fusion superficielle : les champs
fournis remplacent entièrement les anciens (une liste `skills` fournie remplace
l'ancienne), les champs absents sont conservés.
"""

import logging
from typing import Any, Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.orm import Session

from app.database import get_db
from app.models import (
    FundingApplication,
    MicroJob,
    SponsorProfile,
    Sponsorship,
    StudentProfile,
    User,
)

logger = logging.getLogger(__name__)

# Champs imposés par le dépôt à la création ; ceux fournis par l'appelant sont ignorés.
CREATION_DEFAULTS: dict[type, dict[str, Any]] = {
    User: {"profile_completed": False},
    StudentProfile: {},
    SponsorProfile: {},
    FundingApplication: {"status": "pending"},
    Sponsorship: {"status": "active", "payment_id": ""},
    MicroJob: {"status": "open"},
}

# Champs fixés à la création uniquement (jamais modifiables par update)
IMMUTABLE_FIELDS = {"id", "created_at"}


class RecordStore:
    """
    Dépôt explicite au-dessus d'une session SQLAlchemy.
    Une instance par requête, injectée dans les routers via `get_store`.
    """

    def __init__(self, db: Session):
        self.db = db

    # --- Opérations génériques ---

    def create(self, model, data: dict) -> Any:
        """Insère un enregistrement avec les valeurs par défaut du type et le retourne."""
        values = {k: v for k, v in data.items() if k not in IMMUTABLE_FIELDS}
        values.update(CREATION_DEFAULTS[model])
        record = model(**values)
        self.db.add(record)
        self.db.commit()
        self.db.refresh(record)
        return record

    def get(self, model, record_id: int) -> Optional[Any]:
        """Retourne l'enregistrement, ou None s'il n'existe pas."""
        return self.db.get(model, record_id)

    def update(self, model, record_id: int, data: dict) -> Optional[Any]:
        """Fusionne `data` sur l'enregistrement existant. None si introuvable."""
        record = self.db.get(model, record_id)
        if record is None:
            return None

        for field, value in data.items():
            if field in IMMUTABLE_FIELDS:
                continue
            setattr(record, field, value)

        self.db.commit()
        self.db.refresh(record)
        return record

    def scan(self, model, *criteria) -> list:
        """Parcours complet, filtré, dans l'ordre d'insertion."""
        return list(
            self.db.execute(
                select(model).where(*criteria).order_by(model.id)
            ).scalars().all()
        )

    def first(self, model, *criteria) -> Optional[Any]:
        """Premier enregistrement correspondant dans l'ordre d'insertion."""
        return self.db.execute(
            select(model).where(*criteria).order_by(model.id).limit(1)
        ).scalars().first()

    # --- Utilisateurs ---

    def create_user(self, data: dict) -> User:
        return self.create(User, data)

    def get_user(self, user_id: int) -> Optional[User]:
        return self.get(User, user_id)

    def update_user(self, user_id: int, data: dict) -> Optional[User]:
        return self.update(User, user_id, data)

    # --- Profils étudiants ---

    def create_student_profile(self, data: dict) -> StudentProfile:
        return self.create(StudentProfile, data)

    def get_student_profile(self, profile_id: int) -> Optional[StudentProfile]:
        return self.get(StudentProfile, profile_id)

    def update_student_profile(self, profile_id: int, data: dict) -> Optional[StudentProfile]:
        return self.update(StudentProfile, profile_id, data)

    # --- Profils sponsors ---

    def create_sponsor_profile(self, data: dict) -> SponsorProfile:
        return self.create(SponsorProfile, data)

    def get_sponsor_profile(self, profile_id: int) -> Optional[SponsorProfile]:
        return self.get(SponsorProfile, profile_id)

    def update_sponsor_profile(self, profile_id: int, data: dict) -> Optional[SponsorProfile]:
        return self.update(SponsorProfile, profile_id, data)

    # --- Demandes de financement ---

    def create_funding_application(self, data: dict) -> FundingApplication:
        return self.create(FundingApplication, data)

    def get_funding_application(self, application_id: int) -> Optional[FundingApplication]:
        return self.get(FundingApplication, application_id)

    def update_funding_application(self, application_id: int, data: dict) -> Optional[FundingApplication]:
        return self.update(FundingApplication, application_id, data)

    # --- Parrainages ---

    def create_sponsorship(self, data: dict) -> Sponsorship:
        return self.create(Sponsorship, data)

    def get_sponsorship(self, sponsorship_id: int) -> Optional[Sponsorship]:
        return self.get(Sponsorship, sponsorship_id)

    def update_sponsorship(self, sponsorship_id: int, data: dict) -> Optional[Sponsorship]:
        return self.update(Sponsorship, sponsorship_id, data)

    # --- Micro-jobs ---

    def create_micro_job(self, data: dict) -> MicroJob:
        return self.create(MicroJob, data)

    def get_micro_job(self, job_id: int) -> Optional[MicroJob]:
        return self.get(MicroJob, job_id)

    def update_micro_job(self, job_id: int, data: dict) -> Optional[MicroJob]:
        return self.update(MicroJob, job_id, data)


async def get_store(db: Session = Depends(get_db)) -> RecordStore:
    """Dépendance FastAPI: fournit le dépôt lié à la session de la requête."""
    return RecordStore(db)
