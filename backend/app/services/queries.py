"""
Projections en lecture seule au-dessus du dépôt.
Parcours complets dans l'ordre d'insertion ; aucune de ces fonctions n'écrit.
"""

from typing import Optional

from app.models import (
    FundingApplication,
    MicroJob,
    SponsorProfile,
    Sponsorship,
    StudentProfile,
    User,
)
from app.services.record_store import RecordStore


def list_users(store: RecordStore) -> list[User]:
    return store.scan(User)


def find_user_by_username(store: RecordStore, username: str) -> Optional[User]:
    """Correspondance exacte, sensible à la casse."""
    return store.first(User, User.username == username)


def find_user_by_email(store: RecordStore, email: str) -> Optional[User]:
    """Correspondance exacte, sensible à la casse."""
    return store.first(User, User.email == email)


def find_student_profile_by_user_id(store: RecordStore, user_id: int) -> Optional[StudentProfile]:
    """Premier profil de l'utilisateur ; un éventuel doublon reste invisible."""
    return store.first(StudentProfile, StudentProfile.user_id == user_id)


def find_sponsor_profile_by_user_id(store: RecordStore, user_id: int) -> Optional[SponsorProfile]:
    return store.first(SponsorProfile, SponsorProfile.user_id == user_id)


def list_student_profiles(store: RecordStore) -> list[StudentProfile]:
    return store.scan(StudentProfile)


def list_applications_by_student(store: RecordStore, student_id: int) -> list[FundingApplication]:
    return store.scan(FundingApplication, FundingApplication.student_id == student_id)


def list_pending_applications(store: RecordStore) -> list[FundingApplication]:
    return store.scan(FundingApplication, FundingApplication.status == "pending")


def list_sponsorships_by_sponsor(store: RecordStore, sponsor_id: int) -> list[Sponsorship]:
    return store.scan(Sponsorship, Sponsorship.sponsor_id == sponsor_id)


def list_sponsorships_by_student(store: RecordStore, student_id: int) -> list[Sponsorship]:
    return store.scan(Sponsorship, Sponsorship.student_id == student_id)


def list_micro_jobs(store: RecordStore, status: Optional[str] = None) -> list[MicroJob]:
    """Tous les micro-jobs, ou seulement ceux du statut demandé."""
    if status is None:
        return store.scan(MicroJob)
    return store.scan(MicroJob, MicroJob.status == status)


def list_open_micro_jobs(store: RecordStore) -> list[MicroJob]:
    return list_micro_jobs(store, "open")
