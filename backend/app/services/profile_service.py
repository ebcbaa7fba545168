"""
Service des profils étudiants et sponsors.

La création d'un profil se fait en deux écritures séparées : le profil, puis
le drapeau profile_completed de l'utilisateur. Les deux ne sont pas atomiques.
"""

import logging
from typing import Optional

from app.models import SponsorProfile, StudentProfile, User
from app.schemas.profile import (
    SponsorProfileCreate,
    SponsorProfileUpdate,
    StudentProfileCreate,
    StudentProfileUpdate,
)
from app.services import queries
from app.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def _owner_with_role(store: RecordStore, user_id: int, role: str) -> User:
    """
    Vérifie le propriétaire du profil.
    LookupError si l'utilisateur n'existe pas, PermissionError si le rôle ne correspond pas.
    """
    user = store.get_user(user_id)
    if user is None:
        raise LookupError("Utilisateur introuvable.")
    if user.role != role:
        label = "étudiants" if role == "student" else "sponsors"
        raise PermissionError(f"Seuls les {label} peuvent créer ce type de profil.")
    return user


def create_student_profile(store: RecordStore, data: StudentProfileCreate) -> StudentProfile:
    user = _owner_with_role(store, data.user_id, "student")

    profile = store.create_student_profile(data.model_dump())
    store.update_user(user.id, {"profile_completed": True})

    logger.info("Profil étudiant créé : id=%d pour l'utilisateur %d", profile.id, user.id)
    return profile


def get_student_profile(store: RecordStore, user_id: int) -> Optional[StudentProfile]:
    return queries.find_student_profile_by_user_id(store, user_id)


def update_student_profile(
    store: RecordStore, user_id: int, data: StudentProfileUpdate
) -> Optional[StudentProfile]:
    """Met à jour les champs fournis du profil de l'utilisateur. None si aucun profil."""
    profile = queries.find_student_profile_by_user_id(store, user_id)
    if profile is None:
        return None
    return store.update_student_profile(profile.id, data.model_dump(exclude_unset=True))


def create_sponsor_profile(store: RecordStore, data: SponsorProfileCreate) -> SponsorProfile:
    user = _owner_with_role(store, data.user_id, "sponsor")

    profile = store.create_sponsor_profile(data.model_dump())
    store.update_user(user.id, {"profile_completed": True})

    logger.info("Profil sponsor créé : id=%d pour l'utilisateur %d", profile.id, user.id)
    return profile


def get_sponsor_profile(store: RecordStore, user_id: int) -> Optional[SponsorProfile]:
    return queries.find_sponsor_profile_by_user_id(store, user_id)


def update_sponsor_profile(
    store: RecordStore, user_id: int, data: SponsorProfileUpdate
) -> Optional[SponsorProfile]:
    profile = queries.find_sponsor_profile_by_user_id(store, user_id)
    if profile is None:
        return None
    return store.update_sponsor_profile(profile.id, data.model_dump(exclude_unset=True))
