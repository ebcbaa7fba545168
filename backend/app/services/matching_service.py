"""
Classement des étudiants pour la mise en relation avec les sponsors.

Heuristique déterministe, sans modèle appris :
- vue sponsor : les étudiants ayant une demande en attente passent d'abord ;
- puis besoin financier décroissant, les étudiants sans besoin renseigné en dernier.

Le tri est stable : à clé égale, l'ordre de rencontre est conservé.
Le matchScore (besoin / 1000, ou 0.5 par défaut) est une valeur d'affichage
et n'intervient jamais dans le tri.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from app.models import FundingApplication, StudentProfile, User
from app.schemas.funding_application import FundingApplicationResponse
from app.schemas.matching import SponsorStudentMatch, StudentMatch
from app.schemas.profile import StudentProfileResponse
from app.services import queries
from app.services.record_store import RecordStore

logger = logging.getLogger(__name__)

DEFAULT_MATCH_SCORE = 0.5
NEED_SCALE = 1000


@dataclass
class Candidate:
    profile: StudentProfile
    user: User
    application: Optional[FundingApplication] = None


# ----------------------------
# Collecte des candidats
# ----------------------------

def gather_candidates(store: RecordStore) -> list[Candidate]:
    """Tous les profils étudiants joints à leur utilisateur (références pendantes ignorées)."""
    candidates = []
    for profile in queries.list_student_profiles(store):
        user = store.get_user(profile.user_id)
        if user is not None:
            candidates.append(Candidate(profile=profile, user=user))
    return candidates


def gather_candidates_for_sponsor(store: RecordStore) -> list[Candidate]:
    """
    Comme gather_candidates, avec pour chaque profil la première demande en
    attente rencontrée dans l'ordre d'insertion (pas la plus récente par date).
    """
    candidates = gather_candidates(store)
    for candidate in candidates:
        applications = queries.list_applications_by_student(store, candidate.profile.id)
        candidate.application = next(
            (a for a in applications if a.status == "pending"), None
        )
    return candidates


# ----------------------------
# Tri et score
# ----------------------------

def _need_key(candidate: Candidate) -> tuple:
    need = candidate.profile.financial_need
    if not need:
        return (1, 0)
    return (0, -need)


def rank_for_student_view(candidates: list[Candidate]) -> list[Candidate]:
    """Besoin financier décroissant, sans besoin en dernier."""
    return sorted(candidates, key=_need_key)


def rank_for_sponsor_view(candidates: list[Candidate]) -> list[Candidate]:
    """Demande en attente d'abord, puis besoin financier décroissant."""
    return sorted(
        candidates,
        key=lambda c: (0 if c.application is not None else 1, *_need_key(c)),
    )


def match_score(profile: StudentProfile) -> float:
    if not profile.financial_need:
        return DEFAULT_MATCH_SCORE
    return profile.financial_need / NEED_SCALE


def _to_match(candidate: Candidate) -> StudentMatch:
    return StudentMatch(
        id=candidate.user.id,
        display_name=candidate.user.display_name,
        profile=StudentProfileResponse.model_validate(candidate.profile),
        match_score=match_score(candidate.profile),
    )


def _to_sponsor_match(candidate: Candidate) -> SponsorStudentMatch:
    application = None
    if candidate.application is not None:
        application = FundingApplicationResponse.model_validate(candidate.application)

    return SponsorStudentMatch(
        id=candidate.user.id,
        display_name=candidate.user.display_name,
        profile=StudentProfileResponse.model_validate(candidate.profile),
        match_score=match_score(candidate.profile),
        application=application,
        has_pending_application=application is not None,
    )


# ----------------------------
# Points d'entrée
# ----------------------------

def match_students(store: RecordStore) -> list[StudentMatch]:
    """Classement vu côté étudiant : tous les étudiants par besoin financier."""
    ranked = rank_for_student_view(gather_candidates(store))
    return [_to_match(c) for c in ranked]


def recommendations_for_sponsor(store: RecordStore, user_id: int) -> Optional[list[SponsorStudentMatch]]:
    """
    Classement vu côté sponsor.
    None si l'utilisateur n'existe pas ; liste vide s'il n'a pas encore de profil sponsor.
    """
    if store.get_user(user_id) is None:
        return None

    if queries.find_sponsor_profile_by_user_id(store, user_id) is None:
        logger.warning("Profil sponsor introuvable pour l'utilisateur %d: liste vide", user_id)
        return []

    ranked = rank_for_sponsor_view(gather_candidates_for_sponsor(store))
    return [_to_sponsor_match(c) for c in ranked]
