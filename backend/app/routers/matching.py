"""
Router de mise en relation étudiants ↔ sponsors.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.schemas.matching import SponsorStudentMatch, StudentMatch
from app.services import matching_service
from app.services.record_store import RecordStore, get_store

router = APIRouter(prefix="/api/ai", tags=["Mise en relation"])


@router.get("/match-students", response_model=List[StudentMatch], summary="Classement des étudiants")
async def match_students(store: RecordStore = Depends(get_store)):
    """Tous les étudiants classés par besoin financier décroissant."""
    return matching_service.match_students(store)


@router.get("/sponsor-recommendations/{sponsor_id}", response_model=List[SponsorStudentMatch],
            summary="Étudiants recommandés pour un sponsor")
async def sponsor_recommendations(sponsor_id: int, store: RecordStore = Depends(get_store)):
    """
    `sponsor_id` est l'id de l'utilisateur sponsor.
    Les étudiants avec une demande en attente passent en premier.
    Un sponsor sans profil reçoit une liste vide (pas d'erreur).
    """
    results = matching_service.recommendations_for_sponsor(store, sponsor_id)
    if results is None:
        raise HTTPException(status_code=404, detail="Utilisateur introuvable.")
    return results
