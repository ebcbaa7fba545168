"""
Router pour les parrainages.
"""

from typing import List

from fastapi import APIRouter, Depends

from app.schemas.sponsorship import SponsorshipCreate, SponsorshipResponse
from app.services import sponsorship_service
from app.services.record_store import RecordStore, get_store

router = APIRouter(prefix="/api/sponsorships", tags=["Parrainages"])


@router.post("", response_model=SponsorshipResponse, status_code=201, summary="Créer un parrainage")
async def create_sponsorship(data: SponsorshipCreate, store: RecordStore = Depends(get_store)):
    """
    Crée un parrainage actif.
    Si applicationId est fourni, la demande correspondante passe au statut approved.
    """
    return sponsorship_service.create_sponsorship(store, data)


@router.get("/sponsor/{sponsor_id}", response_model=List[SponsorshipResponse],
            summary="Parrainages d'un sponsor")
async def list_for_sponsor(sponsor_id: int, store: RecordStore = Depends(get_store)):
    return sponsorship_service.get_sponsor_sponsorships(store, sponsor_id)


@router.get("/student/{student_id}", response_model=List[SponsorshipResponse],
            summary="Parrainages d'un étudiant")
async def list_for_student(student_id: int, store: RecordStore = Depends(get_store)):
    return sponsorship_service.get_student_sponsorships(store, student_id)
