"""
Router pour les demandes de financement.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from app.schemas.funding_application import (
    ApplicationStatusUpdate,
    FundingApplicationCreate,
    FundingApplicationResponse,
)
from app.services import funding_service
from app.services.record_store import RecordStore, get_store

router = APIRouter(prefix="/api/funding-applications", tags=["Demandes de financement"])


@router.post("", response_model=FundingApplicationResponse, status_code=201,
             summary="Déposer une demande de financement")
async def create_application(data: FundingApplicationCreate, store: RecordStore = Depends(get_store)):
    """Crée une demande au statut pending. Un statut ou une date fournis sont ignorés."""
    return funding_service.create_application(store, data)


@router.get("/pending", response_model=List[FundingApplicationResponse], summary="Demandes en attente")
async def list_pending(store: RecordStore = Depends(get_store)):
    return funding_service.get_pending_applications(store)


@router.get("/student/{student_id}", response_model=List[FundingApplicationResponse],
            summary="Demandes d'un étudiant")
async def list_for_student(student_id: int, store: RecordStore = Depends(get_store)):
    """Toutes les demandes d'un profil étudiant, dans l'ordre de dépôt."""
    return funding_service.get_student_applications(store, student_id)


@router.get("/{application_id}", response_model=FundingApplicationResponse, summary="Détail d'une demande")
async def get_application(application_id: int, store: RecordStore = Depends(get_store)):
    application = funding_service.get_application(store, application_id)
    if application is None:
        raise HTTPException(status_code=404, detail="Demande de financement introuvable.")
    return application


@router.put("/{application_id}/status", response_model=FundingApplicationResponse,
            summary="Changer le statut d'une demande")
async def update_status(application_id: int, data: ApplicationStatusUpdate, store: RecordStore = Depends(get_store)):
    application = funding_service.update_status(store, application_id, data.status)
    if application is None:
        raise HTTPException(status_code=404, detail="Demande de financement introuvable.")
    return application
