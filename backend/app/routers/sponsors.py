"""
Router pour les profils sponsors.
"""

from fastapi import APIRouter, Depends, HTTPException

from app.schemas.profile import SponsorProfileCreate, SponsorProfileResponse, SponsorProfileUpdate
from app.services import profile_service
from app.services.record_store import RecordStore, get_store

router = APIRouter(prefix="/api/sponsors", tags=["Sponsors"])


@router.post("/profile", response_model=SponsorProfileResponse, status_code=201,
             summary="Créer un profil sponsor")
async def create_profile(data: SponsorProfileCreate, store: RecordStore = Depends(get_store)):
    try:
        return profile_service.create_sponsor_profile(store, data)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.get("/profile/{user_id}", response_model=SponsorProfileResponse, summary="Profil d'un sponsor")
async def get_profile(user_id: int, store: RecordStore = Depends(get_store)):
    profile = profile_service.get_sponsor_profile(store, user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profil sponsor introuvable.")
    return profile


@router.put("/profile/{user_id}", response_model=SponsorProfileResponse, summary="Modifier un profil sponsor")
async def update_profile(user_id: int, data: SponsorProfileUpdate, store: RecordStore = Depends(get_store)):
    profile = profile_service.update_sponsor_profile(store, user_id, data)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profil sponsor introuvable.")
    return profile
