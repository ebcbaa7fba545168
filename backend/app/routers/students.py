"""
Router pour les profils étudiants.
Les routes GET/PUT sont indexées par l'id de l'utilisateur, pas par l'id du profil.
"""

from fastapi import APIRouter, Depends, HTTPException

from app.schemas.profile import StudentProfileCreate, StudentProfileResponse, StudentProfileUpdate
from app.services import profile_service
from app.services.record_store import RecordStore, get_store

router = APIRouter(prefix="/api/students", tags=["Étudiants"])


@router.post("/profile", response_model=StudentProfileResponse, status_code=201,
             summary="Créer un profil étudiant")
async def create_profile(data: StudentProfileCreate, store: RecordStore = Depends(get_store)):
    """
    Crée le profil d'un utilisateur de rôle student
    et marque son compte comme complété.
    """
    try:
        return profile_service.create_student_profile(store, data)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.get("/profile/{user_id}", response_model=StudentProfileResponse, summary="Profil d'un étudiant")
async def get_profile(user_id: int, store: RecordStore = Depends(get_store)):
    profile = profile_service.get_student_profile(store, user_id)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profil étudiant introuvable.")
    return profile


@router.put("/profile/{user_id}", response_model=StudentProfileResponse, summary="Modifier un profil étudiant")
async def update_profile(user_id: int, data: StudentProfileUpdate, store: RecordStore = Depends(get_store)):
    """Met à jour les champs fournis. Les champs absents ne sont pas modifiés."""
    profile = profile_service.update_student_profile(store, user_id, data)
    if profile is None:
        raise HTTPException(status_code=404, detail="Profil étudiant introuvable.")
    return profile
