"""
Router d'authentification : inscription et connexion.
"""

from fastapi import APIRouter, Depends, HTTPException

from app.schemas.user import LoginRequest, UserCreate, UserResponse
from app.services import auth_service
from app.services.record_store import RecordStore, get_store

router = APIRouter(prefix="/api/auth", tags=["Authentification"])


@router.post("/register", response_model=UserResponse, status_code=201, summary="Inscrire un utilisateur")
async def register(data: UserCreate, store: RecordStore = Depends(get_store)):
    """Crée un compte étudiant ou sponsor. Le nom d'utilisateur et l'email doivent être uniques."""
    try:
        return auth_service.register_user(store, data)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/login", response_model=UserResponse, summary="Se connecter")
async def login(data: LoginRequest, store: RecordStore = Depends(get_store)):
    """Connexion par nom d'utilisateur (ou email). Retourne l'utilisateur sans mot de passe."""
    if not data.username or not data.password:
        raise HTTPException(status_code=400, detail="Nom d'utilisateur et mot de passe requis.")

    user = auth_service.authenticate(store, data.username, data.password)
    if user is None:
        raise HTTPException(status_code=401, detail="Identifiants invalides.")
    return user
