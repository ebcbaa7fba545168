"""
Routes de debug, montées uniquement en environnement de développement.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from app.schemas.user import UserCreate, UserResponse
from app.services import auth_service, queries
from app.services.record_store import RecordStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/debug", tags=["Debug"])

TEST_USER = {
    "username": "testuser",
    "password": "password123",
    "email": "test@edubridge.org",
    "display_name": "Test User",
    "role": "sponsor",
}


@router.get("/users", response_model=List[UserResponse], summary="Lister les utilisateurs")
async def list_users(store: RecordStore = Depends(get_store)):
    return queries.list_users(store)


@router.get("/create-test-user", summary="Créer l'utilisateur de démonstration")
async def create_test_user(response: Response, store: RecordStore = Depends(get_store)):
    """Crée le compte testuser s'il n'existe pas encore. Idempotent."""
    existing = queries.find_user_by_username(store, TEST_USER["username"])
    if existing is not None:
        return {
            "message": "L'utilisateur de test existe déjà.",
            "user": UserResponse.model_validate(existing).model_dump(by_alias=True),
        }

    user = auth_service.register_user(store, UserCreate(**TEST_USER))
    response.status_code = 201
    logger.info("Utilisateur de test créé (id=%d)", user.id)
    return {
        "message": "Utilisateur de test créé.",
        "user": UserResponse.model_validate(user).model_dump(by_alias=True),
    }
