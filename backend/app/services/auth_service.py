"""
Service d'inscription et de connexion.
Comparaison du mot de passe en clair : authentification de démonstration, non durcie.
"""

import logging
from typing import Optional

from app.models import User
from app.schemas.user import UserCreate
from app.services import queries
from app.services.record_store import RecordStore

logger = logging.getLogger(__name__)


def register_user(store: RecordStore, data: UserCreate) -> User:
    """
    Crée un utilisateur.
    Lève une ValueError si le nom d'utilisateur ou l'email est déjà pris
    (le nom d'utilisateur est vérifié en premier).
    """
    if queries.find_user_by_username(store, data.username) is not None:
        raise ValueError("Ce nom d'utilisateur existe déjà.")

    if queries.find_user_by_email(store, data.email) is not None:
        raise ValueError("Cet email est déjà utilisé.")

    user = store.create_user(data.model_dump())
    logger.info("Utilisateur inscrit : %s (%s, id=%d)", user.username, user.role, user.id)
    return user


def authenticate(store: RecordStore, username: str, password: str) -> Optional[User]:
    """
    Retourne l'utilisateur si les identifiants sont corrects, None sinon.
    Si aucun nom d'utilisateur ne correspond et que l'identifiant contient '@',
    on tente une correspondance sur l'email.
    """
    user = queries.find_user_by_username(store, username)
    if user is None and "@" in username:
        user = queries.find_user_by_email(store, username)

    if user is None:
        logger.info("Connexion refusée : utilisateur %s inconnu", username)
        return None

    if password != user.password:
        logger.info("Connexion refusée : mot de passe incorrect pour %s", username)
        return None

    return user
