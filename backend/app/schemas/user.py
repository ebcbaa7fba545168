"""
Schémas Pydantic pour les utilisateurs et l'authentification.
"""

from typing import Optional

from pydantic import field_validator
from pydantic.networks import validate_email

from app.schemas.base import CamelModel, not_blank

VALID_ROLES = {"student", "sponsor"}


class UserCreate(CamelModel):
    """Inscription (POST /api/auth/register)."""
    username: str
    password: str
    email: str
    display_name: str
    role: str

    @field_validator("username", "display_name")
    @classmethod
    def not_empty(cls, v: str) -> str:
        return not_blank(v)

    @field_validator("email")
    @classmethod
    def valid_email(cls, v: str) -> str:
        # Format vérifié comme EmailStr, mais l'adresse est stockée telle que saisie.
        if "<" in v or ">" in v:
            raise ValueError("Adresse email invalide.")
        validate_email(v)
        return v

    @field_validator("password")
    @classmethod
    def password_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Le mot de passe ne peut pas être vide.")
        return v

    @field_validator("role")
    @classmethod
    def valid_role(cls, v: str) -> str:
        if v not in VALID_ROLES:
            raise ValueError(f"Rôle invalide. Valeurs acceptées : {VALID_ROLES}")
        return v


class LoginRequest(CamelModel):
    """Connexion : les champs manquants sont signalés par le router (400)."""
    username: Optional[str] = None
    password: Optional[str] = None


class UserResponse(CamelModel):
    """Utilisateur renvoyé au client, toujours sans mot de passe."""
    id: int
    username: str
    email: str
    role: str
    display_name: str
    profile_completed: bool
