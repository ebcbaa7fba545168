"""
Configuration partagée pour tous les tests.
Chaque test dispose de sa propre base SQLite en mémoire (dépendance get_db surchargée).
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

import app.models  # noqa: F401
from app.database import Base, build_engine, get_db, make_session_dependency
from app.main import app
from app.services.record_store import RecordStore


@pytest.fixture
def session_factory():
    """Moteur SQLite en mémoire neuf, tables créées."""
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    engine.dispose()


@pytest.fixture
def store(session_factory):
    """Dépôt branché sur une session de test, pour les tests de services."""
    db = session_factory()
    yield RecordStore(db)
    db.close()


@pytest.fixture
def client(session_factory):
    """Client HTTP de test avec une base isolée (même dépendance de session qu'en production)."""
    app.dependency_overrides[get_db] = make_session_dependency(session_factory)
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


# --- Helpers HTTP partagés ---

def register(client, username: str, role: str = "student", **kwargs) -> dict:
    payload = {
        "username": username,
        "password": kwargs.pop("password", "secret123"),
        "email": kwargs.pop("email", f"{username}@edubridge.org"),
        "displayName": kwargs.pop("display_name", username.capitalize()),
        "role": role,
    }
    response = client.post("/api/auth/register", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def create_student_profile(client, user_id: int, **fields) -> dict:
    response = client.post("/api/students/profile", json={"userId": user_id, **fields})
    assert response.status_code == 201, response.text
    return response.json()


def create_sponsor_profile(client, user_id: int, **fields) -> dict:
    response = client.post("/api/sponsors/profile", json={"userId": user_id, **fields})
    assert response.status_code == 201, response.text
    return response.json()


def create_application(client, student_id: int, amount: int = 500, purpose: str = "books") -> dict:
    response = client.post("/api/funding-applications", json={
        "studentId": student_id,
        "amount": amount,
        "purpose": purpose,
    })
    assert response.status_code == 201, response.text
    return response.json()
