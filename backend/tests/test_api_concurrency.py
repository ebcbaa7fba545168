"""
Tests d'intégration API sous requêtes concurrentes.
Toutes les sessions partagent la même connexion SQLite : chaque requête doit
aller au bout (201) et chaque écriture doit être conservée.
"""

import uuid
from concurrent.futures import ThreadPoolExecutor

from fastapi.testclient import TestClient

from app.main import app

THREADS = 8
REQUESTS_PER_THREAD = 15


def _register_many(client, prefix: str, worker: int) -> list[int]:
    codes = []
    for i in range(REQUESTS_PER_THREAD):
        username = f"{prefix}-{worker}-{i}"
        response = client.post("/api/auth/register", json={
            "username": username,
            "password": "secret123",
            "email": f"{username}@edubridge.org",
            "displayName": username,
            "role": "student" if i % 2 else "sponsor",
        })
        codes.append(response.status_code)
    return codes


def _register_concurrently(client, prefix: str) -> list[int]:
    with ThreadPoolExecutor(max_workers=THREADS) as pool:
        results = pool.map(lambda w: _register_many(client, prefix, w), range(THREADS))
    return [code for codes in results for code in codes]


def test_inscriptions_concurrentes_toutes_reussies(client):
    """8 threads × 15 inscriptions : aucune 500, tous les utilisateurs stockés."""
    codes = _register_concurrently(client, "user")

    assert codes == [201] * (THREADS * REQUESTS_PER_THREAD)
    users = client.get("/api/debug/users").json()
    assert len(users) == THREADS * REQUESTS_PER_THREAD
    assert len({u["id"] for u in users}) == len(users)


def test_inscriptions_concurrentes_base_par_defaut():
    """Même scénario sur la dépendance get_db de production (base du processus)."""
    prefix = uuid.uuid4().hex[:8]
    with TestClient(app) as client:
        codes = _register_concurrently(client, prefix)
        stored = [u for u in client.get("/api/debug/users").json() if u["username"].startswith(prefix)]

    assert codes == [201] * (THREADS * REQUESTS_PER_THREAD)
    assert len(stored) == THREADS * REQUESTS_PER_THREAD
