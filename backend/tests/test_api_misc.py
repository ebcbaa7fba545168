"""
Tests d'intégration API : santé et routes de debug.
"""

from conftest import register


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_debug_users_sans_mot_de_passe(client):
    register(client, "amina")
    register(client, "sophie", role="sponsor")

    response = client.get("/api/debug/users")

    assert response.status_code == 200
    assert [u["username"] for u in response.json()] == ["amina", "sophie"]
    assert all("password" not in u for u in response.json())


def test_debug_create_test_user_idempotent(client):
    first = client.get("/api/debug/create-test-user")
    second = client.get("/api/debug/create-test-user")

    assert first.status_code == 201
    assert second.status_code == 200
    assert first.json()["user"]["id"] == second.json()["user"]["id"]
    assert "password" not in first.json()["user"]

    login = client.post("/api/auth/login", json={"username": "testuser", "password": "password123"})
    assert login.status_code == 200
