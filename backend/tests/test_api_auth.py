"""
Tests d'intégration API pour l'inscription et la connexion.
POST /api/auth/register
POST /api/auth/login
"""

from conftest import register


# ============================================================
# POST /api/auth/register
# ============================================================

def test_register_succes_sans_mot_de_passe(client):
    """Inscription valide → 201, le mot de passe n'est jamais renvoyé."""
    response = client.post("/api/auth/register", json={
        "username": "amina",
        "password": "secret123",
        "email": "amina@edubridge.org",
        "displayName": "Amina Diallo",
        "role": "student",
    })

    assert response.status_code == 201
    data = response.json()
    assert "password" not in data
    assert data["id"] == 1
    assert data["displayName"] == "Amina Diallo"
    assert data["profileCompleted"] is False


def test_register_username_duplique(client):
    register(client, "amina")
    response = client.post("/api/auth/register", json={
        "username": "amina",
        "password": "autre",
        "email": "autre@edubridge.org",
        "displayName": "Autre",
        "role": "sponsor",
    })
    assert response.status_code == 400
    assert "utilisateur" in response.json()["detail"].lower()


def test_register_email_duplique(client):
    register(client, "amina", email="commun@edubridge.org")
    response = client.post("/api/auth/register", json={
        "username": "bruno",
        "password": "secret",
        "email": "commun@edubridge.org",
        "displayName": "Bruno",
        "role": "student",
    })
    assert response.status_code == 400
    assert "email" in response.json()["detail"].lower()


def test_register_role_invalide(client):
    response = client.post("/api/auth/register", json={
        "username": "x", "password": "y", "email": "x@edubridge.org",
        "displayName": "X", "role": "admin",
    })
    assert response.status_code == 400


def test_register_champ_manquant(client):
    response = client.post("/api/auth/register", json={"username": "x", "password": "y"})
    assert response.status_code == 400


def test_register_email_invalide(client):
    response = client.post("/api/auth/register", json={
        "username": "x", "password": "y", "email": "pas-un-email",
        "displayName": "X", "role": "student",
    })
    assert response.status_code == 400


# ============================================================
# POST /api/auth/login
# ============================================================

def test_login_succes(client):
    register(client, "amina", password="secret123")

    response = client.post("/api/auth/login", json={"username": "amina", "password": "secret123"})

    assert response.status_code == 200
    assert response.json()["username"] == "amina"
    assert "password" not in response.json()


def test_login_par_email(client):
    register(client, "amina", email="amina@edubridge.org", password="secret123")

    response = client.post("/api/auth/login", json={"username": "amina@edubridge.org", "password": "secret123"})

    assert response.status_code == 200
    assert response.json()["username"] == "amina"


def test_login_mauvais_mot_de_passe(client):
    register(client, "amina", password="secret123")
    response = client.post("/api/auth/login", json={"username": "amina", "password": "faux"})
    assert response.status_code == 401


def test_login_utilisateur_inconnu(client):
    response = client.post("/api/auth/login", json={"username": "fantome", "password": "x"})
    assert response.status_code == 401


def test_login_champs_manquants(client):
    response = client.post("/api/auth/login", json={"username": "amina"})
    assert response.status_code == 400


def test_register_email_conserve_tel_que_saisi(client):
    """L'email est stocké sans normalisation : la casse du domaine est conservée."""
    created = register(client, "bob", email="Bob@Example.COM", password="secret123")
    assert created["email"] == "Bob@Example.COM"

    login = client.post("/api/auth/login", json={"username": "Bob@Example.COM", "password": "secret123"})
    assert login.status_code == 200
    assert login.json()["username"] == "bob"

    # Correspondance exacte : une autre casse de domaine est une adresse distincte
    other = register(client, "bobby", email="Bob@example.com")
    assert other["email"] == "Bob@example.com"


def test_register_email_avec_nom_affiche_refuse(client):
    response = client.post("/api/auth/register", json={
        "username": "x", "password": "y", "email": "Bob <bob@edubridge.org>",
        "displayName": "X", "role": "student",
    })
    assert response.status_code == 400
