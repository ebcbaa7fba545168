"""
Tests d'intégration API pour les demandes de financement.
"""

from conftest import create_application


def test_create_application_toujours_pending(client):
    """Statut et date fournis par le client sont ignorés."""
    response = client.post("/api/funding-applications", json={
        "studentId": 1,
        "amount": 500,
        "purpose": "books",
        "status": "approved",
        "createdAt": "2001-01-01T00:00:00",
    })

    assert response.status_code == 201
    data = response.json()
    assert data["status"] == "pending"
    assert data["createdAt"] is not None
    assert not data["createdAt"].startswith("2001")


def test_create_application_montant_nul(client):
    response = client.post("/api/funding-applications", json={"studentId": 1, "amount": 0, "purpose": "x"})
    assert response.status_code == 400


def test_create_application_sans_objet(client):
    response = client.post("/api/funding-applications", json={"studentId": 1, "amount": 100})
    assert response.status_code == 400


def test_list_applications_etudiant(client):
    create_application(client, 1, amount=100)
    create_application(client, 2, amount=200)
    create_application(client, 1, amount=300)

    response = client.get("/api/funding-applications/student/1")

    assert response.status_code == 200
    assert [a["amount"] for a in response.json()] == [100, 300]


def test_list_applications_etudiant_id_invalide(client):
    assert client.get("/api/funding-applications/student/abc").status_code == 400


def test_list_pending(client):
    a = create_application(client, 1)
    b = create_application(client, 1)
    client.put(f"/api/funding-applications/{a['id']}/status", json={"status": "rejected"})

    response = client.get("/api/funding-applications/pending")

    assert response.status_code == 200
    assert [x["id"] for x in response.json()] == [b["id"]]


def test_get_application(client):
    a = create_application(client, 1, purpose="loyer")
    response = client.get(f"/api/funding-applications/{a['id']}")
    assert response.status_code == 200
    assert response.json()["purpose"] == "loyer"


def test_get_application_introuvable(client):
    assert client.get("/api/funding-applications/77").status_code == 404


def test_update_status_succes(client):
    a = create_application(client, 1)
    response = client.put(f"/api/funding-applications/{a['id']}/status", json={"status": "approved"})
    assert response.status_code == 200
    assert response.json()["status"] == "approved"


def test_update_status_retour_arriere_autorise(client):
    """Aucune garde sur les transitions : approved → pending est accepté."""
    a = create_application(client, 1)
    client.put(f"/api/funding-applications/{a['id']}/status", json={"status": "approved"})

    response = client.put(f"/api/funding-applications/{a['id']}/status", json={"status": "pending"})

    assert response.status_code == 200
    assert response.json()["status"] == "pending"


def test_update_status_invalide(client):
    a = create_application(client, 1)
    response = client.put(f"/api/funding-applications/{a['id']}/status", json={"status": "archived"})
    assert response.status_code == 400


def test_update_status_introuvable(client):
    response = client.put("/api/funding-applications/55/status", json={"status": "approved"})
    assert response.status_code == 404
