"""
Tests d'intégration API pour les micro-jobs.
"""


def make_job(client, title: str = "Traduction d'un site", **kwargs) -> dict:
    response = client.post("/api/micro-jobs", json={
        "title": title,
        "description": kwargs.get("description", "Traduire 10 pages FR → EN"),
        "postedBy": kwargs.get("posted_by", 1),
        "skillsRequired": kwargs.get("skills_required", ["anglais"]),
        "compensation": kwargs.get("compensation", 80),
    })
    assert response.status_code == 201, response.text
    return response.json()


def test_create_job_statut_open(client):
    job = make_job(client)
    assert job["status"] == "open"
    assert job["skillsRequired"] == ["anglais"]
    assert job["createdAt"] is not None


def test_create_job_remuneration_invalide(client):
    response = client.post("/api/micro-jobs", json={
        "title": "x", "description": "y", "postedBy": 1, "compensation": 0,
    })
    assert response.status_code == 400


def test_create_job_titre_vide(client):
    response = client.post("/api/micro-jobs", json={
        "title": "  ", "description": "y", "postedBy": 1, "compensation": 10,
    })
    assert response.status_code == 400


def test_list_jobs(client):
    make_job(client, "A")
    make_job(client, "B")

    response = client.get("/api/micro-jobs")

    assert response.status_code == 200
    assert [j["title"] for j in response.json()] == ["A", "B"]


def test_list_jobs_filtre_statut(client):
    a = make_job(client, "A")
    make_job(client, "B")
    client.put(f"/api/micro-jobs/{a['id']}/status", json={"status": "assigned"})

    response = client.get("/api/micro-jobs", params={"status": "open"})

    assert [j["title"] for j in response.json()] == ["B"]


def test_get_job(client):
    job = make_job(client, "Logo")
    assert client.get(f"/api/micro-jobs/{job['id']}").json()["title"] == "Logo"
    assert client.get("/api/micro-jobs/99").status_code == 404


def test_update_status(client):
    job = make_job(client)
    response = client.put(f"/api/micro-jobs/{job['id']}/status", json={"status": "completed"})
    assert response.status_code == 200
    assert response.json()["status"] == "completed"


def test_update_status_invalide(client):
    job = make_job(client)
    response = client.put(f"/api/micro-jobs/{job['id']}/status", json={"status": "pending"})
    assert response.status_code == 400


def test_update_status_introuvable(client):
    assert client.put("/api/micro-jobs/99/status", json={"status": "open"}).status_code == 404


def test_update_status_id_invalide(client):
    assert client.put("/api/micro-jobs/abc/status", json={"status": "open"}).status_code == 400
