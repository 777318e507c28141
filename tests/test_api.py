"""Tests for the content API endpoints."""

from bson import ObjectId
from fastapi.testclient import TestClient


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_create_project_returns_stored_record(client, sample_project):
    response = client.post("/api/projects", json=sample_project)

    assert response.status_code == 200
    body = response.json()
    for key, value in sample_project.items():
        assert body[key] == value
    assert ObjectId.is_valid(body["id"])
    assert "created_at" in body and "updated_at" in body


def test_create_ignores_client_supplied_id(client, sample_project):
    supplied = str(ObjectId())

    body = client.post("/api/projects", json={**sample_project, "id": supplied}).json()

    assert body["id"] != supplied


def test_create_project_missing_fields(client, fake_db):
    response = client.post("/api/projects", json={"title": "Only a title"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"].startswith("Missing required fields")
    assert "subtitle" in body["error"]
    assert "image" in body["error"]
    assert {d["field"] for d in body["details"]} == {"subtitle", "description", "image"}
    assert fake_db["projects"].documents == []


def test_create_project_rejects_empty_strings(client, sample_project, fake_db):
    response = client.post("/api/projects", json={**sample_project, "title": ""})

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "title"
    assert fake_db["projects"].documents == []


def test_skill_level_out_of_range_is_rejected(client, sample_skill, fake_db):
    for level in (-1, 101, 250):
        response = client.post("/api/skills", json={**sample_skill, "level": level})

        assert response.status_code == 400
        assert [d["field"] for d in response.json()["details"]] == ["level"]
    assert fake_db["skills"].documents == []


def test_skill_level_bounds_are_accepted(client, sample_skill):
    for level in (0, 100):
        response = client.post("/api/skills", json={**sample_skill, "level": level})
        assert response.status_code == 200
        assert response.json()["level"] == level


def test_get_about_seeds_default(client, fake_db):
    first = client.get("/api/about")
    second = client.get("/api/about")

    assert first.status_code == 200
    body = first.json()
    assert body["title"] == "Your Name"
    assert body["subtitle"] == "Your Profession"
    assert body["description"] == "Your description here..."
    assert body["image"] == "/default-about.jpg"
    assert second.json()["id"] == body["id"]
    assert len(fake_db["abouts"].documents) == 1


def test_about_crud(client):
    created = client.post(
        "/api/about",
        json={
            "title": "Jane Doe",
            "subtitle": "Engineer",
            "description": "Builds things.",
            "image": "/jane.jpg",
        },
    ).json()

    assert client.get("/api/about").json()["id"] == created["id"]

    updated = client.put("/api/about", json={"_id": created["id"], "subtitle": "Architect"})
    assert updated.status_code == 200
    assert updated.json()["subtitle"] == "Architect"
    assert updated.json()["title"] == "Jane Doe"

    deleted = client.request("DELETE", "/api/about", json={"_id": created["id"]})
    assert deleted.json() == {"success": True}


def test_update_changes_only_supplied_fields(client, sample_project):
    created = client.post("/api/projects", json=sample_project).json()

    response = client.put("/api/projects", json={"id": created["id"], "title": "Renamed"})

    assert response.status_code == 200
    body = response.json()
    assert body["title"] == "Renamed"
    assert body["subtitle"] == sample_project["subtitle"]
    assert body["description"] == sample_project["description"]
    assert body["image"] == sample_project["image"]
    assert body["id"] == created["id"]


def test_update_missing_record_is_not_found(client):
    response = client.put("/api/projects", json={"id": str(ObjectId()), "title": "X"})

    assert response.status_code == 404
    assert response.json() == {"error": "Project not found"}


def test_update_without_id_is_rejected(client):
    response = client.put("/api/skills", json={"level": 50})

    assert response.status_code == 400
    assert response.json()["details"][0]["field"] == "id"


def test_update_validates_level(client, sample_skill):
    created = client.post("/api/skills", json=sample_skill).json()

    response = client.put("/api/skills", json={"id": created["id"], "level": 101})

    assert response.status_code == 400
    assert client.get("/api/skills").json()[0]["level"] == 80


def test_delete_nonexistent_is_idempotent(client):
    for record_id in (str(ObjectId()), "not-an-id"):
        response = client.request("DELETE", "/api/projects", json={"id": record_id})
        assert response.status_code == 200
        assert response.json() == {"success": True}


def test_skill_lifecycle(client, sample_skill):
    """Create, list, update and delete a skill end to end."""
    client.post("/api/skills", json={**sample_skill, "name": "Python"})
    created = client.post("/api/skills", json=sample_skill)
    assert created.status_code == 200
    skill_id = created.json()["id"]

    listed = client.get("/api/skills").json()
    assert listed[0]["id"] == skill_id
    assert len(listed) == 2

    client.put("/api/skills", json={"id": skill_id, "level": 90})
    listed = client.get("/api/skills").json()
    assert listed[0]["level"] == 90
    assert listed[0]["name"] == "Go"

    assert client.request("DELETE", "/api/skills", json={"id": skill_id}).json() == {
        "success": True
    }
    assert skill_id not in [s["id"] for s in client.get("/api/skills").json()]


def test_store_failure_returns_500(failing_client, sample_skill):
    listed = failing_client.get("/api/skills")
    created = failing_client.post("/api/skills", json=sample_skill)

    assert listed.status_code == 500
    assert listed.json() == {"error": "Failed to fetch skills"}
    assert created.status_code == 500
    assert "error" in created.json()


def test_store_timeout_returns_retryable_504(app, timeout_db):
    with TestClient(app) as client:
        response = client.get("/api/projects")

    assert response.status_code == 504
    assert response.json()["retryable"] is True
    assert response.headers["Retry-After"] == "1"


def test_timestamps_survive_round_trip(client, sample_project):
    created = client.post("/api/projects", json=sample_project).json()

    listed = client.get("/api/projects").json()[0]
    updated = client.put("/api/projects", json={"id": created["id"]}).json()

    assert listed["created_at"] == created["created_at"]
    assert listed["updated_at"] == created["updated_at"]
    assert updated["created_at"] == created["created_at"]


def test_seeded_about_timestamps_are_stable(client):
    first = client.get("/api/about").json()
    second = client.get("/api/about").json()

    assert first["created_at"] == second["created_at"]


def test_skill_level_rejects_booleans(client, sample_skill, fake_db):
    response = client.post("/api/skills", json={**sample_skill, "level": True})

    assert response.status_code == 400
    assert [d["field"] for d in response.json()["details"]] == ["level"]
    assert fake_db["skills"].documents == []

    created = client.post("/api/skills", json=sample_skill).json()
    response = client.put("/api/skills", json={"id": created["id"], "level": False})

    assert response.status_code == 400
    assert client.get("/api/skills").json()[0]["level"] == 80
