"""Tests for /api/curriculums"""
from landing_backend.app.models.user import User


def test_create_and_get_by_user(client, test_user):
    r = client.post(
        "/api/curriculums",
        json={"userId": test_user.id, "aboutMe": "Backend", "githubSlug": "ana"},
    )
    assert r.status_code == 201
    created = r.json()

    r = client.get(f"/api/curriculums/user/{test_user.id}")
    assert r.status_code == 200
    assert r.json()["id"] == created["id"]
    assert r.json()["githubSlug"] == "ana"


def test_one_curriculum_per_user(client, test_user):
    client.post("/api/curriculums", json={"userId": test_user.id})
    r = client.post("/api/curriculums", json={"userId": test_user.id})
    assert r.status_code == 409
    assert r.json()["errorCode"] == "CURRICULUM_ALREADY_EXISTS"


def test_create_or_update_upserts_by_user(client, test_user):
    r = client.post("/api/curriculums/create-or-update", json={"userId": test_user.id, "aboutMe": "v1"})
    assert r.status_code == 200
    first = r.json()

    r = client.post(
        "/api/curriculums/create-or-update",
        json={"userId": test_user.id, "aboutMe": "v2", "linkedinSlug": "ana-in"},
    )
    assert r.status_code == 200
    second = r.json()
    assert second["id"] == first["id"]
    assert second["aboutMe"] == "v2"
    assert second["linkedinSlug"] == "ana-in"


def test_update_to_missing_user(client, test_user):
    created = client.post("/api/curriculums", json={"userId": test_user.id}).json()
    r = client.put(f"/api/curriculums/{created['id']}", json={"userId": "ghost"})
    assert r.status_code == 404
    assert r.json()["errorCode"] == "CURRICULUM_USER_NOT_FOUND"


def test_update_moves_to_user_without_curriculum(client, db_session, test_user):
    other = User(first_name="Leo", last_name="Sanz", email="leo@example.com", slug="leo-sanz")
    db_session.add(other)
    db_session.commit()
    created = client.post("/api/curriculums", json={"userId": test_user.id}).json()

    r = client.put(f"/api/curriculums/{created['id']}", json={"userId": other.id, "aboutMe": "movido"})
    assert r.status_code == 200
    assert r.json()["userId"] == other.id


def test_delete(client, test_user):
    created = client.post("/api/curriculums", json={"userId": test_user.id}).json()
    assert client.delete(f"/api/curriculums/{created['id']}").status_code == 204
    r = client.get(f"/api/curriculums/{created['id']}")
    assert r.status_code == 404
    assert r.json()["errorCode"] == "CURRICULUM_NOT_FOUND"
