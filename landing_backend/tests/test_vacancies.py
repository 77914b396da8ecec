"""Tests for /api/vacancies"""
from landing_backend.app.models.application import Application
from landing_backend.app.models.vacancy import Vacancy


def _vacancy_body(**overrides):
    body = {
        "jobTitle": "Desarrollador Full Stack",
        "mode": "Híbrido",
        "yearsExperience": 2,
        "shortDescription": "React y Node",
        "description": "Trabajo en producto.",
        "stackRequired": ["React", "Node.js"],
    }
    body.update(overrides)
    return body


def test_create_vacancy_defaults_status_open_and_derives_slug(client):
    r = client.post("/api/vacancies", json=_vacancy_body())
    assert r.status_code == 201
    data = r.json()
    assert data["status"] == "open"
    assert data["isActive"] is True
    assert data["slug"] == "desarrollador-full-stack"
    assert data["stackRequired"] == ["React", "Node.js"]


def test_create_vacancy_explicit_slug_is_normalized(client):
    r = client.post("/api/vacancies", json=_vacancy_body(slug="  Mi Vacante!! Especial "))
    assert r.status_code == 201
    assert r.json()["slug"] == "mi-vacante-especial"


def test_create_vacancy_duplicate_slug_conflicts(client):
    assert client.post("/api/vacancies", json=_vacancy_body()).status_code == 201
    r = client.post("/api/vacancies", json=_vacancy_body())
    assert r.status_code == 409
    assert r.json()["errorCode"] == "VACANCY_SLUG_ALREADY_EXISTS"


def test_create_vacancy_rejects_invalid_mode(client):
    r = client.post("/api/vacancies", json=_vacancy_body(mode="Marte"))
    assert r.status_code == 400
    assert r.json()["errorCode"] == "VACANCY_INVALID_MODE"


def test_create_vacancy_rejects_empty_stack(client):
    r = client.post("/api/vacancies", json=_vacancy_body(stackRequired=[]))
    assert r.status_code == 400
    assert r.json()["errorCode"] == "VACANCY_INVALID_STACK"


def test_create_vacancy_rejects_negative_experience(client):
    r = client.post("/api/vacancies", json=_vacancy_body(yearsExperience=-1))
    assert r.status_code == 400
    assert r.json()["errorCode"] == "VACANCY_INVALID_YEARS_EXPERIENCE"


def test_create_vacancy_missing_field_is_validation_error(client):
    body = _vacancy_body()
    del body["description"]
    r = client.post("/api/vacancies", json=body)
    assert r.status_code == 400
    data = r.json()
    assert data["errorCode"] == "VALIDATION_ERROR"
    assert any(d["field"] == "description" for d in data["details"])


def test_list_vacancies_paginates_with_meta(client, make_vacancy):
    for i in range(3):
        make_vacancy(slug=f"vacante-{i}", job_title=f"Vacante {i}")
    r = client.get("/api/vacancies", params={"page": 2, "limit": 2})
    assert r.status_code == 200
    data = r.json()
    assert len(data["items"]) == 1
    assert data["meta"] == {
        "currentPage": 2,
        "itemsPerPage": 2,
        "totalItems": 3,
        "totalPages": 2,
        "hasNextPage": False,
        "hasPreviousPage": True,
    }


def test_list_vacancies_filters_and_search(client, make_vacancy):
    make_vacancy(slug="python-dev", job_title="Python Dev", stack_required=["Django"])
    make_vacancy(slug="go-dev", job_title="Go Dev", stack_required=["Go"], status="closed", mode="Presencial")
    r = client.get("/api/vacancies", params={"status": "closed"})
    assert [v["slug"] for v in r.json()["items"]] == ["go-dev"]

    r = client.get("/api/vacancies", params={"mode": "Remoto"})
    assert [v["slug"] for v in r.json()["items"]] == ["python-dev"]

    r = client.get("/api/vacancies", params={"search": "django"})
    assert [v["slug"] for v in r.json()["items"]] == ["python-dev"]


def test_list_vacancies_invalid_status_filter(client):
    r = client.get("/api/vacancies", params={"status": "archived"})
    assert r.status_code == 400
    assert r.json()["errorCode"] == "VACANCY_INVALID_STATUS"


def test_get_vacancy_not_found_error_body(client):
    r = client.get("/api/vacancies/missing-id")
    assert r.status_code == 404
    data = r.json()
    assert data["errorCode"] == "VACANCY_NOT_FOUND"
    assert data["statusCode"] == 404
    assert data["path"] == "/api/vacancies/missing-id"
    assert data["method"] == "GET"
    assert data["message"] == "Vacante no encontrada"
    assert "timestamp" in data


def test_get_vacancy_by_slug_with_applications(client, db_session, open_vacancy):
    db_session.add(
        Application(vacancy_id=open_vacancy.id, name="Eva", email="eva@example.com", phone="600000000")
    )
    db_session.commit()

    r = client.get(f"/api/vacancies/slug/{open_vacancy.slug}")
    assert r.status_code == 200
    assert "applications" not in r.json()

    r = client.get(f"/api/vacancies/slug/{open_vacancy.slug}", params={"includeApplications": "true"})
    assert r.status_code == 200
    apps = r.json()["applications"]
    assert len(apps) == 1
    assert apps[0]["email"] == "eva@example.com"


def test_get_vacancy_by_unknown_slug(client):
    r = client.get("/api/vacancies/slug/no-existe")
    assert r.status_code == 404
    assert r.json()["errorCode"] == "VACANCY_SLUG_NOT_FOUND"


def test_update_vacancy_title_collision_gets_suffix(client, make_vacancy):
    make_vacancy(slug="data-engineer", job_title="Data Engineer")
    other = make_vacancy(slug="otra", job_title="Otra")
    r = client.put(f"/api/vacancies/{other.id}", json={"jobTitle": "Data Engineer"})
    assert r.status_code == 200
    slug = r.json()["slug"]
    assert slug.startswith("data-engineer-")
    assert len(slug) == len("data-engineer-") + 4


def test_update_vacancy_explicit_slug_collision_conflicts(client, make_vacancy):
    make_vacancy(slug="taken", job_title="Taken")
    other = make_vacancy(slug="free", job_title="Free")
    r = client.put(f"/api/vacancies/{other.id}", json={"slug": "taken"})
    assert r.status_code == 409
    assert r.json()["errorCode"] == "VACANCY_SLUG_ALREADY_EXISTS"


def test_update_vacancy_slug_without_word_characters_rejected(client, db_session, open_vacancy):
    r = client.put(f"/api/vacancies/{open_vacancy.id}", json={"slug": "!!!", "jobTitle": "Nuevo título"})
    assert r.status_code == 400
    assert r.json()["errorCode"] == "VACANCY_INVALID_SLUG"
    db_session.expire_all()
    vacancy = db_session.get(Vacancy, open_vacancy.id)
    assert vacancy.slug == "desarrollador-backend"
    assert vacancy.job_title == "Desarrollador Backend"


def test_update_vacancy_blank_slug_keeps_current_one(client, open_vacancy):
    r = client.put(f"/api/vacancies/{open_vacancy.id}", json={"slug": "", "yearsExperience": 5})
    assert r.status_code == 200
    assert r.json()["slug"] == "desarrollador-backend"
    assert r.json()["yearsExperience"] == 5


def test_create_vacancy_slug_without_word_characters_rejected(client):
    r = client.post("/api/vacancies", json=_vacancy_body(slug="¡¿?!"))
    assert r.status_code == 400
    assert r.json()["errorCode"] == "VACANCY_INVALID_SLUG"


def test_change_status(client, open_vacancy):
    r = client.patch(f"/api/vacancies/{open_vacancy.id}/status", json={"status": "on_hold"})
    assert r.status_code == 200
    assert r.json()["status"] == "on_hold"

    r = client.patch(f"/api/vacancies/{open_vacancy.id}/status", json={"status": "paused"})
    assert r.status_code == 400
    assert r.json()["errorCode"] == "VACANCY_INVALID_STATUS"


def test_logical_delete_deactivates_and_closes(client, db_session, open_vacancy):
    r = client.delete(f"/api/vacancies/{open_vacancy.id}")
    assert r.status_code == 204
    db_session.expire_all()
    vacancy = db_session.get(Vacancy, open_vacancy.id)
    assert vacancy is not None
    assert vacancy.is_active is False
    assert vacancy.status == "closed"


def test_physical_delete_removes_vacancy_and_applications(client, db_session, open_vacancy):
    db_session.add(
        Application(vacancy_id=open_vacancy.id, name="Eva", email="eva@example.com", phone="600000000")
    )
    db_session.commit()
    vacancy_id = open_vacancy.id

    r = client.delete(f"/api/vacancies/{vacancy_id}", params={"physicalDelete": "true"})
    assert r.status_code == 204
    db_session.expire_all()
    assert db_session.get(Vacancy, vacancy_id) is None
    assert db_session.query(Application).filter(Application.vacancy_id == vacancy_id).count() == 0
