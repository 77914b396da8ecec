"""Tests for /api/skills and /api/work-experiences"""


def test_skill_crud(client, test_user):
    r = client.post(
        "/api/skills",
        json={"userId": test_user.id, "skillName": "FastAPI", "urlCertificate": "https://certs.example.com/1"},
    )
    assert r.status_code == 201
    skill = r.json()

    r = client.get(f"/api/skills/user/{test_user.id}")
    assert [s["skillName"] for s in r.json()] == ["FastAPI"]

    r = client.put(f"/api/skills/{skill['id']}", json={"skillName": "SQLAlchemy"})
    assert r.status_code == 200
    assert r.json()["skillName"] == "SQLAlchemy"

    r = client.get("/api/skills", params={"userId": test_user.id})
    assert r.json()["meta"]["totalItems"] == 1

    assert client.delete(f"/api/skills/{skill['id']}").status_code == 204
    r = client.get(f"/api/skills/{skill['id']}")
    assert r.status_code == 404
    assert r.json()["errorCode"] == "SKILL_NOT_FOUND"


def test_skill_validation(client, test_user):
    r = client.post("/api/skills", json={"userId": test_user.id, "skillName": "   "})
    assert r.json()["errorCode"] == "SKILL_INVALID_NAME"

    r = client.post("/api/skills", json={"userId": test_user.id, "skillName": "Go", "urlCertificate": "ftp://x"})
    assert r.json()["errorCode"] == "SKILL_INVALID_URL"

    r = client.post("/api/skills", json={"userId": "ghost", "skillName": "Go"})
    assert r.status_code == 404
    assert r.json()["errorCode"] == "SKILL_USER_NOT_FOUND"


def test_skills_for_missing_user(client, db_session):
    r = client.get("/api/skills/user/ghost")
    assert r.status_code == 404
    assert r.json()["errorCode"] == "SKILL_USER_NOT_FOUND"


def _experience(user_id, **overrides):
    body = {
        "userId": user_id,
        "role": "Backend Developer",
        "companyName": "Acme",
        "fromYear": "2020-01-01",
        "untilYear": "2022-06-30",
    }
    body.update(overrides)
    return body


def test_work_experience_crud_and_order(client, test_user):
    older = client.post("/api/work-experiences", json=_experience(test_user.id)).json()
    current = client.post(
        "/api/work-experiences",
        json=_experience(test_user.id, companyName="Beta", fromYear="2022-07-01", untilYear=None),
    )
    assert current.status_code == 201
    assert current.json()["untilYear"] is None

    r = client.get(f"/api/work-experiences/user/{test_user.id}")
    assert [e["companyName"] for e in r.json()] == ["Beta", "Acme"]

    r = client.put(f"/api/work-experiences/{older['id']}", json={"roleDescription": "APIs"})
    assert r.status_code == 200
    assert r.json()["roleDescription"] == "APIs"
    assert r.json()["fromYear"] == "2020-01-01"

    assert client.delete(f"/api/work-experiences/{older['id']}").status_code == 204


def test_work_experience_until_before_from(client, test_user):
    r = client.post(
        "/api/work-experiences",
        json=_experience(test_user.id, fromYear="2021-01-01", untilYear="2020-01-01"),
    )
    assert r.status_code == 400
    assert r.json()["errorCode"] == "WORK_EXPERIENCE_UNTIL_BEFORE_FROM"


def test_work_experience_update_checks_merged_dates(client, test_user):
    created = client.post("/api/work-experiences", json=_experience(test_user.id)).json()
    r = client.put(f"/api/work-experiences/{created['id']}", json={"untilYear": "2019-12-31"})
    assert r.status_code == 400
    assert r.json()["errorCode"] == "WORK_EXPERIENCE_UNTIL_BEFORE_FROM"


def test_work_experience_invalid_date_format(client, test_user):
    r = client.post("/api/work-experiences", json=_experience(test_user.id, fromYear="ayer"))
    assert r.status_code == 400
    assert r.json()["errorCode"] == "VALIDATION_ERROR"
