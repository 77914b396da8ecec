"""Tests for /api/applications"""
from unittest.mock import patch

from landing_backend.app.models.application import Application
from landing_backend.app.services.application_service import ApplicationService


def _application_body(vacancy_id, **overrides):
    body = {
        "vacancyId": vacancy_id,
        "name": "Eva Martín",
        "email": "eva@example.com",
        "phone": "+34 600 000 000",
        "applicationMotivation": "Me encanta el producto",
    }
    body.update(overrides)
    return body


def test_create_application_always_pending(client, open_vacancy):
    r = client.post("/api/applications", json=_application_body(open_vacancy.id, status="accepted"))
    assert r.status_code == 201
    data = r.json()
    assert data["status"] == "pending"
    assert data["vacancyId"] == open_vacancy.id
    assert data["isActive"] is True


def test_duplicate_application_conflicts(client, open_vacancy):
    assert client.post("/api/applications", json=_application_body(open_vacancy.id)).status_code == 201
    r = client.post("/api/applications", json=_application_body(open_vacancy.id))
    assert r.status_code == 409
    assert r.json()["errorCode"] == "APPLICATION_ALREADY_APPLIED"


def test_same_email_can_apply_to_different_vacancies(client, make_vacancy):
    first = make_vacancy(slug="uno")
    second = make_vacancy(slug="dos")
    assert client.post("/api/applications", json=_application_body(first.id)).status_code == 201
    assert client.post("/api/applications", json=_application_body(second.id)).status_code == 201


def test_application_to_closed_vacancy_rejected(client, make_vacancy):
    vacancy = make_vacancy(status="closed")
    r = client.post("/api/applications", json=_application_body(vacancy.id))
    assert r.status_code == 403
    assert r.json()["errorCode"] == "APPLICATION_VACANCY_CLOSED"


def test_application_to_on_hold_vacancy_rejected(client, make_vacancy):
    vacancy = make_vacancy(status="on_hold")
    r = client.post("/api/applications", json=_application_body(vacancy.id))
    assert r.status_code == 403


def test_application_to_missing_vacancy(client, db_session):
    r = client.post("/api/applications", json=_application_body("nope"))
    assert r.status_code == 404
    assert r.json()["errorCode"] == "APPLICATION_VACANCY_NOT_FOUND"


def test_application_invalid_email(client, open_vacancy):
    r = client.post("/api/applications", json=_application_body(open_vacancy.id, email="no-es-email"))
    assert r.status_code == 400
    assert r.json()["errorCode"] == "APPLICATION_INVALID_EMAIL"


def test_list_applications_includes_vacancy_and_filters(client, make_vacancy):
    first = make_vacancy(slug="uno", job_title="Uno")
    second = make_vacancy(slug="dos", job_title="Dos")
    client.post("/api/applications", json=_application_body(first.id, email="a@example.com"))
    client.post("/api/applications", json=_application_body(second.id, email="b@example.com", name="Bruno"))

    r = client.get("/api/applications")
    data = r.json()
    assert data["meta"]["totalItems"] == 2
    assert all(item["vacancy"]["slug"] in ("uno", "dos") for item in data["items"])

    r = client.get("/api/applications", params={"vacancyId": second.id})
    assert [item["email"] for item in r.json()["items"]] == ["b@example.com"]

    r = client.get("/api/applications", params={"search": "bruno"})
    assert [item["email"] for item in r.json()["items"]] == ["b@example.com"]


def test_list_applications_by_vacancy(client, open_vacancy):
    client.post("/api/applications", json=_application_body(open_vacancy.id))
    r = client.get(f"/api/applications/vacancy/{open_vacancy.id}")
    assert r.status_code == 200
    assert r.json()["meta"]["totalItems"] == 1

    r = client.get("/api/applications/vacancy/missing")
    assert r.status_code == 404
    assert r.json()["errorCode"] == "APPLICATION_VACANCY_NOT_FOUND"


def test_update_status_is_permissive(client, open_vacancy):
    created = client.post("/api/applications", json=_application_body(open_vacancy.id)).json()
    for status in ("accepted", "pending", "rejected", "in_review"):
        r = client.patch(f"/api/applications/{created['id']}/status", json={"status": status})
        assert r.status_code == 200
        assert r.json()["status"] == status

    r = client.patch(f"/api/applications/{created['id']}/status", json={"status": "hired"})
    assert r.status_code == 400
    assert r.json()["errorCode"] == "APPLICATION_INVALID_STATUS"


def test_update_email_to_existing_one_conflicts(client, open_vacancy):
    client.post("/api/applications", json=_application_body(open_vacancy.id, email="a@example.com"))
    second = client.post("/api/applications", json=_application_body(open_vacancy.id, email="b@example.com")).json()
    r = client.put(f"/api/applications/{second['id']}", json={"email": "a@example.com"})
    assert r.status_code == 409
    assert r.json()["errorCode"] == "APPLICATION_ALREADY_APPLIED"


def test_put_does_not_change_status(client, db_session, open_vacancy):
    created = client.post("/api/applications", json=_application_body(open_vacancy.id)).json()
    r = client.put(f"/api/applications/{created['id']}", json={"status": "accepted", "name": "Eva M."})
    assert r.status_code == 200
    assert r.json()["status"] == "pending"
    assert r.json()["name"] == "Eva M."
    db_session.expire_all()
    assert db_session.get(Application, created["id"]).status == "pending"


def test_move_application_to_another_open_vacancy(client, make_vacancy):
    first = make_vacancy(slug="uno")
    second = make_vacancy(slug="dos")
    created = client.post("/api/applications", json=_application_body(first.id)).json()
    r = client.put(f"/api/applications/{created['id']}", json={"vacancyId": second.id})
    assert r.status_code == 200
    assert r.json()["vacancyId"] == second.id


def test_move_application_to_closed_vacancy_rejected(client, make_vacancy):
    first = make_vacancy(slug="uno")
    closed = make_vacancy(slug="cerrada", status="closed")
    created = client.post("/api/applications", json=_application_body(first.id)).json()
    r = client.put(f"/api/applications/{created['id']}", json={"vacancyId": closed.id})
    assert r.status_code == 403
    assert r.json()["errorCode"] == "APPLICATION_VACANCY_CLOSED"


def test_move_application_to_missing_vacancy(client, open_vacancy):
    created = client.post("/api/applications", json=_application_body(open_vacancy.id)).json()
    r = client.put(f"/api/applications/{created['id']}", json={"vacancyId": "no-existe"})
    assert r.status_code == 404
    assert r.json()["errorCode"] == "APPLICATION_VACANCY_NOT_FOUND"


def test_move_application_conflicts_on_target_vacancy_email(client, make_vacancy):
    first = make_vacancy(slug="uno")
    second = make_vacancy(slug="dos")
    client.post("/api/applications", json=_application_body(second.id, email="nuevo@example.com"))
    created = client.post("/api/applications", json=_application_body(first.id)).json()

    # the new email is checked against the target vacancy
    r = client.put(
        f"/api/applications/{created['id']}",
        json={"vacancyId": second.id, "email": "nuevo@example.com"},
    )
    assert r.status_code == 409
    assert r.json()["errorCode"] == "APPLICATION_ALREADY_APPLIED"


def test_move_application_conflicts_with_current_email(client, make_vacancy):
    first = make_vacancy(slug="uno")
    second = make_vacancy(slug="dos")
    client.post("/api/applications", json=_application_body(second.id))
    created = client.post("/api/applications", json=_application_body(first.id)).json()
    r = client.put(f"/api/applications/{created['id']}", json={"vacancyId": second.id})
    assert r.status_code == 409
    assert r.json()["errorCode"] == "APPLICATION_ALREADY_APPLIED"


def test_logical_delete_keeps_status(client, db_session, open_vacancy):
    created = client.post("/api/applications", json=_application_body(open_vacancy.id)).json()
    r = client.delete(f"/api/applications/{created['id']}")
    assert r.status_code == 204
    db_session.expire_all()
    application = db_session.get(Application, created["id"])
    assert application.is_active is False
    assert application.status == "pending"


def test_physical_delete_removes_cv_object(client, db_session, open_vacancy):
    cv_url = "https://landing-files.s3.us-east-1.amazonaws.com/kodeksa/application-resumes/x.pdf"
    created = client.post(
        "/api/applications", json=_application_body(open_vacancy.id, cvUrl=cv_url)
    ).json()
    with patch("landing_backend.app.services.application_service.delete_file", return_value=True) as delete_file:
        r = client.delete(f"/api/applications/{created['id']}", params={"physicalDelete": "true"})
    assert r.status_code == 204
    delete_file.assert_called_once_with(cv_url)
    db_session.expire_all()
    assert db_session.get(Application, created["id"]) is None


def _post_with_cv(client, vacancy_id, content=b"%PDF-1.4 fake", email="cv@example.com"):
    return client.post(
        "/api/applications/with-cv",
        data={
            "vacancyId": vacancy_id,
            "name": "Carla",
            "email": email,
            "phone": "611111111",
        },
        files={"cv": ("mi-cv.PDF", content, "application/pdf")},
    )


def test_with_cv_uploads_and_stores_url(client, open_vacancy):
    url = "https://landing-files.s3.us-east-1.amazonaws.com/kodeksa/application-resumes/abc.pdf"
    with patch("landing_backend.app.services.application_service.upload_file", return_value=url) as upload:
        r = _post_with_cv(client, open_vacancy.id)
    assert r.status_code == 201
    data = r.json()
    assert data["cvUrl"] == url
    assert data["status"] == "pending"
    args = upload.call_args.args
    assert args[0] == b"%PDF-1.4 fake"
    assert args[1].endswith(".pdf")
    assert args[2] == "kodeksa/application-resumes"


def test_with_cv_too_large(client, open_vacancy):
    with patch("landing_backend.app.services.application_service.upload_file") as upload:
        r = _post_with_cv(client, open_vacancy.id, content=b"x" * (5 * 1024 * 1024 + 1))
    assert r.status_code == 400
    assert r.json()["errorCode"] == "APPLICATION_CV_TOO_LARGE"
    upload.assert_not_called()


def test_with_cv_inactive_vacancy(client, make_vacancy):
    vacancy = make_vacancy(is_active=False)
    with patch("landing_backend.app.services.application_service.upload_file"):
        r = _post_with_cv(client, vacancy.id)
    assert r.status_code == 403
    assert r.json()["errorCode"] == "APPLICATION_VACANCY_INACTIVE"


def test_with_cv_duplicate(client, open_vacancy):
    client.post("/api/applications", json=_application_body(open_vacancy.id, email="cv@example.com"))
    with patch("landing_backend.app.services.application_service.upload_file"):
        r = _post_with_cv(client, open_vacancy.id)
    assert r.status_code == 409
    assert r.json()["errorCode"] == "APPLICATION_ALREADY_EXISTS"


def test_with_cv_removes_upload_when_commit_hits_duplicate(client, db_session, open_vacancy):
    client.post("/api/applications", json=_application_body(open_vacancy.id, email="cv@example.com"))
    url = "https://landing-files.s3.us-east-1.amazonaws.com/kodeksa/application-resumes/late.pdf"
    # a concurrent request inserted the same (vacancy, email) after the pre-check
    with patch.object(ApplicationService, "_already_applied", return_value=False), patch(
        "landing_backend.app.services.application_service.upload_file", return_value=url
    ), patch("landing_backend.app.services.application_service.delete_file", return_value=True) as delete_file:
        r = _post_with_cv(client, open_vacancy.id)
    assert r.status_code == 409
    assert r.json()["errorCode"] == "APPLICATION_ALREADY_EXISTS"
    delete_file.assert_called_once_with(url)
    assert db_session.query(Application).count() == 1


def test_with_cv_upload_failure(client, db_session, open_vacancy):
    with patch(
        "landing_backend.app.services.application_service.upload_file",
        side_effect=RuntimeError("S3 upload failed - AccessDenied: denied"),
    ):
        r = _post_with_cv(client, open_vacancy.id)
    assert r.status_code == 500
    assert r.json()["errorCode"] == "APPLICATION_CV_UPLOAD_ERROR"
    assert db_session.query(Application).count() == 0
