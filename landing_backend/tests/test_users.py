"""Tests for /api/users, including the default card/curriculum bootstrap"""
from unittest.mock import MagicMock, patch

from landing_backend.app.core.config import DEFAULT_CARD_CONFIGURATION
from landing_backend.app.core.error_catalog import UserErrors
from landing_backend.app.core.exceptions import AppError
from landing_backend.app.models.card_configuration import CardConfiguration
from landing_backend.app.models.curriculum import Curriculum
from landing_backend.app.models.user import User
from landing_backend.app.schemas.user import UserCreate
from landing_backend.app.services.card_configuration_service import CardConfigurationService
from landing_backend.app.services.user_service import UserService


def test_create_user_bootstraps_card_and_curriculum(client, db_session, user_payload):
    r = client.post("/api/users", json=user_payload)
    assert r.status_code == 201
    data = r.json()
    assert data["slug"] == "luis-prez"
    assert data["fullName"] == "Luis Pérez"
    assert data["isActive"] is True
    assert data["showCurriculum"] is False

    card = data["cardConfiguration"]
    assert card["userId"] == data["id"]
    assert card["aboveFontFamily"] == DEFAULT_CARD_CONFIGURATION["above_font_family"]
    assert card["bgColor"] == "#FFFFFF"
    assert data["curriculum"]["userId"] == data["id"]

    assert db_session.query(CardConfiguration).filter(CardConfiguration.user_id == data["id"]).count() == 1
    assert db_session.query(Curriculum).filter(Curriculum.user_id == data["id"]).count() == 1


def test_create_user_survives_card_failure(client, db_session, user_payload):
    with patch.object(
        CardConfigurationService,
        "create",
        side_effect=RuntimeError("card table unavailable"),
    ):
        r = client.post("/api/users", json=user_payload)
    assert r.status_code == 201
    data = r.json()
    assert data["cardConfiguration"] is None
    # the curriculum is still attempted after the card failed
    assert data["curriculum"]["userId"] == data["id"]
    assert db_session.query(User).filter(User.id == data["id"]).count() == 1


def test_create_user_result_reports_failures(db_session):
    service = UserService(db_session)
    with patch.object(CardConfigurationService, "create", side_effect=RuntimeError("boom")):
        result = service.create(UserCreate(first_name="Sofía", last_name="Ruiz", email="sofia@example.com"))
    assert result.user.id
    assert result.card_configuration_created is False
    assert result.curriculum_created is True
    assert result.failures == ["card_configuration"]
    assert result.defaults_created is False


def test_create_user_duplicate_email(client, user_payload):
    assert client.post("/api/users", json=user_payload).status_code == 201
    r = client.post("/api/users", json={**user_payload, "firstName": "Otro"})
    assert r.status_code == 409
    assert r.json()["errorCode"] == "USER_ALREADY_EXISTS"


def test_create_user_slug_collision_gets_suffix(client, test_user):
    r = client.post(
        "/api/users",
        json={"firstName": "Ana", "lastName": "Garcia", "email": "otra.ana@example.com"},
    )
    assert r.status_code == 201
    slug = r.json()["slug"]
    assert slug != "ana-garcia"
    assert slug.startswith("ana-garcia-")


def test_create_user_invalid_email(client, user_payload):
    r = client.post("/api/users", json={**user_payload, "email": "sin-arroba"})
    assert r.status_code == 400
    assert r.json()["errorCode"] == "USER_INVALID_EMAIL"


def test_create_user_notifies_external_service(db_session):
    notifier = MagicMock()
    service = UserService(db_session, notifier=notifier)
    result = service.create(UserCreate(first_name="Sofía", last_name="Ruiz", email="sofia@example.com"))
    notifier.notify_user_created.assert_called_once_with(result.user.id)


def test_create_user_ignores_notifier_failure(db_session):
    notifier = MagicMock()
    notifier.notify_user_created.side_effect = AppError(UserErrors.EXTERNAL_SERVICE_ERROR)
    service = UserService(db_session, notifier=notifier)
    result = service.create(UserCreate(first_name="Sofía", last_name="Ruiz", email="sofia@example.com"))
    assert result.defaults_created is True


def test_get_user_by_id_and_slug(client, test_user):
    r = client.get(f"/api/users/{test_user.id}")
    assert r.status_code == 200
    assert r.json()["email"] == "ana@example.com"

    r = client.get("/api/users/slug/ana-garcia")
    assert r.status_code == 200
    assert r.json()["id"] == test_user.id

    r = client.get("/api/users/slug/nadie")
    assert r.status_code == 404
    assert r.json()["errorCode"] == "USER_SLUG_NOT_FOUND"


def test_list_users_search_by_email(client, test_user, user_payload):
    client.post("/api/users", json=user_payload)
    r = client.get("/api/users", params={"search": "luis@"})
    data = r.json()
    assert data["meta"]["totalItems"] == 1
    assert data["items"][0]["email"] == "luis@example.com"


def test_update_user_slug_conflict(client, test_user, user_payload):
    created = client.post("/api/users", json=user_payload).json()
    r = client.patch(f"/api/users/{created['id']}", json={"slug": "ana-garcia"})
    assert r.status_code == 409
    assert r.json()["message"] == "Ya existe un usuario con ese slug"


def test_update_user_fields(client, test_user):
    r = client.patch(f"/api/users/{test_user.id}", json={"role": "CTO", "showCurriculum": False})
    assert r.status_code == 200
    assert r.json()["role"] == "CTO"
    assert r.json()["showCurriculum"] is False


def test_delete_user_is_logical(client, db_session, test_user):
    r = client.delete(f"/api/users/{test_user.id}")
    assert r.status_code == 204
    db_session.expire_all()
    assert db_session.get(User, test_user.id).is_active is False
