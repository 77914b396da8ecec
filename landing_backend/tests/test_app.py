"""Tests for app-level behaviour: health, request ids, error body normalization"""
import logging
from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from landing_backend.app.core.logging_config import RequestIdFilter
from landing_backend.app.services.vacancy_service import VacancyService


def test_health_and_root(client):
    assert client.get("/health").json() == {"status": "healthy"}
    r = client.get("/")
    assert r.status_code == 200
    assert "version" in r.json()


def test_request_id_header(client):
    r = client.get("/health")
    assert r.headers.get("X-Request-ID")


def test_unknown_route_uses_error_body(client):
    r = client.get("/api/nothing-here")
    assert r.status_code == 404
    data = r.json()
    assert data["errorCode"] == "HTTP_404"
    assert data["path"] == "/api/nothing-here"
    assert data["method"] == "GET"


def test_unexpected_persistence_error_becomes_database_error(client):
    with patch.object(
        VacancyService,
        "_slug_taken",
        side_effect=OperationalError("SELECT 1", {}, Exception("database is locked")),
    ):
        r = client.post(
            "/api/vacancies",
            json={
                "jobTitle": "QA",
                "mode": "Remoto",
                "yearsExperience": 1,
                "shortDescription": "Pruebas",
                "description": "Automatización",
                "stackRequired": ["pytest"],
            },
        )
    assert r.status_code == 500
    data = r.json()
    assert data["errorCode"] == "VACANCY_DATABASE_ERROR"
    assert data["message"] == "Error en la base de datos"


def test_query_validation_error(client):
    r = client.get("/api/vacancies", params={"page": 0})
    assert r.status_code == 400
    assert r.json()["errorCode"] == "VALIDATION_ERROR"


def test_log_records_carry_request_id(client, caplog):
    caplog.handler.addFilter(RequestIdFilter())
    caplog.set_level(logging.INFO, logger="landing_backend")
    r = client.get("/health")
    request_ids = {rec.request_id for rec in caplog.records if rec.name == "landing_backend.http"}
    assert request_ids == {r.headers["X-Request-ID"]}


def test_request_id_filter_outside_a_request():
    record = logging.LogRecord("landing_backend.test", logging.INFO, __file__, 1, "hola", None, None)
    assert RequestIdFilter().filter(record) is True
    assert record.request_id == "-"
