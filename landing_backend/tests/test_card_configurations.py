"""Tests for /api/card-configurations"""


def _create(client, user_id, **fields):
    return client.post("/api/card-configurations", json={"userId": user_id, **fields})


def test_create_and_fetch_by_user(client, test_user):
    r = _create(client, test_user.id, bgColor="#112233", textAbove="Hola")
    assert r.status_code == 201
    created = r.json()
    assert created["bgColor"] == "#112233"

    r = client.get(f"/api/card-configurations/user/{test_user.id}")
    assert r.status_code == 200
    assert r.json()["id"] == created["id"]

    r = client.get(f"/api/card-configurations/{created['id']}")
    assert r.status_code == 200
    assert r.json()["textAbove"] == "Hola"


def test_one_configuration_per_user(client, test_user):
    assert _create(client, test_user.id).status_code == 201
    r = _create(client, test_user.id)
    assert r.status_code == 409
    assert r.json()["errorCode"] == "CARD_CONFIG_ALREADY_EXISTS"


def test_create_for_missing_user(client, db_session):
    r = _create(client, "ghost")
    assert r.status_code == 404
    assert r.json()["errorCode"] == "CARD_CONFIG_USER_NOT_FOUND"


def test_invalid_color_reports_field(client, test_user):
    r = _create(client, test_user.id, textBelowColor="rojo")
    assert r.status_code == 400
    data = r.json()
    assert data["errorCode"] == "CARD_CONFIG_INVALID_COLOR"
    assert data["details"] == {"field": "text_below_color", "value": "rojo"}


def test_fetch_by_user_without_configuration(client, test_user):
    r = client.get(f"/api/card-configurations/user/{test_user.id}")
    assert r.status_code == 404
    assert r.json()["errorCode"] == "CARD_CONFIG_NOT_FOUND"


def test_update_and_reset(client, test_user):
    created = _create(client, test_user.id, aboveFontFamily="'Clash Display', sans-serif").json()
    r = client.put(f"/api/card-configurations/{created['id']}", json={"aboveFontSize": "4rem"})
    assert r.status_code == 200
    assert r.json()["aboveFontSize"] == "4rem"

    r = client.put(f"/api/card-configurations/{created['id']}/reset")
    assert r.status_code == 200
    data = r.json()
    assert data["aboveFontFamily"] == "Arial"
    assert data["aboveFontSize"] == "16px"
    assert data["aboveFontWeight"] == "normal"
    assert data["belowFontFamily"] == "Arial"
    assert data["bgColor"] == "#FFFFFF"


def test_delete(client, test_user):
    created = _create(client, test_user.id).json()
    assert client.delete(f"/api/card-configurations/{created['id']}").status_code == 204
    assert client.get(f"/api/card-configurations/{created['id']}").status_code == 404
