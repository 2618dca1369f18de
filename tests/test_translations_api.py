"""HTTP surface: envelopes, error codes and the create/list/update/delete lifecycle."""

from datetime import datetime, timedelta

import pytest
from sqlalchemy.exc import OperationalError

from repositories.translation_repo import TranslationRepository


@pytest.fixture
def headers(auth_headers):
    return auth_headers("user-alice")


def _create(client, headers, **fields):
    body = {"originalText": "Hola", "translatedText": "Hello", **fields}
    res = client.post("/translations", json=body, headers=headers)
    assert res.status_code == 201, res.text
    return res.json()["data"]["translation"]


def test_end_to_end_lifecycle(client, headers):
    res = client.post(
        "/translations",
        json={"originalText": "Hola", "translatedText": "Hello", "sourceLanguage": "es", "targetLanguage": "en"},
        headers=headers,
    )
    assert res.status_code == 201
    body = res.json()
    assert body["success"] is True
    translation = body["data"]["translation"]
    assert translation["id"]
    assert translation["createdAt"]
    assert translation["userId"] == "user-alice"
    assert translation["isFavorite"] is False

    listing = client.get("/translations", headers=headers).json()
    assert listing["data"]["total"] == 1
    assert listing["data"]["items"] == [translation]

    res = client.patch(f"/translations/{translation['id']}", json={"isFavorite": True}, headers=headers)
    assert res.status_code == 200
    updated = res.json()["data"]["translation"]
    assert updated["isFavorite"] is True
    assert updated["originalText"] == "Hola"

    favorites = client.get("/translations", params={"favoritesOnly": "true"}, headers=headers).json()
    assert favorites["data"]["total"] == 1

    res = client.delete(f"/translations/{translation['id']}", headers=headers)
    assert res.status_code == 200
    assert res.json() == {"success": True, "data": {}}

    assert client.get("/translations", headers=headers).json()["data"]["total"] == 0

    res = client.delete(f"/translations/{translation['id']}", headers=headers)
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NOT_FOUND"


def test_client_supplied_owner_is_ignored(client, headers):
    translation = _create(client, headers, userId="user-mallory", createdAt="2000-01-01T00:00:00Z")
    assert translation["userId"] == "user-alice"
    assert not translation["createdAt"].startswith("2000")


@pytest.mark.parametrize(
    "method, path, kwargs",
    [
        ("post", "/translations", {"json": {"originalText": "Hola", "translatedText": "Hello"}}),
        ("get", "/translations", {}),
        ("patch", "/translations/abc", {"json": {"isFavorite": True}}),
        ("delete", "/translations/abc", {}),
        ("get", "/user/me", {}),
    ],
)
def test_missing_token_is_unauthorized(client, method, path, kwargs):
    res = getattr(client, method)(path, **kwargs)
    assert res.status_code == 401
    assert res.json() == {
        "success": False,
        "error": {"code": "UNAUTHORIZED", "message": "You must be signed in to perform this action."},
    }


def test_garbage_token_is_unauthorized(client):
    res = client.get("/translations", headers={"Authorization": "Bearer not-a-jwt"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHORIZED"


def test_me_returns_resolved_identity(client, headers):
    res = client.get("/user/me", headers=headers)
    assert res.status_code == 200
    assert res.json() == {"userId": "user-alice"}


@pytest.mark.parametrize(
    "body",
    [
        {"translatedText": "Hello"},
        {"originalText": "", "translatedText": "Hello"},
        {"originalText": "Hola", "translatedText": ""},
        {"originalText": "Hola", "translatedText": "Hello", "isFavorite": "yes"},
    ],
)
def test_create_validation_failures(client, headers, body):
    res = client.post("/translations", json=body, headers=headers)
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_FAILED"
    assert error["details"]


def test_update_without_fields_is_validation_failure_even_without_token(client):
    res = client.patch("/translations/abc", json={})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_FAILED"


def test_update_rejects_null_for_required_text(client, headers):
    translation = _create(client, headers)
    res = client.patch(f"/translations/{translation['id']}", json={"originalText": None}, headers=headers)
    assert res.status_code == 400


def test_sparse_update_over_http(client, headers):
    translation = _create(client, headers, originalText="A", translatedText="B", contextHint="browser")
    res = client.patch(f"/translations/{translation['id']}", json={"translatedText": "C"}, headers=headers)
    updated = res.json()["data"]["translation"]
    assert updated["originalText"] == "A"
    assert updated["translatedText"] == "C"
    assert updated["contextHint"] == "browser"
    assert updated["createdAt"] == translation["createdAt"]


def test_other_users_records_are_invisible(client, headers, auth_headers):
    translation = _create(client, headers)
    mallory = auth_headers("user-mallory")

    res = client.patch(f"/translations/{translation['id']}", json={"isFavorite": True}, headers=mallory)
    assert res.status_code == 404
    assert res.json()["error"]["code"] == "NOT_FOUND"

    res = client.delete(f"/translations/{translation['id']}", headers=mallory)
    assert res.status_code == 404

    assert client.get("/translations", headers=mallory).json()["data"] == {"items": [], "total": 0}

    (item,) = client.get("/translations", headers=headers).json()["data"]["items"]
    assert item["isFavorite"] is False


def test_storage_failure_is_reported_without_details(client, headers, monkeypatch):
    def broken(self, user_id, *, favorites_only=False):
        raise OperationalError("SELECT", {}, Exception("database is locked"))

    monkeypatch.setattr(TranslationRepository, "list_by_owner", broken)
    res = client.get("/translations", headers=headers)
    assert res.status_code == 500
    error = res.json()["error"]
    assert error["code"] == "STORAGE_FAILURE"
    assert "locked" not in error["message"]


def test_status(client):
    assert client.get("/status").json() == {"status": "ok"}


def test_undecodable_body_gets_error_envelope(client, headers):
    body = b'{"originalText": "\xff", "translatedText": "Hello"}'
    res = client.post("/translations", content=body, headers={**headers, "Content-Type": "application/json"})
    assert res.status_code == 400
    assert res.json()["success"] is False
    assert res.json()["error"]["code"] == "VALIDATION_FAILED"


def test_unknown_route_and_method_get_error_envelope(client, headers):
    res = client.get("/nope", headers=headers)
    assert res.status_code == 404
    assert res.json() == {"success": False, "error": {"code": "NOT_FOUND", "message": "Not Found"}}

    res = client.put("/translations/abc", json={"isFavorite": True}, headers=headers)
    assert res.status_code == 405
    assert res.json()["error"]["code"] == "HTTP_ERROR"


def test_created_at_is_sent_with_utc_offset(client, headers):
    translation = _create(client, headers)
    created_at = datetime.fromisoformat(translation["createdAt"])
    assert created_at.utcoffset() == timedelta(0)
