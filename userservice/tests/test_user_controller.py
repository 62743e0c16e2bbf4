from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from userservice.container import Container
from userservice.shared.errors.base import InfrastructureError

from .conftest import SESSION_TTL, FakeClock


def _register(client, username: str = "alice", password: str = "password1"):
    return client.post("/user/register", json={"userName": username, "password": password})


def _login(client, username: str = "alice", password: str = "password1"):
    return client.post("/user/login", json={"userName": username, "password": password})


def _token(client, username: str = "alice", password: str = "password1") -> str:
    return _login(client, username, password).get_json()["data"]["token"]


def test_register_success_envelope(client) -> None:
    response = _register(client)

    assert response.status_code == 200
    assert response.get_json() == {
        "status": True,
        "code": "2000",
        "message": "business executed successfully",
        "data": None,
    }


def test_register_accepts_form_post(client) -> None:
    response = client.post("/user/register", data={"userName": "bob", "password": "password1"})

    assert response.get_json()["status"] is True
    assert _login(client, "bob").get_json()["status"] is True


def test_register_duplicate_is_in_band_failure(client) -> None:
    _register(client)

    response = _register(client)

    assert response.status_code == 200
    body = response.get_json()
    assert body["status"] is False
    assert body["code"] == "4001"


def test_register_validation_errors(client) -> None:
    response = client.post("/user/register", json={"userName": "   ", "password": "short"})

    assert response.status_code == 400
    body = response.get_json()
    assert body["code"] == "4007"
    fields = {error["field"] for error in body["data"]}
    assert fields == {"userName", "password"}
    assert all(error["message"] for error in body["data"])


@pytest.mark.parametrize("password", ["1234567", "x" * 21])
def test_register_password_length_bounds(client, password: str) -> None:
    assert _register(client, password=password).status_code == 400


@pytest.mark.parametrize("password", ["12345678", "x" * 20])
def test_register_password_length_inclusive(client, password: str) -> None:
    assert _register(client, password=password).get_json()["status"] is True


def test_login_returns_token_and_username(client) -> None:
    _register(client)

    body = _login(client).get_json()

    assert body["status"] is True
    assert body["data"]["userName"] == "alice"
    assert body["data"]["token"]


def test_login_failures(client) -> None:
    _register(client)

    assert _login(client, password="password2").get_json()["code"] == "4002"
    assert _login(client, username="nobody").get_json()["code"] == "4006"


def test_login_missing_fields(client) -> None:
    response = client.post("/user/login", json={})

    assert response.status_code == 400
    assert {error["field"] for error in response.get_json()["data"]} == {"userName", "password"}


def test_protected_routes_reject_missing_token(client) -> None:
    for response in (
        client.get("/user?id=1"),
        client.put("/user/password", json={"oldPassword": "password1", "newPassword": "password2"}),
    ):
        body = response.get_json()
        assert response.status_code == 200
        assert body["status"] is False
        assert body["code"] == "4003"


def test_protected_route_rejects_unknown_token(client) -> None:
    response = client.get("/user?id=1", headers={"token": "never-issued"})

    assert response.get_json()["code"] == "4003"


def test_get_profile(client) -> None:
    _register(client)
    token = _token(client)

    response = client.get("/user?id=1", headers={"token": token})

    assert response.get_json()["data"] == {"id": 1, "userName": "alice"}


def test_get_profile_accepts_bearer_token(client) -> None:
    _register(client)
    token = _token(client)

    response = client.get("/user?id=1", headers={"Authorization": f"Bearer {token}"})

    assert response.get_json()["status"] is True


def test_get_profile_bad_id(client) -> None:
    _register(client)
    token = _token(client)

    missing = client.get("/user", headers={"token": token})
    not_a_number = client.get("/user?id=abc", headers={"token": token})
    unknown = client.get("/user?id=99", headers={"token": token})

    assert missing.status_code == 400
    assert missing.get_json()["data"][0]["field"] == "id"
    assert not_a_number.status_code == 400
    assert unknown.get_json()["code"] == "4006"


def test_get_profile_id_beyond_column_range(client) -> None:
    _register(client)
    token = _token(client)

    response = client.get("/user?id=99999999999999999999", headers={"token": token})

    assert response.status_code == 400
    body = response.get_json()
    assert body["code"] == "4007"
    assert body["data"][0]["field"] == "id"


def test_change_password_uses_session_identity(client) -> None:
    _register(client)
    token = _token(client)

    response = client.put(
        "/user/password",
        json={"oldPassword": "password1", "newPassword": "password2"},
        headers={"token": token},
    )

    assert response.get_json()["status"] is True
    assert _login(client).get_json()["code"] == "4002"
    assert _login(client, password="password2").get_json()["status"] is True


def test_change_password_wrong_old_password(client) -> None:
    _register(client)
    token = _token(client)

    response = client.put(
        "/user/password",
        json={"oldPassword": "password9", "newPassword": "password2"},
        headers={"token": token},
    )

    assert response.get_json()["code"] == "4002"
    assert _login(client).get_json()["status"] is True


def test_change_password_validates_lengths(client) -> None:
    _register(client)
    token = _token(client)

    response = client.put(
        "/user/password",
        json={"oldPassword": "password1", "newPassword": "short"},
        headers={"token": token},
    )

    assert response.status_code == 400
    assert response.get_json()["data"][0]["field"] == "newPassword"


@pytest.mark.parametrize("body", [["oldPassword"], "password1", []])
def test_change_password_rejects_non_object_body(client, body) -> None:
    _register(client)
    token = _token(client)

    response = client.put("/user/password", json=body, headers={"token": token})

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["code"] == "4007"
    assert payload["data"] == [{"field": "body", "message": "request body must be a JSON object"}]
    assert _login(client).get_json()["status"] is True


def test_session_expires_over_http(client, clock: FakeClock) -> None:
    _register(client)
    token = _token(client)

    clock.advance(SESSION_TTL)

    assert client.get("/user?id=1", headers={"token": token}).get_json()["code"] == "4003"


def test_alice_scenario_over_http(client) -> None:
    assert _register(client).get_json()["status"] is True
    first = _token(client)

    profile = client.get("/user?id=1", headers={"token": first}).get_json()
    assert profile["data"]["userName"] == "alice"

    changed = client.put(
        "/user/password",
        json={"oldPassword": "password1", "newPassword": "password2"},
        headers={"token": first},
    )
    assert changed.get_json()["status"] is True
    assert _login(client).get_json()["code"] == "4002"

    second = _token(client, password="password2")
    assert second != first


def test_session_store_outage_returns_generic_failure(client, container: Container) -> None:
    _register(client)
    token = _token(client)
    container.session_store.get = MagicMock(  # type: ignore[method-assign]
        side_effect=InfrastructureError("session_store_unavailable")
    )

    response = client.get("/user?id=1", headers={"token": token})

    assert response.status_code == 500
    body = response.get_json()
    assert body == {
        "status": False,
        "code": "5000",
        "message": "business execution failed",
        "data": None,
    }


def test_unexpected_error_is_masked(client, container: Container) -> None:
    container.register_user_use_case.execute = MagicMock(  # type: ignore[method-assign]
        side_effect=RuntimeError("boom: secret detail")
    )

    response = _register(client)

    assert response.status_code == 500
    assert response.get_json()["code"] == "5000"
    assert "secret" not in response.get_data(as_text=True)


def test_health(client) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.get_json() == {"ok": True, "database": "ok", "session_store": "ok"}


def test_responses_carry_request_id(client) -> None:
    response = client.get("/api/health", headers={"X-Request-ID": "req-123"})

    assert response.headers["X-Request-ID"] == "req-123"
