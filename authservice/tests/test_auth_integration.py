from __future__ import annotations

from collections.abc import Callable

import pytest
from flask import Flask
from flask.testing import FlaskClient

from authservice.infrastructure.db import SessionLocal
from authservice.infrastructure.db.models import SessionRecord, User
from authservice.shared.config.settings import SessionConfig

ANA = {"name": "Ana", "email": "ana@x.com", "password": "pw123"}


def _register_and_login(client: FlaskClient) -> None:
    assert client.post("/register", json=ANA).status_code == 201
    login = client.post("/login", json={"email": ANA["email"], "password": ANA["password"]})
    assert login.status_code == 200


@pytest.mark.parametrize("store", ["memory", "database"])
def test_register_login_session_logout_flow(
    make_app: Callable[..., Flask], store: str
) -> None:
    app = make_app(session=SessionConfig(store=store))

    with app.test_client() as client:
        register = client.post("/register", json=ANA)
        assert register.status_code == 201
        assert "message" in register.get_json()

        login = client.post("/login", json={"email": "ana@x.com", "password": "pw123"})
        assert login.status_code == 200
        assert "session_id=" in login.headers["Set-Cookie"]
        session_id = client.get_cookie("session_id").value

        session = client.get("/session")
        assert session.status_code == 200
        body = session.get_json()
        assert body["name"] == "Ana"
        assert body["email"] == "ana@x.com"
        assert isinstance(body["id"], int)

        logout = client.post("/logout")
        assert logout.status_code == 200
        assert client.get_cookie("session_id") is None

        assert client.get("/session").status_code == 401

        # The old id is dead server-side, not just forgotten by the client.
        client.set_cookie("session_id", session_id)
        assert client.get("/session").status_code == 401


def test_register_establishes_session(make_app: Callable[..., Flask]) -> None:
    app = make_app()

    with app.test_client() as client:
        client.post("/register", json=ANA)
        response = client.get("/session")

    assert response.status_code == 200
    assert response.get_json()["name"] == "Ana"


def test_duplicate_registration_keeps_single_record(make_app: Callable[..., Flask]) -> None:
    app = make_app()

    with app.test_client() as client:
        assert client.post("/register", json=ANA).status_code == 201
        duplicate = client.post(
            "/register", json={"name": "Ana2", "email": "ana@x.com", "password": "pw"}
        )
        assert duplicate.status_code == 400
        assert duplicate.get_json() == {"error": "User already exists"}

        users = client.get("/users").get_json()

    assert [u["email"] for u in users] == ["ana@x.com"]
    db = SessionLocal()
    try:
        assert db.query(User).filter(User.email == "ana@x.com").count() == 1
    finally:
        db.close()


def test_users_listing_never_exposes_password_material(make_app: Callable[..., Flask]) -> None:
    app = make_app()

    with app.test_client() as client:
        client.post("/register", json=ANA)
        client.post("/register", json={"name": "Bob", "email": "bob@x.com", "password": "pw9"})
        response = client.get("/users")

    assert response.status_code == 200
    users = response.get_json()
    assert [u["name"] for u in users] == ["Ana", "Bob"]
    assert all(set(u) == {"id", "name", "email"} for u in users)
    assert "pw123" not in response.get_data(as_text=True)


def test_login_failures_are_distinct_by_default(make_app: Callable[..., Flask]) -> None:
    app = make_app()

    with app.test_client() as client:
        client.post("/register", json=ANA)
        client.post("/logout")

        unknown = client.post("/login", json={"email": "ghost@x.com", "password": "pw123"})
        wrong = client.post("/login", json={"email": "ana@x.com", "password": "nope"})

        assert client.get("/session").status_code == 401

    assert unknown.status_code == 404
    assert unknown.get_json() == {"error": "User not found"}
    assert wrong.status_code == 401
    assert wrong.get_json() == {"error": "Invalid password"}
    assert "Set-Cookie" not in wrong.headers


def test_login_failures_can_be_uniform(make_app: Callable[..., Flask]) -> None:
    app = make_app(login_uniform_errors=True)

    with app.test_client() as client:
        client.post("/register", json=ANA)

        unknown = client.post("/login", json={"email": "ghost@x.com", "password": "pw123"})
        wrong = client.post("/login", json={"email": "ana@x.com", "password": "nope"})

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.get_json() == wrong.get_json() == {"error": "Invalid email or password"}


def test_clear_requires_authentication(make_app: Callable[..., Flask]) -> None:
    app = make_app()

    with app.test_client() as client:
        client.post("/register", json=ANA)
        client.post("/logout")

        response = client.post("/clear")
        users = client.get("/users").get_json()

    assert response.status_code == 401
    assert len(users) == 1


def test_clear_deletes_users_and_sessions(make_app: Callable[..., Flask]) -> None:
    app = make_app(session=SessionConfig(store="database"))

    with app.test_client() as client:
        client.post("/register", json={"name": "Bob", "email": "bob@x.com", "password": "pw9"})
        _register_and_login(client)

        response = client.post("/clear")
        assert response.status_code == 200
        assert response.get_json() == {"message": "All users deleted"}

        assert client.get("/users").get_json() == []
        assert client.get("/session").status_code == 401

    db = SessionLocal()
    try:
        assert db.query(User).count() == 0
        assert db.query(SessionRecord).count() == 0
    finally:
        db.close()


def test_clear_can_be_disabled(make_app: Callable[..., Flask]) -> None:
    app = make_app(enable_clear=False)

    with app.test_client() as client:
        _register_and_login(client)
        response = client.post("/clear")
        users = client.get("/users").get_json()

    assert response.status_code == 403
    assert len(users) == 1


def test_token_mode_flow(make_app: Callable[..., Flask]) -> None:
    app = make_app(auth_mode="token")

    with app.test_client() as client:
        register = client.post("/register", json=ANA)
        assert register.status_code == 201
        assert "Set-Cookie" not in register.headers

        login = client.post("/login", json={"email": "ana@x.com", "password": "pw123"})
        token = login.get_json()["token"]
        headers = {"Authorization": f"Bearer {token}"}

        session = client.get("/session", headers=headers)
        assert session.status_code == 200
        assert session.get_json()["name"] == "Ana"

        missing = client.get("/session")
        assert missing.status_code == 401
        assert missing.get_json() == {"error": "Token not provided"}

        invalid = client.get("/session", headers={"Authorization": "Bearer nope"})
        assert invalid.status_code == 401
        assert invalid.get_json() == {"error": "Invalid token"}

        assert client.post("/clear").status_code == 401
        assert client.post("/clear", headers=headers).status_code == 200


def test_token_mode_rejects_token_signed_with_other_key(make_app: Callable[..., Flask]) -> None:
    from authservice.application.services.tokens import JwtTokenService
    from authservice.domain.users.entities import Identity

    app = make_app(auth_mode="token")
    forged = JwtTokenService(secret="some-other-secret-that-is-long-enough-0000").issue(
        Identity(user_id=1, name="Ana", email="ana@x.com")
    )

    with app.test_client() as client:
        response = client.get("/session", headers={"Authorization": f"Bearer {forged}"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "Invalid token"}


def test_errors_follow_request_locale(make_app: Callable[..., Flask]) -> None:
    app = make_app(auth_mode="token")

    with app.test_client() as client:
        response = client.get("/session", headers={"Accept-Language": "uk"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "Токен не наданий"}


def test_unmatched_route_is_json_404(make_app: Callable[..., Flask]) -> None:
    app = make_app()

    with app.test_client() as client:
        missing = client.get("/nope")
        wrong_method = client.get("/register")

    assert missing.status_code == 404
    assert missing.get_json() == {"error": "Not found"}
    assert wrong_method.status_code == 405
    assert "POST" in wrong_method.headers["Allow"]


def test_service_endpoints(make_app: Callable[..., Flask]) -> None:
    app = make_app()

    with app.test_client() as client:
        index = client.get("/")
        api = client.get("/api")
        health = client.get("/api/health")

    assert index.get_json() == {"message": "Hello World!"}
    assert api.get_json() == {"message": "API is working!"}
    assert health.status_code == 200
    assert health.get_json()["ok"] is True
    assert health.get_json()["database"] == "ok"
    assert index.headers["X-Content-Type-Options"] == "nosniff"
    assert "X-Request-ID" in index.headers


def test_token_mode_scheme_is_case_insensitive_and_others_are_invalid(
    make_app: Callable[..., Flask],
) -> None:
    app = make_app(auth_mode="token")

    with app.test_client() as client:
        token = client.post("/register", json=ANA).get_json()["token"]

        lowercase = client.get("/session", headers={"Authorization": f"bearer {token}"})
        basic = client.get("/session", headers={"Authorization": "Basic abc"})
        bare = client.get("/session", headers={"Authorization": "Bearer "})

    assert lowercase.status_code == 200
    assert lowercase.get_json()["email"] == "ana@x.com"
    assert basic.status_code == 401
    assert basic.get_json() == {"error": "Invalid token"}
    assert bare.status_code == 401
    assert bare.get_json() == {"error": "Invalid token"}


def test_request_id_is_echoed_back(make_app: Callable[..., Flask]) -> None:
    app = make_app()

    with app.test_client() as client:
        response = client.get("/api", headers={"X-Request-ID": "req-42"})

    assert response.headers["X-Request-ID"] == "req-42"
