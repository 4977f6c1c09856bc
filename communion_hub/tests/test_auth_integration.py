from __future__ import annotations

from flask import Flask

from communion_hub.app import CONTAINER_EXTENSION, create_app
from communion_hub.application.services.password_hashing import ScryptPasswordHasher
from communion_hub.container import Container
from communion_hub.shared.config import AppConfig


def _real_app() -> Flask:
    return create_app(AppConfig(seed_demo_events=False))


def test_register_login_me_logout_flow() -> None:
    app = _real_app()
    container: Container = app.extensions[CONTAINER_EXTENSION]
    assert isinstance(container.password_hasher, ScryptPasswordHasher)

    with app.test_client() as client:
        register = client.post(
            "/api/auth/register", json={"username": "alice", "password": "secret123"}
        )
        assert register.status_code == 201
        assert register.get_json() == {"id": 1, "username": "alice"}

        me = client.get("/api/auth/me")
        assert me.status_code == 200
        assert me.get_json() == {"id": 1, "username": "alice"}

        logout = client.post("/api/auth/logout")
        assert logout.status_code == 200
        assert client.get("/api/auth/me").status_code == 401

        login = client.post("/api/auth/login", json={"username": "alice", "password": "secret123"})
        assert login.status_code == 200
        assert "auth_token=" in login.headers["Set-Cookie"]
        assert client.get("/api/auth/me").get_json()["username"] == "alice"

    stored = container.store.get_user_by_username("alice")
    assert stored is not None
    assert "secret123" not in stored.password_hash
    assert container.password_hasher.verify("secret123", stored.password_hash)


def test_duplicate_registration_conflicts() -> None:
    app = _real_app()
    container: Container = app.extensions[CONTAINER_EXTENSION]

    with app.test_client() as client:
        first = client.post("/api/auth/register", json={"username": "alice", "password": "password1"})
        second = client.post("/api/auth/register", json={"username": "alice", "password": "password2"})

    assert first.status_code == 201
    assert second.status_code == 409
    assert second.get_json()["error"] == "user_already_exists"
    assert container.store.count_users() == 1


def test_wrong_password_is_rejected() -> None:
    app = _real_app()

    with app.test_client() as client:
        client.post("/api/auth/register", json={"username": "alice", "password": "secret123"})
        client.post("/api/auth/logout")
        response = client.post("/api/auth/login", json={"username": "alice", "password": "nope"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "invalid_credentials"}


def test_me_accepts_bearer_token(app: Flask) -> None:
    container: Container = app.extensions[CONTAINER_EXTENSION]
    user = container.store.create_user("bob", "hashed:pw")
    token = container.session_token_repository.replace_for_user(user.id).token

    with app.test_client() as client:
        ok = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        bad = client.get("/api/auth/me", headers={"Authorization": "Bearer nope"})

    assert ok.get_json() == {"id": user.id, "username": "bob"}
    assert bad.status_code == 401
    assert bad.get_json() == {"error": "unauthorized"}


def test_apps_do_not_share_state() -> None:
    first = _real_app()
    second = _real_app()

    with first.test_client() as client:
        client.post("/api/auth/register", json={"username": "alice", "password": "secret123"})

    assert second.extensions[CONTAINER_EXTENSION].store.count_users() == 0


def test_demo_events_seeded_when_enabled() -> None:
    app = create_app(AppConfig(seed_demo_events=True))

    with app.test_client() as client:
        events = client.get("/api/events").get_json()
        religious = client.get("/api/events?category=religious").get_json()

    assert len(events) == 6
    assert events[0]["title"] == "Community Potluck"
    assert [event["title"] for event in religious] == ["Interfaith Prayer Gathering"]


def test_health_counts_active_sessions(app: Flask) -> None:
    container: Container = app.extensions[CONTAINER_EXTENSION]
    user = container.store.create_user("carol", "hashed:pw")
    token = container.session_token_repository.replace_for_user(user.id).token

    with app.test_client() as client:
        before = client.get("/api/health").get_json()
        client.post("/api/auth/logout", headers={"Authorization": f"Bearer {token}"})
        after = client.get("/api/health").get_json()

    assert before["sessions"] == 1
    assert before["users"] == 1
    assert after["sessions"] == 0
