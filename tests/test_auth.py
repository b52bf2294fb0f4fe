from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from conftest import DEFAULT_PASSWORD, login
from config import settings
from main import app
from database import SessionLocal
from models.session import Session
from models.users import User
from utils.session_auth import purge_expired_sessions


def _register(client, username="alice", email="alice@example.com", password=DEFAULT_PASSWORD):
    return client.post("/api/register", json={"username": username, "email": email, "password": password})


def _user_count():
    with SessionLocal() as db:
        return db.query(User).count()


def _session_count():
    with SessionLocal() as db:
        return db.query(Session).count()


def _expire_all_sessions():
    with SessionLocal() as db:
        db.query(Session).update({Session.expires_at: datetime.now(timezone.utc) - timedelta(minutes=1)})
        db.commit()


def _cookie_attributes(resp):
    """Split a Set-Cookie header into the cookie name and its lower-cased attributes."""
    name_value, *attrs = [part.strip() for part in resp.headers["set-cookie"].split(";")]
    parsed = {}
    for attr in attrs:
        key, _, value = attr.partition("=")
        parsed[key.lower()] = value or True
    return name_value.split("=", 1)[0], parsed


def test_register_login_and_current_user(client):
    resp = _register(client)
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["username"] == "alice"
    assert body["email"] == "alice@example.com"
    assert body["isAdmin"] is False
    assert "password" not in body

    # Registration logs the new account in
    me = client.get("/api/user")
    assert me.status_code == 200
    assert me.json()["username"] == "alice"


def test_example_scenario(client):
    assert _register(client).status_code == 201
    client.post("/api/logout")

    resp = login(client, "alice", "password123")
    assert resp.status_code == 200
    assert "sid" in resp.cookies

    me = client.get("/api/user")
    assert me.status_code == 200
    assert me.json()["username"] == "alice"

    bad = login(client, "alice", "wrong-password")
    assert bad.status_code == 401


def test_register_duplicate_username(client):
    assert _register(client).status_code == 201
    other = TestClient(app)

    dup = _register(other, email="other@example.com")
    assert dup.status_code == 400
    assert dup.json()["detail"] == "Username already exists"
    assert _user_count() == 1
    # No session was created for the rejected attempt
    assert other.get("/api/user").status_code == 401


def test_register_duplicate_email(client):
    assert _register(client).status_code == 201
    dup = _register(TestClient(app), username="alice2", email="ALICE@example.com")
    assert dup.status_code == 400
    assert dup.json()["detail"] == "Email already exists"
    assert _user_count() == 1


def test_register_missing_field(client):
    resp = client.post("/api/register", json={"username": "alice", "email": "alice@example.com"})
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Validation error"
    assert any(err["loc"][-1] == "password" for err in resp.json()["errors"])
    assert _user_count() == 0
    assert client.get("/api/user").status_code == 401


def test_login_by_username_and_email(client, make_user):
    make_user("bob", "bob@example.com")

    by_name = TestClient(app)
    by_email = TestClient(app)
    assert login(by_name, "bob").status_code == 200
    assert login(by_email, "bob@example.com").status_code == 200

    assert by_name.get("/api/user").json() == by_email.get("/api/user").json()


def test_login_failure_message_is_generic(client, make_user):
    make_user("bob")
    unknown = login(client, "nobody")
    wrong = login(client, "bob", "not-the-password")

    assert unknown.status_code == wrong.status_code == 401
    assert unknown.json() == wrong.json() == {"detail": "Invalid username, email or password"}


def test_current_user_requires_session(client):
    assert client.get("/api/user").status_code == 401


def test_logout_destroys_session(client, make_user):
    make_user("bob")
    login(client, "bob")
    assert client.get("/api/user").status_code == 200

    assert client.post("/api/logout").status_code == 200
    assert client.get("/api/user").status_code == 401
    with SessionLocal() as db:
        assert db.query(Session).count() == 0


def test_logout_without_session_is_ok(client):
    assert client.post("/api/logout").status_code == 200


def test_expired_session_is_unauthenticated(client, make_user):
    make_user("bob")
    login(client, "bob")

    with SessionLocal() as db:
        db.query(Session).update({Session.expires_at: datetime.now(timezone.utc) - timedelta(minutes=1)})
        db.commit()

    assert client.get("/api/user").status_code == 401


def test_session_lifetime_is_seven_days(client, make_user):
    make_user("bob")
    before = datetime.now(timezone.utc).replace(tzinfo=None)
    login(client, "bob")

    with SessionLocal() as db:
        session = db.query(Session).one()
        expires_at = session.expires_at.replace(tzinfo=None)
    assert timedelta(days=7) - timedelta(minutes=1) < expires_at - before <= timedelta(days=7, minutes=1)


def test_deleted_user_is_unauthenticated(client, make_user):
    user = make_user("bob")
    login(client, "bob")

    with SessionLocal() as db:
        db.query(User).filter(User.id == user.id).delete()
        db.commit()

    assert client.get("/api/user").status_code == 401


def test_tampered_cookie_is_ignored(client):
    client.cookies.set("sid", "not-a-valid-token")
    assert client.get("/api/user").status_code == 401


def test_update_profile(client, make_user):
    make_user("bob")
    login(client, "bob")

    resp = client.patch("/api/user", json={"username": "bobby", "email": "bobby@example.com"})
    assert resp.status_code == 200, resp.text
    assert resp.json()["username"] == "bobby"
    assert resp.json()["email"] == "bobby@example.com"

    # Session follows the renamed account
    assert client.get("/api/user").json()["username"] == "bobby"


def test_update_profile_validation(client, make_user):
    make_user("bob")
    make_user("carol")
    login(client, "bob")

    assert client.patch("/api/user", json={"username": "bo"}).status_code == 400
    assert client.patch("/api/user", json={"username": "bob", "email": "not-an-email"}).status_code == 400

    taken = client.patch("/api/user", json={"username": "carol"})
    assert taken.status_code == 400
    assert taken.json()["detail"] == "Username already exists"

    taken = client.patch("/api/user", json={"username": "bob", "email": "carol@example.com"})
    assert taken.status_code == 400
    assert taken.json()["detail"] == "Email already exists"

    # Keeping one's own username and email is not a collision
    assert client.patch("/api/user", json={"username": "bob", "email": "bob@example.com"}).status_code == 200


def test_update_profile_requires_login(client):
    assert client.patch("/api/user", json={"username": "bobby"}).status_code == 401


def test_change_password(client, make_user):
    make_user("bob")
    login(client, "bob")

    resp = client.post(
        "/api/user/change-password",
        json={"currentPassword": DEFAULT_PASSWORD, "newPassword": "new-password-1"},
    )
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    # Still logged in, and only the new password works from now on
    assert client.get("/api/user").status_code == 200
    fresh = TestClient(app)
    assert login(fresh, "bob", DEFAULT_PASSWORD).status_code == 401
    assert login(fresh, "bob", "new-password-1").status_code == 200


def test_change_password_rejections(client, make_user):
    make_user("bob")
    login(client, "bob")

    wrong = client.post("/api/user/change-password", json={"currentPassword": "nope", "newPassword": "new-password-1"})
    assert wrong.status_code == 400
    assert wrong.json()["detail"] == "Current password is incorrect"

    short = client.post("/api/user/change-password", json={"currentPassword": DEFAULT_PASSWORD, "newPassword": "short"})
    assert short.status_code == 400

    anonymous = TestClient(app)
    assert anonymous.post(
        "/api/user/change-password", json={"currentPassword": DEFAULT_PASSWORD, "newPassword": "new-password-1"}
    ).status_code == 401


@pytest.mark.parametrize("environment, secure", [("production", True), ("development", False)])
def test_session_cookie_attributes(client, make_user, monkeypatch, environment, secure):
    monkeypatch.setattr(settings, "ENVIRONMENT", environment)
    make_user("bob")

    name, attrs = _cookie_attributes(login(client, "bob"))
    assert name == "sid"
    assert attrs["httponly"] is True
    assert attrs["samesite"].lower() == "lax"
    assert attrs["max-age"] == str(7 * 24 * 60 * 60)
    assert ("secure" in attrs) is secure


def test_purge_expired_sessions(client, make_user):
    make_user("bob")
    for _ in range(3):
        login(TestClient(app), "bob")
    _expire_all_sessions()

    with SessionLocal() as db:
        assert purge_expired_sessions(db) == 3
    assert _session_count() == 0


def test_login_drops_expired_sessions(client, make_user):
    make_user("bob")
    for _ in range(3):
        login(TestClient(app), "bob")
    _expire_all_sessions()

    login(client, "bob")
    client.post("/api/logout")
    assert _session_count() == 0


def test_update_profile_blank_email_keeps_address(client, make_user):
    make_user("bob")
    login(client, "bob")

    resp = client.patch("/api/user", json={"username": "bobby", "email": ""})
    assert resp.status_code == 200, resp.text
    assert resp.json()["username"] == "bobby"
    assert resp.json()["email"] == "bob@example.com"
