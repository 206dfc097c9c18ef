# File: tests/test_auth.py

from datetime import timedelta

from app.core.security import create_access_token
from app.models.user import User

PASSWORD = "Passw0rdOK"


def test_signup_creates_user_with_hashed_password(client, db):
    resp = client.post(
        "/api/v1/users/signup",
        json={"email": "Foo@Bar.com", "name": "Foo", "password": PASSWORD},
    )
    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] is True
    assert body["data"]["user"]["name"] == "Foo"

    user = db.get(User, body["data"]["user"]["id"])
    assert user.email == "foo@bar.com"
    assert user.password != PASSWORD
    assert user.password.startswith("$2")


def test_signup_duplicate_email_conflicts(client):
    payload = {"email": "dup@example.com", "name": "Dup", "password": PASSWORD}
    assert client.post("/api/v1/users/signup", json=payload).status_code == 201

    resp = client.post("/api/v1/users/signup", json=payload)
    assert resp.status_code == 409
    assert resp.json() == {"status": "failed", "message": "email already registered"}


def test_signup_rejects_weak_password(client):
    resp = client.post(
        "/api/v1/users/signup",
        json={"email": "weak@example.com", "name": "Weak", "password": "short"},
    )
    assert resp.status_code == 400
    body = resp.json()
    assert body["status"] == "failed"
    assert "password" in body["message"]


def test_signin_wrong_password(client):
    client.post(
        "/api/v1/users/signup",
        json={"email": "me@example.com", "name": "Me", "password": PASSWORD},
    )
    resp = client.post("/api/v1/users/signin", json={"email": "me@example.com", "password": "Wrong1234"})
    assert resp.status_code == 400

    unknown = client.post("/api/v1/users/signin", json={"email": "nobody@example.com", "password": PASSWORD})
    assert unknown.status_code == 400
    assert unknown.json()["message"] == resp.json()["message"]


def test_status_returns_current_user(client, auth_headers):
    resp = client.post("/api/v1/users/status", headers=auth_headers)
    assert resp.status_code == 200
    user = resp.json()["data"]["user"]
    assert user["email"] == "owner@example.com"
    assert user["name"] == "Owner"


def test_status_requires_token(client):
    resp = client.post("/api/v1/users/status")
    assert resp.status_code == 401
    assert resp.json()["status"] == "failed"


def test_status_rejects_malformed_and_expired_tokens(client):
    malformed = client.post("/api/v1/users/status", headers={"Authorization": "Bearer not-a-jwt"})
    assert malformed.status_code == 401

    wrong_scheme = client.post("/api/v1/users/status", headers={"Authorization": "Token abc"})
    assert wrong_scheme.status_code == 401

    expired = create_access_token({"id": 1}, expires_delta=timedelta(seconds=-1))
    resp = client.post("/api/v1/users/status", headers={"Authorization": f"Bearer {expired}"})
    assert resp.status_code == 401


def test_token_for_missing_user_is_rejected(client):
    token = create_access_token({"id": 9999})
    resp = client.get("/api/v1/users/profile", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 401


def test_profile_read_and_partial_update(client, auth_headers):
    resp = client.get("/api/v1/users/profile", headers=auth_headers)
    assert resp.status_code == 200
    assert resp.json()["data"] == {
        "email": "owner@example.com",
        "name": "Owner",
        "avatar_url": None,
        "phone": None,
        "bio": None,
    }

    resp = client.patch("/api/v1/users/profile", headers=auth_headers, json={"bio": "Maker of things"})
    assert resp.status_code == 200
    profile = resp.json()["data"]
    assert profile["bio"] == "Maker of things"
    assert profile["name"] == "Owner"


def test_profile_update_rejects_empty_body_and_bad_name(client, auth_headers):
    assert client.patch("/api/v1/users/profile", headers=auth_headers, json={}).status_code == 400
    assert client.patch("/api/v1/users/profile", headers=auth_headers, json={"name": None}).status_code == 400


def test_profile_update_requires_token(client):
    resp = client.patch("/api/v1/users/profile", json={"name": "Hacker"})
    assert resp.status_code == 401


def test_token_with_non_integer_id_is_unauthorized(client):
    for claim in ("abc", 1.5, True):
        token = create_access_token({"id": claim})
        resp = client.post("/api/v1/users/status", headers={"Authorization": f"Bearer {token}"})
        assert resp.status_code == 401
