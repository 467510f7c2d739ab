"""
Integration tests for registration, sign-in, sign-out and ``/me``.
"""

from __future__ import annotations

from datetime import timedelta

import pytest

from blog_api.core.config import TestingConfig
from blog_api.core.extensions import db as _db
from blog_api.factory import create_app
from blog_api.models import IssuedToken, User
from tests.helpers.utils import DEFAULT_PASSWORD, bearer, count

SIGN_IN = "/api/v1/auth/sign_in"
SIGN_OUT = "/api/v1/auth/sign_out"
ME = "/api/v1/auth/me"


def _sign_in(client, email="author@example.com", password=DEFAULT_PASSWORD):
    return client.post(SIGN_IN, json={"email": email, "password": password})


class TestRegistration:
    @pytest.mark.parametrize("path", ["/api/v1/auth/registrations", "/api/v1/users/registrations"])
    def test_register_returns_user_without_token(self, client, path):
        resp = client.post(path, json={"email": "a@b.com", "password": "secret123"})

        assert resp.status_code == 201
        assert resp.get_json() == {"user": {"id": 1, "email": "a@b.com"}}
        assert count(IssuedToken) == 0

    def test_duplicate_email_is_conflict(self, client):
        payload = {"email": "a@b.com", "password": "secret123"}
        client.post("/api/v1/auth/registrations", json=payload)

        resp = client.post("/api/v1/auth/registrations", json=payload)

        assert resp.status_code == 409
        assert resp.get_json() == {"error": "User already exists"}
        assert count(User) == 1

    @pytest.mark.parametrize(
        "payload, field",
        [
            ({"email": "not-an-email", "password": "secret123"}, "email"),
            ({"email": "a@b.com", "password": "short"}, "password"),
            ({"password": "secret123"}, "email"),
        ],
    )
    def test_invalid_payload(self, client, payload, field):
        resp = client.post("/api/v1/auth/registrations", json=payload)

        assert resp.status_code == 400
        body = resp.get_json()
        assert body["error"] == "Validation failed"
        assert field in body["details"]
        assert count(User) == 0


class TestSignIn:
    def test_sign_in_returns_token_and_user(self, client, user):
        resp = _sign_in(client)

        assert resp.status_code == 200
        body = resp.get_json()
        assert body["user"] == {"id": user.id, "email": "author@example.com"}
        assert body["token"]
        assert count(IssuedToken) == 1

    def test_email_is_matched_case_insensitively(self, client, user):
        assert _sign_in(client, email="Author@Example.com").status_code == 200

    @pytest.mark.parametrize(
        "email, password",
        [("author@example.com", "wrong-password"), ("ghost@example.com", DEFAULT_PASSWORD)],
    )
    def test_bad_credentials(self, client, user, email, password):
        resp = _sign_in(client, email=email, password=password)

        assert resp.status_code == 401
        assert resp.get_json() == {"error": "Invalid credentials"}
        assert count(IssuedToken) == 0

    def test_each_sign_in_is_a_separate_session(self, client, user):
        first = _sign_in(client).get_json()["token"]
        second = _sign_in(client).get_json()["token"]

        client.delete(SIGN_OUT, headers=bearer(first))

        assert client.get(ME, headers=bearer(first)).status_code == 401
        assert client.get(ME, headers=bearer(second)).status_code == 200


class TestMe:
    def test_me_returns_current_user(self, client, user, auth_header):
        resp = client.get(ME, headers=auth_header)
        assert resp.status_code == 200
        assert resp.get_json() == {"user": {"id": user.id, "email": user.email}}

    def test_me_without_token(self, client):
        resp = client.get(ME)
        assert resp.status_code == 401
        assert resp.get_json() == {"error": "No token provided"}

    def test_me_with_garbage_token(self, client):
        resp = client.get(ME, headers=bearer("garbage"))
        assert resp.status_code == 401
        assert resp.get_json() == {"error": "Invalid token"}

    def test_expired_token(self, client, user, freeze_time):
        with freeze_time("2020-01-01 00:00:00"):
            token = _sign_in(client).get_json()["token"]

        resp = client.get(ME, headers=bearer(token))
        assert resp.status_code == 401
        assert resp.get_json() == {"error": "Token has expired"}

    def test_token_is_valid_just_before_expiry(self, client, user, app, freeze_time):
        lifetime = app.config["JWT_ACCESS_TOKEN_EXPIRES"]
        with freeze_time("2030-01-01 00:00:00") as frozen:
            token = _sign_in(client).get_json()["token"]
            frozen.tick(lifetime - timedelta(seconds=5))
            assert client.get(ME, headers=bearer(token)).status_code == 200

    def test_me_after_account_removed(self, client, user, auth_header, session):
        session.delete(user)
        session.commit()

        resp = client.get(ME, headers=auth_header)
        assert resp.status_code == 401


class TestSignOut:
    def test_sign_out_revokes_token(self, client, auth_header):
        resp = client.delete(SIGN_OUT, headers=auth_header)

        assert resp.status_code == 200
        assert resp.get_json() == {"message": "Signed out successfully"}
        assert count(IssuedToken) == 0

        again = client.get(ME, headers=auth_header)
        assert again.status_code == 401
        assert again.get_json() == {"error": "Token has been revoked"}

    def test_second_sign_out_fails(self, client, auth_header):
        client.delete(SIGN_OUT, headers=auth_header)
        resp = client.delete(SIGN_OUT, headers=auth_header)
        assert resp.status_code == 401

    def test_sign_out_without_token(self, client):
        resp = client.delete(SIGN_OUT)
        assert resp.status_code == 401
        assert resp.get_json() == {"error": "No token provided"}

    def test_sign_out_with_garbage_token(self, client, token):
        resp = client.delete(SIGN_OUT, headers=bearer("garbage"))
        assert resp.status_code == 401
        assert count(IssuedToken) == 1


class TestRateLimit:
    @pytest.fixture()
    def limited_client(self):
        class Limited(TestingConfig):
            RATELIMIT_ENABLED = True
            AUTH_SIGN_IN_RATE_LIMIT = "2 per minute"

        app = create_app(Limited)
        with app.app_context():
            _db.create_all()
            yield app.test_client()
            _db.session.remove()
            _db.drop_all()

    def test_sign_in_is_throttled(self, limited_client):
        payload = {"email": "nobody@example.com", "password": "whatever1"}
        statuses = [limited_client.post(SIGN_IN, json=payload).status_code for _ in range(3)]

        assert statuses == [401, 401, 429]
