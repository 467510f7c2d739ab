"""Pytest fixtures: one fresh application and in-memory database per test.

Flask-SQLAlchemy shares a single connection for ``sqlite:///:memory:``, so
rows committed by factories are visible to requests made through the test
client, and dropping the app discards the whole database.
"""

from __future__ import annotations

import os

import pytest

from blog_api.core.config import TestingConfig
from blog_api.core.extensions import db as _db
from blog_api.factory import create_app
from tests.helpers.utils import DEFAULT_PASSWORD


@pytest.fixture()
def app():
    """Create a Flask application configured for testing.

    Yields
    ------
    flask.Flask
        Application with :class:`TestingConfig`, its tables created and an
        application context pushed for the duration of the test.
    """
    # Ensure env-based config does not leak into tests
    os.environ.pop("DATABASE_URL", None)
    app = create_app(TestingConfig)
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def db(app):
    """Database extension bound to the testing application."""
    return _db


@pytest.fixture()
def session(db):
    """The scoped session of the test's application context."""
    return db.session


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


# -- Hook up Factory Boy to pytest SQLAlchemy session --------------------------
@pytest.fixture(autouse=True)
def _factories_session(request):
    """Wire Factory Boy's session helper when the test uses the database."""
    from tests.factories import SQLAlchemySession

    if "app" in request.fixturenames:
        SQLAlchemySession.set(request.getfixturevalue("session"))
    yield
    SQLAlchemySession.set(None)


# -- Authentication helpers ---------------------------------------------------
@pytest.fixture()
def user(session):
    from tests.factories.user import UserFactory

    return UserFactory(email="author@example.com", password=DEFAULT_PASSWORD)


@pytest.fixture()
def token(client, user):
    """Sign in ``user`` through the API and return the issued token."""
    resp = client.post(
        "/api/v1/auth/sign_in",
        json={"email": "author@example.com", "password": DEFAULT_PASSWORD},
    )
    assert resp.status_code == 200, resp.get_json()
    return resp.get_json()["token"]


@pytest.fixture()
def auth_header(token):
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def freeze_time():
    """Factory returning :func:`freezegun.freeze_time`.

    Examples
    --------
    >>> def test_with_frozen_time(freeze_time):
    ...     with freeze_time("2024-01-01"):
    ...         ...
    """
    from freezegun import freeze_time as _freeze_time

    def _factory(target: str | None = None):
        return _freeze_time(target or "2024-01-01")

    return _factory
