"""
Unit tests for configuration helpers and start-up checks.
"""

from __future__ import annotations

import pytest
from flask import Flask

from blog_api.container import get_services
from blog_api.core.config import (
    DEV_JWT_SECRET,
    DevelopmentConfig,
    ProductionConfig,
    TestingConfig,
    env_bool,
    env_int,
    get_config,
)
from blog_api.factory import create_app


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("TRUE", True), ("on", True), ("0", False), ("nope", False)],
)
def test_env_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("BLOG_FLAG", raw)
    assert env_bool("BLOG_FLAG") is expected


def test_env_bool_default(monkeypatch):
    monkeypatch.delenv("BLOG_FLAG", raising=False)
    assert env_bool("BLOG_FLAG", True) is True


def test_env_int(monkeypatch):
    monkeypatch.setenv("BLOG_HOURS", "48")
    assert env_int("BLOG_HOURS", 24) == 48
    monkeypatch.setenv("BLOG_HOURS", " ")
    assert env_int("BLOG_HOURS", 24) == 24


@pytest.mark.parametrize(
    "value, expected",
    [
        ("production", ProductionConfig),
        ("Testing", TestingConfig),
        ("unknown", DevelopmentConfig),
    ],
)
def test_get_config(monkeypatch, value, expected):
    monkeypatch.setenv("APP_ENV", value)
    assert get_config() is expected


def test_dev_secret_refused_when_required():
    class Strict(TestingConfig):
        JWT_SECRET_KEY = DEV_JWT_SECRET
        REQUIRE_JWT_SECRET = True

    with pytest.raises(RuntimeError):
        create_app(Strict)


def test_dev_secret_allowed_in_development():
    class Relaxed(TestingConfig):
        JWT_SECRET_KEY = DEV_JWT_SECRET
        REQUIRE_JWT_SECRET = False

    app = create_app(Relaxed)
    assert app.config["JWT_SECRET_KEY"] == DEV_JWT_SECRET


def test_services_container_is_registered(app):
    services = get_services(app)
    assert services.auth.token_store is services.token_store


def test_missing_container_raises():
    with pytest.raises(RuntimeError):
        get_services(Flask("bare"))
