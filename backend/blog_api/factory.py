"""Application factory wiring Flask extensions, services and blueprints."""

from __future__ import annotations

import logging

from flask import Flask

from blog_api.container import Services
from blog_api.core.config import DEV_JWT_SECRET, BaseConfig, get_config
from blog_api.core.logger import configure_logging, init_app as init_logging

log = logging.getLogger(__name__)


def _check_jwt_secret(app: Flask) -> None:
    """Refuse the local signing key where an operator-supplied one is required."""
    secret = app.config.get("JWT_SECRET_KEY")
    if secret == DEV_JWT_SECRET:
        if app.config.get("REQUIRE_JWT_SECRET", True):
            raise RuntimeError("JWT_SECRET must be set to a private value in this environment.")
        log.warning("Using the built-in development JWT secret; set JWT_SECRET for real use.")


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    services: Services | None = None,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    :param config: Config class/object (or import path); defaults to ``APP_ENV``.
    :param services: Prebuilt service container, mainly for tests.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))
    _check_jwt_secret(app)

    from blog_api.core import proxy

    proxy.init_app(app)

    from blog_api.core import extensions

    extensions.init_app(app)

    from blog_api.core import auth

    auth.init_app(app)

    init_logging(app)

    from blog_api.core import cors

    cors.init_app(app)

    from blog_api.api import init_app as init_api

    init_api(app)

    from blog_api.core import errors

    errors.init_app(app)

    from blog_api import cli as app_cli

    app_cli.init_app(app)

    from blog_api import container

    container.init_app(app, services)

    return app
