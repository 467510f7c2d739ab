"""flask-jwt-extended callbacks: revocation lookup and 401 responses."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, current_app

from blog_api.core.errors import error_response
from blog_api.core.extensions import jwt

log = logging.getLogger(__name__)


def init_app(app: Flask) -> None:
    """Register JWT loaders on the shared :data:`jwt` manager.

    Every verification failure maps to ``401 {"error": ...}``; the
    library default of ``422`` for malformed tokens is overridden.
    """

    @jwt.token_in_blocklist_loader
    def _token_is_revoked(_jwt_header: dict[str, Any], jwt_payload: dict[str, Any]) -> bool:
        # The issued-token table is an allowlist: a missing jti means revoked.
        from blog_api.container import get_services

        jti = jwt_payload.get("jti")
        if not jti:
            return True
        return not get_services(current_app).token_store.is_live(jti)

    @jwt.unauthorized_loader
    def _missing_token(reason: str):
        log.info("auth.missing_token reason=%s", reason)
        return error_response(HTTPStatus.UNAUTHORIZED, "No token provided")

    @jwt.invalid_token_loader
    def _invalid_token(reason: str):
        log.info("auth.invalid_token reason=%s", reason)
        return error_response(HTTPStatus.UNAUTHORIZED, "Invalid token")

    @jwt.expired_token_loader
    def _expired_token(_jwt_header: dict[str, Any], _jwt_payload: dict[str, Any]):
        return error_response(HTTPStatus.UNAUTHORIZED, "Token has expired")

    @jwt.revoked_token_loader
    def _revoked_token(_jwt_header: dict[str, Any], _jwt_payload: dict[str, Any]):
        return error_response(HTTPStatus.UNAUTHORIZED, "Token has been revoked")

    if not app.config.get("JWT_SECRET_KEY"):
        raise RuntimeError("JWT_SECRET must be set before the application can issue tokens.")
