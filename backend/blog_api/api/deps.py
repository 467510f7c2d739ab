"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar

from flask import Response, current_app, g, jsonify, request
from flask_jwt_extended import get_jwt, verify_jwt_in_request

from blog_api.container import Services, get_services
from blog_api.services.auth.dto import CurrentIdentity
from blog_api.services.auth.service import AuthService

F = TypeVar("F", bound=Callable[..., Any])


def services() -> Services:
    """Return the service container of the running application."""

    return get_services(current_app)


def json_body() -> dict[str, Any]:
    """Return the request JSON object, or ``{}`` when absent or not an object."""

    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


def bearer_token() -> str | None:
    """Extract ``<token>`` from ``Authorization: Bearer <token>``."""

    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_auth(func: F) -> F:
    """Ensure the request carries a valid, live JWT and expose its identity.

    Signature, expiry and the issued-token lookup are enforced by
    flask-jwt-extended; the verified claims land on ``g.current_identity``.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        verify_jwt_in_request(optional=False)
        g.current_identity = AuthService.identity_from_claims(get_jwt())
        return func(*args, **kwargs)

    return wrapper  # type: ignore[return-value]


def current_identity() -> CurrentIdentity:
    return g.current_identity


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""

    response = jsonify(payload)
    response.status_code = status
    return response


def empty_response(status: int = 204) -> Response:
    return Response(status=status)


def timing(func: F) -> F:
    """Decorator capturing handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            request_endpoint = getattr(request, "endpoint", None)
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request_endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
