"""Centralized JSON error handling for the API.

Every error leaves the application as ``{"error": "<message>"}`` with the
matching HTTP status. Validation failures additionally carry a ``details``
mapping. Internal failures never expose their cause; the traceback is logged
together with the request id.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, jsonify, request
from marshmallow import ValidationError as MarshmallowValidationError
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from blog_api.core.logger import ensure_request_id

log = logging.getLogger(__name__)

GENERIC_INTERNAL_MESSAGE = "Internal server error"


def error_body(message: str, details: dict[str, Any] | None = None) -> dict[str, Any]:
    """Build the JSON error payload shared by every handler."""
    body: dict[str, Any] = {"error": message}
    if details:
        body["details"] = details
    return body


def error_response(
    status: int, message: str, details: dict[str, Any] | None = None
) -> tuple[Response, int]:
    """Return a ``(response, status)`` pair with the JSON error payload."""
    return jsonify(error_body(message, details)), int(status)


class APIError(Exception):
    """
    Represent a JSON-serializable API error.

    Parameters
    ----------
    message : str
        Human-readable description presented to clients.
    status_code : int, optional
        HTTP status code to return. Defaults to ``400``.
    details : dict[str, Any] | None, optional
        Optional structured payload included in the response body.
    """

    status_code: int = HTTPStatus.BAD_REQUEST
    default_message: str = "Bad request"

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)
        if status_code is not None:
            self.status_code = int(status_code)
        self.details = details or {}

    def to_response(self) -> tuple[Response, int]:
        return error_response(self.status_code, self.message, self.details or None)


class BadRequest(APIError):
    """400 for invalid or incomplete input."""

    status_code = HTTPStatus.BAD_REQUEST
    default_message = "Bad request"


class Unauthorized(APIError):
    """401 when authentication fails."""

    status_code = HTTPStatus.UNAUTHORIZED
    default_message = "Unauthorized"


class NotFound(APIError):
    """404 when resources are missing."""

    status_code = HTTPStatus.NOT_FOUND
    default_message = "Resource not found"


class Conflict(APIError):
    """409 for uniqueness collisions."""

    status_code = HTTPStatus.CONFLICT
    default_message = "Conflict"


class InternalError(APIError):
    """500 for anything unexpected, persistence failures included."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    default_message = GENERIC_INTERNAL_MESSAGE


def _log_level_for(status: int):
    return log.error if status >= 500 else log.warning


def init_app(app: Flask) -> None:
    """
    Attach JSON error handlers to the Flask app.

    Notes
    -----
    - Service-layer errors are translated by
      :meth:`blog_api.services._shared.base.BaseService.translate_exceptions`.
    - 4xx are logged as warnings; 5xx as errors with ``exc_info``.
    """
    from blog_api.services._shared.base import BaseService
    from blog_api.services._shared.errors import ServiceError

    @app.errorhandler(APIError)
    def handle_api_error(err: APIError):
        _log_level_for(err.status_code)(
            "APIError: status=%s msg=%s request_id=%s",
            err.status_code,
            err.message,
            ensure_request_id(),
        )
        return err.to_response()

    @app.errorhandler(ServiceError)
    def handle_service_error(err: ServiceError):
        translated = BaseService.translate_exceptions(err)
        if isinstance(translated, APIError):
            return handle_api_error(translated)
        return handle_unexpected_error(err)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = int(err.code or HTTPStatus.INTERNAL_SERVER_ERROR)
        message = (err.description or HTTPStatus(status).phrase).strip()
        if status == HTTPStatus.NOT_FOUND and request:
            message = f"Route '{request.path}' not found"
        _log_level_for(status)(
            "HTTPException: status=%s detail=%s request_id=%s",
            status,
            message,
            ensure_request_id(),
        )
        return error_response(status, message)

    @app.errorhandler(MarshmallowValidationError)
    def handle_validation_error(err: MarshmallowValidationError):
        log.warning("ValidationError: request_id=%s", ensure_request_id())
        messages = err.messages if isinstance(err.messages, dict) else {"_schema": err.messages}
        return error_response(HTTPStatus.BAD_REQUEST, "Validation failed", messages)

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(err: SQLAlchemyError):
        log.error("DatabaseError: request_id=%s", ensure_request_id(), exc_info=err)
        return InternalError().to_response()

    @app.errorhandler(Exception)
    def handle_unexpected_error(err: Exception):
        log.error("Unhandled exception: request_id=%s", ensure_request_id(), exc_info=err)
        return InternalError().to_response()
