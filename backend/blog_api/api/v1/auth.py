"""Authentication endpoints using the service layer."""

from __future__ import annotations

from flask import Blueprint, current_app

from blog_api.api.deps import (
    bearer_token,
    current_identity,
    json_body,
    json_response,
    require_auth,
    services,
    timing,
)
from blog_api.core.extensions import limiter
from blog_api.schemas import LoginSchema, RegisterSchema, SignInResponseSchema, UserSchema
from blog_api.services.auth.dto import LoginIn, LogoutIn, RegisterIn

bp = Blueprint("auth", __name__)

register_schema = RegisterSchema()
login_schema = LoginSchema()
user_schema = UserSchema()
sign_in_schema = SignInResponseSchema()


def _sign_in_rate_limit() -> str:
    return str(current_app.config.get("AUTH_SIGN_IN_RATE_LIMIT", "10 per minute"))


def register_user():
    """Create an account; shared by ``/auth`` and ``/users`` registrations."""

    data = register_schema.load(json_body())
    user = services().auth.register(RegisterIn(email=data["email"], password=data["password"]))
    return json_response({"user": user_schema.dump(user)}, status=201)


@bp.post("/registrations")
@timing
def register():
    """Register a new user. No token is issued."""

    return register_user()


@bp.post("/sign_in")
@limiter.limit(_sign_in_rate_limit)
@timing
def sign_in():
    """Authenticate credentials and issue an access token."""

    data = login_schema.load(json_body())
    result = services().auth.login(LoginIn(email=data["email"], password=data["password"]))
    return json_response(sign_in_schema.dump(result))


@bp.delete("/sign_out")
@timing
def sign_out():
    """Revoke the bearer token presented with the request."""

    services().auth.logout(LogoutIn(token=bearer_token()))
    return json_response({"message": "Signed out successfully"})


@bp.get("/me")
@require_auth
@timing
def me():
    """Return the authenticated user."""

    user = services().auth.whoami(current_identity())
    return json_response({"user": user_schema.dump(user)})
