"""User endpoints."""

from __future__ import annotations

from flask import Blueprint

from blog_api.api.deps import timing
from blog_api.api.v1.auth import register_user

bp = Blueprint("users", __name__)


@bp.post("/registrations")
@timing
def register():
    """Register a new user (legacy path kept for existing clients)."""

    return register_user()
