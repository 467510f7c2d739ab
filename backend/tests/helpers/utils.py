"""Tiny helpers shared across test modules."""

from __future__ import annotations

from sqlalchemy import func, select

from blog_api.core.extensions import db

DEFAULT_PASSWORD = "Passw0rd!123"


def count(model) -> int:
    """Return the number of committed rows of ``model`` (bypasses the identity map)."""
    return int(db.session.execute(select(func.count()).select_from(model)).scalar_one())


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
