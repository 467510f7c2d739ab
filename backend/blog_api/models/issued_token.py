"""Issued session tokens, keyed by ``jti``."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin


class IssuedToken(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    One row per live session token.

    The table keeps the historical ``jwt_denylists`` name, but a row here
    means the token is *valid*: it is inserted at sign-in and deleted at
    sign-out. A token whose ``jti`` has no row is treated as revoked.

    Fields
    ------
    jti : str
        Unique token identifier embedded in the JWT payload.
    exp : datetime
        Absolute expiry copied from the token; used to purge stale rows.
    """

    __tablename__ = "jwt_denylists"

    jti: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    exp: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    __table_args__ = (UniqueConstraint("jti", name="uq_jwt_denylists_jti"),)
