"""Comment model."""

from __future__ import annotations

from sqlalchemy import ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.core.extensions import db

from .base import BigIntPK, PKMixin, ReprMixin, TimestampMixin


class Comment(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """Reader comment attached to exactly one article."""

    __tablename__ = "comments"

    content: Mapped[str | None] = mapped_column(Text, nullable=True)
    article_id: Mapped[int] = mapped_column(
        BigIntPK, ForeignKey("articles.id"), nullable=False, index=True
    )
