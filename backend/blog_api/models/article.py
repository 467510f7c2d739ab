"""Article and Image models."""

from __future__ import annotations

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.dialects import mysql
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog_api.core.extensions import db

from .base import BigIntPK, PKMixin, ReprMixin, TimestampMixin

# Base64 payloads exceed TEXT on MySQL.
LongText = Text().with_variant(mysql.LONGTEXT(), "mysql", "mariadb")


class Image(PKMixin, ReprMixin, db.Model):
    """Base64-encoded picture with its alt text; owned by at most one article."""

    __tablename__ = "images"

    image: Mapped[str | None] = mapped_column(LongText, nullable=True)
    image_alt: Mapped[str | None] = mapped_column(String(255), nullable=True)


class Article(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Published content entry.

    ``image_id`` is a plain nullable foreign key; the image row is created,
    merged and deleted by :class:`blog_api.services.articles.service.ArticleService`
    inside the same transaction as the article.
    """

    __tablename__ = "articles"

    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    short_description: Mapped[str | None] = mapped_column(String(255), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_id: Mapped[int | None] = mapped_column(
        BigIntPK, ForeignKey("images.id"), nullable=True
    )

    image: Mapped[Image | None] = relationship(Image, lazy="joined")
