"""Polymorphic like/dislike counters."""

from __future__ import annotations

import enum

from sqlalchemy import BigInteger, Integer, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.core.extensions import db

from .base import PKMixin, ReprMixin, TimestampMixin


class LikeableType(str, enum.Enum):
    """Entity kinds that can carry like/dislike counters.

    Values are the tags stored in ``likes.likeable_type``.
    """

    ARTICLE = "Article"
    COMMENT = "Comment"

    @classmethod
    def parse(cls, raw: str) -> LikeableType:
        """Resolve a tag case-insensitively (``"article"`` → ``ARTICLE``).

        :raises ValueError: For unknown tags.
        """
        for member in cls:
            if member.value.lower() == str(raw).strip().lower():
                return member
        raise ValueError(f"Unknown likeable type: {raw!r}")


class Like(PKMixin, ReprMixin, TimestampMixin, db.Model):
    """
    Counter row for one ``(likeable_type, likeable_id)`` pair.

    Referential integrity of the pair is checked by the service layer only.
    """

    __tablename__ = "likes"

    likes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    dislikes: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    likeable_type: Mapped[str] = mapped_column(String(255), nullable=False)
    likeable_id: Mapped[int] = mapped_column(BigInteger, nullable=False)

    __table_args__ = (
        UniqueConstraint("likeable_type", "likeable_id", name="uq_likes_likeable"),
    )
