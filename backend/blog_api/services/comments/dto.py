# blog_api/services/comments/dto.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class CommentCreateIn:
    """
    :param article_id: Article the comment belongs to.
    :type article_id: int
    :param content: Comment body.
    :type content: str
    """

    article_id: int
    content: str


@dataclass(frozen=True, slots=True)
class CommentUpdateIn:
    comment_id: int
    content: str


@dataclass(frozen=True, slots=True)
class CommentOut:
    id: int
    article_id: int
    content: str | None
    created_at: datetime | None
    updated_at: datetime | None
