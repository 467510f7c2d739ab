"""
DTOs for ArticleService.

Framework-agnostic contracts between the API layer and the service managing
the ``Article`` aggregate and its optional ``Image``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

# Keys accepted by a partial update.
ARTICLE_FIELDS = ("title", "short_description", "description")
IMAGE_FIELDS = ("image", "image_alt")

# --------------------------------------------------------------------------- #
# Input DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class ArticleCreateIn:
    """
    Input DTO for creating an article.

    ``image`` and ``image_alt`` must be given together or not at all.
    """

    title: str | None = None
    short_description: str | None = None
    description: str | None = None
    image: str | None = None
    image_alt: str | None = None


@dataclass(frozen=True, slots=True)
class ArticleUpdateIn:
    """
    Input DTO for a partial update.

    :param article_id: Article identifier.
    :type article_id: int
    :param changes: Only the supplied keys; see ``ARTICLE_FIELDS`` and ``IMAGE_FIELDS``.
    :type changes: dict[str, Any]
    """

    article_id: int
    changes: dict[str, Any] = field(default_factory=dict)


# --------------------------------------------------------------------------- #
# Output DTOs
# --------------------------------------------------------------------------- #


@dataclass(frozen=True, slots=True)
class ArticleOut:
    """Article joined with its image; image fields are ``None`` without one."""

    id: int
    title: str | None
    short_description: str | None
    description: str | None
    image_id: int | None
    image: str | None
    image_alt: str | None
    created_at: datetime | None
    updated_at: datetime | None
