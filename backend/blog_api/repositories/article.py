"""Repositories for :class:`Article` and its :class:`Image`."""

from __future__ import annotations

from sqlalchemy import Select
from sqlalchemy.orm import joinedload

from blog_api.models.article import Article, Image
from blog_api.repositories.base import BaseRepository


class ArticleRepository(BaseRepository[Article]):
    """Articles are always loaded with their image (LEFT OUTER JOIN)."""

    model = Article

    def _default_eagerload(self, stmt: Select) -> Select:
        return stmt.options(joinedload(Article.image))

    def _sortable_fields(self):
        return {
            "id": Article.id,
            "title": Article.title,
            "created_at": Article.created_at,
            "updated_at": Article.updated_at,
        }

    def _updatable_fields(self):
        return {"title", "short_description", "description", "image_id"}


class ImageRepository(BaseRepository[Image]):
    model = Image

    def _updatable_fields(self):
        return {"image", "image_alt"}
